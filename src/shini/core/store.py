from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from shini.parsers.types import ParsedKV

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigStore(BaseModel):
    """
    Parsed INI contents: section -> (key -> value).

    Populated once by the loader, read-only afterwards. A section exists
    only while it holds at least one key, so `has_section` doubles as the
    "missing section vs missing key" probe.
    """

    data: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    lines: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    source: Optional[str] = None

    @classmethod
    def from_entries(cls, entries: Iterable[ParsedKV], *, source: Optional[str] = None) -> "ConfigStore":
        store = cls(source=source)
        for e in entries:
            store._put(e)
        return store

    def _put(self, entry: ParsedKV) -> None:
        # last occurrence wins
        self.data.setdefault(entry.section, {})[entry.key] = entry.value
        self.lines.setdefault(entry.section, {})[entry.key] = entry.line

    # ----------------------------
    # Membership / iteration
    # ----------------------------

    def has_section(self, section: str) -> bool:
        return bool(self.data.get(section))

    def has_key(self, section: str, key: str) -> bool:
        return key in self.data.get(section, {})

    def sections(self) -> List[str]:
        return list(self.data)

    def keys(self, section: str) -> List[str]:
        return list(self.data.get(section, {}))

    def items(self) -> List[Tuple[str, str, str]]:
        """All (section, key, value) triples in parse order."""
        return [(s, k, v) for s, kv in self.data.items() for k, v in kv.items()]

    def line_of(self, section: str, key: str) -> Optional[int]:
        return self.lines.get(section, {}).get(key)

    def flat(self) -> Dict[str, str]:
        """
        Composite-key view: {"section.key": value}.
        Ambiguous when names contain '.', use the two-level API for lookups.
        """
        return {f"{s}.{k}": v for s, k, v in self.items()}

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        section, key = item
        return self.has_key(section, key)

    def __len__(self) -> int:
        return sum(len(kv) for kv in self.data.values())

    # ----------------------------
    # Non-raising getters
    # ----------------------------

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.data.get(section, {}).get(key, default)

    def get_str(self, section: str, key: str, default: str = "") -> str:
        """Value, or `default` when missing or blank."""
        value = self.get(section, key)
        return value if value else default

    def get_int(self, section: str, key: str, default: int = 0, minimum: Optional[int] = None) -> int:
        raw = self.get(section, key)
        if raw is None:
            return default
        try:
            parsed = int(raw)
        except ValueError:
            return default
        if minimum is not None and parsed < minimum:
            return minimum
        return parsed

    def get_float(self, section: str, key: str, default: float = 0.0, minimum: Optional[float] = None) -> float:
        raw = self.get(section, key)
        if raw is None:
            return default
        try:
            parsed = float(raw)
        except ValueError:
            return default
        if minimum is not None and parsed < minimum:
            return minimum
        return parsed

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        raw = (self.get(section, key) or "").lower()
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
        return default
