from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedKV:
    """ A normalized section/key/value triple from an INI file."""
    section: str
    key: str
    value: str
    line: int
