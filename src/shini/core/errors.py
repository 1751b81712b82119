"""Error hierarchy for shini."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional

__all__ = [
    "ShiniError",
    "InvalidArgumentError",
    "IniFileNotFoundError",
    "IniReadError",
    "NoIniFileFoundError",
    "LookupFailure",
    "MissingSectionError",
    "MissingKeyError",
    "IniFormatError",
    "SettingsError",
    "ExitCode",
]


class ExitCode(IntEnum):
    OK = 0
    NOT_FOUND = 1
    USAGE = 2
    FORMAT = 3


class ShiniError(Exception):
    """Base error for everything raised by shini."""

    exit_code: ExitCode = ExitCode.NOT_FOUND

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: Dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidArgumentError(ShiniError):
    """Raised when a store, section, key or path argument is empty or absent."""

    exit_code = ExitCode.USAGE

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="INVALID_ARGUMENT", message=message, details=details)


class IniFileNotFoundError(ShiniError):
    """Raised when an INI file does not exist."""

    def __init__(self, path: str, *, code: str = "FILE_NOT_FOUND", message: Optional[str] = None) -> None:
        super().__init__(
            code=code,
            message=message or f"INI file not found: {path}",
            details={"path": path},
        )

    @property
    def path(self) -> str:
        return self.details["path"]


class IniReadError(IniFileNotFoundError):
    """Raised when an INI file exists but cannot be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            path,
            code="FILE_UNREADABLE",
            message=f"INI file could not be read: {path} ({reason})",
        )
        self.details["reason"] = reason


class NoIniFileFoundError(IniFileNotFoundError):
    """Raised when neither an explicit path nor directory discovery yields a file."""

    def __init__(self, search_dir: str, pattern: str) -> None:
        super().__init__(
            search_dir,
            code="NO_INI_FILE",
            message=f"No INI file found in {search_dir} (pattern {pattern!r})",
        )
        self.details["pattern"] = pattern


class LookupFailure(ShiniError):
    """Common base for section/key lookup misses."""

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def key(self) -> str:
        return self.details["key"]


class MissingSectionError(LookupFailure):
    """Raised when the queried section holds no entries at all."""

    def __init__(self, section: str, key: str) -> None:
        super().__init__(
            code="MISSING_SECTION",
            message=f"INI section [{section}] not found",
            details={"section": section, "key": key},
        )


class MissingKeyError(LookupFailure):
    """Raised when the section exists but does not hold the key."""

    def __init__(self, section: str, key: str) -> None:
        super().__init__(
            code="MISSING_KEY",
            message=f"Key '{key}' not found in section [{section}]",
            details={"section": section, "key": key},
        )


class IniFormatError(ShiniError):
    """Raised in strict mode for a line the tolerant parser would skip."""

    exit_code = ExitCode.FORMAT

    def __init__(self, line_no: int, text: str, reason: str, source: Optional[str] = None) -> None:
        where = f"{source}:{line_no}" if source else f"line {line_no}"
        super().__init__(
            code="INI_FORMAT",
            message=f"{where}: {reason}: {text!r}",
            details={"line": line_no, "text": text, "reason": reason, "source": source},
        )

    @property
    def line(self) -> int:
        return self.details["line"]


class SettingsError(ShiniError):
    """Raised when shini's own TOML settings are malformed."""

    exit_code = ExitCode.USAGE

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(code="SETTINGS_INVALID", message=message, details={"path": path})
