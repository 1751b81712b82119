"""shini - INI files for shell scripts and Python."""

from __future__ import annotations

import logging

from shini.core.accessor import get_value
from shini.core.errors import (
    ExitCode,
    IniFileNotFoundError,
    IniFormatError,
    IniReadError,
    InvalidArgumentError,
    LookupFailure,
    MissingKeyError,
    MissingSectionError,
    NoIniFileFoundError,
    SettingsError,
    ShiniError,
)
from shini.core.loader import (
    LoadedIni,
    find_and_load,
    find_ini_file,
    load_ini_config,
    parse_ini,
    parse_ini_text,
)
from shini.core.store import ConfigStore
from shini.parsers import DEFAULT_SECTION, ParsedKV, parse_lines

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Parsing
    "parse_ini",
    "parse_ini_text",
    "parse_lines",
    "ParsedKV",
    "DEFAULT_SECTION",
    # Store / lookup
    "ConfigStore",
    "get_value",
    # Discovery
    "find_ini_file",
    "find_and_load",
    "load_ini_config",
    "LoadedIni",
    # Errors
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
