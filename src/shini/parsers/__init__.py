from __future__ import annotations

from shini.parsers.ini_parser import DEFAULT_SECTION, parse_lines
from shini.parsers.types import ParsedKV

__all__ = ["DEFAULT_SECTION", "ParsedKV", "parse_lines"]
