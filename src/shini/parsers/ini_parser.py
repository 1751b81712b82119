from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from shini.core.errors import IniFormatError
from shini.parsers.common import is_comment, section_name, strip_ascii
from shini.parsers.types import ParsedKV

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "default"


def parse_lines(
    lines: Iterable[str],
    *,
    strict: bool = False,
    source: Optional[str] = None,
) -> List[ParsedKV]:
    """
    Tokenize INI lines into ParsedKV entries, in file order.

    Supported:
      [section]          (name kept verbatim, not trimmed)
      key = value        (split on the first `=`; value may contain `=`)
      # comment / ; comment / blank lines

    Entries before any header belong to the "default" section.
    Lines with an empty key or without `=` are skipped, unless `strict`
    is set, in which case they raise IniFormatError.
    """
    out: List[ParsedKV] = []
    section = DEFAULT_SECTION

    for idx, raw in enumerate(lines, start=1):
        line = strip_ascii(raw)
        if is_comment(line):
            continue

        name = section_name(line)
        if name is not None:
            section = name
            continue

        if "=" not in line:
            if strict:
                raise IniFormatError(idx, line, "expected 'key=value' or '[section]'", source)
            logger.debug("Skipping line %d without '=': %r", idx, line)
            continue

        key, val = line.split("=", 1)
        key = strip_ascii(key)
        if not key:
            if strict:
                raise IniFormatError(idx, line, "empty key", source)
            logger.debug("Skipping line %d with empty key: %r", idx, line)
            continue

        out.append(ParsedKV(section=section, key=key, value=strip_ascii(val), line=idx))

    return out
