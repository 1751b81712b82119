from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from shini.core.errors import (
    IniFileNotFoundError,
    IniFormatError,
    IniReadError,
    InvalidArgumentError,
    NoIniFileFoundError,
)
from shini.core.models import DEFAULT_ENCODING, DEFAULT_PATTERN
from shini.core.store import ConfigStore
from shini.parsers import parse_lines

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _split_lines(text: str) -> List[str]:
    # Split on LF only; a trailing line without terminator is still a line.
    # CR from CRLF endings is removed by the parser's whitespace trim.
    return text.split("\n")


def parse_ini_text(
    text: str,
    *,
    source: Optional[str] = None,
    strict: bool = False,
) -> ConfigStore:
    if text is None:
        logger.error("No INI text provided for parsing")
        raise InvalidArgumentError("parse_ini_text() requires text")

    try:
        entries = parse_lines(_split_lines(text), strict=strict, source=source)
    except IniFormatError as e:
        logger.error("Malformed INI line: %s", e.message)
        raise
    store = ConfigStore.from_entries(entries, source=source)
    logger.debug(
        "Parsed %d entries in %d sections from %s",
        len(store),
        len(store.sections()),
        source or "<text>",
    )
    return store


def parse_ini(
    path: Optional[PathLike],
    *,
    encoding: str = DEFAULT_ENCODING,
    strict: bool = False,
) -> ConfigStore:
    """
    Parse one INI file into a new ConfigStore.

    Raises IniFileNotFoundError when `path` is not a regular file and
    IniReadError when it exists but cannot be read or decoded.
    """
    if path is None or str(path) == "":
        logger.error("No INI file path provided for parsing")
        raise InvalidArgumentError("parse_ini() requires a file path")

    p = Path(path)
    if not p.is_file():
        logger.error("INI file not found: %s", p)
        raise IniFileNotFoundError(str(p))

    try:
        # newline="" keeps a lone CR inside its line, same as parse_ini_text
        with p.open("r", encoding=encoding, newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("INI file could not be read: %s (%s)", p, e)
        raise IniReadError(str(p), str(e)) from e

    return parse_ini_text(text, source=str(p), strict=strict)


def find_ini_file(directory: PathLike = ".", pattern: str = DEFAULT_PATTERN) -> Path:
    """
    Return the first regular file in `directory` (not recursive) whose name
    matches `pattern`, in directory-listing order.
    """
    root = Path(directory)
    if root.is_dir():
        try:
            for p in root.iterdir():
                if fnmatch.fnmatchcase(p.name, pattern) and p.is_file():
                    return p
        except OSError as e:
            logger.error("Cannot list %s: %s", root, e)
            raise NoIniFileFoundError(str(root), pattern) from e

    logger.error("No INI file found in %s (pattern %r)", root, pattern)
    raise NoIniFileFoundError(str(root), pattern)


@dataclass(frozen=True)
class LoadedIni:
    store: ConfigStore
    path: Path
    discovered: bool


def find_and_load(
    path: Optional[PathLike] = None,
    *,
    search_dir: PathLike = ".",
    pattern: str = DEFAULT_PATTERN,
    strict: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> LoadedIni:
    """
    Resolution order:
      explicit `path` (if it is a file) ->
      first `pattern` match directly inside `search_dir`
    """
    if path is not None and str(path) != "":
        explicit = Path(path)
        if explicit.is_file():
            logger.info("Processing INI file: %s", explicit)
            store = parse_ini(explicit, encoding=encoding, strict=strict)
            return LoadedIni(store=store, path=explicit, discovered=False)
        logger.warning(
            "The specified INI file was not found: %s. Searching %s for %s",
            explicit,
            search_dir,
            pattern,
        )

    found = find_ini_file(search_dir, pattern)
    logger.info("Found INI file, processing: %s", found)
    store = parse_ini(found, encoding=encoding, strict=strict)
    return LoadedIni(store=store, path=found, discovered=True)


def load_ini_config(path: Optional[PathLike] = None, **kwargs) -> ConfigStore:
    """Shorthand for `find_and_load(path, **kwargs).store`."""
    return find_and_load(path, **kwargs).store
