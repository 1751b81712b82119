"""Raising lookups against a parsed ConfigStore."""

from __future__ import annotations

import logging
from typing import Optional

from shini.core.errors import InvalidArgumentError, MissingKeyError, MissingSectionError
from shini.core.store import ConfigStore

logger = logging.getLogger(__name__)

__all__ = ["get_value"]


def get_value(store: Optional[ConfigStore], section: str, key: str) -> str:
    """Return the value stored under (section, key).

    Raises:
        InvalidArgumentError: store is None, or section/key is empty.
        MissingSectionError: the section holds no entries at all.
        MissingKeyError: the section exists but does not hold ``key``.

    Every failure is also logged as a warning on the ``shini`` logger.
    """
    if store is None or not _non_empty(section) or not _non_empty(key):
        logger.warning("get_value() called with insufficient arguments")
        raise InvalidArgumentError(
            "get_value() requires a store, a section and a key",
            section=section,
            key=key,
        )

    value = store.get(section, key)
    if value is not None:
        return value

    if not store.has_section(section):
        logger.warning("INI section [%s] not found", section)
        raise MissingSectionError(section, key)

    logger.warning("Key '%s' not found in section [%s]", key, section)
    raise MissingKeyError(section, key)


def _non_empty(value: object) -> bool:
    return isinstance(value, str) and value != ""
