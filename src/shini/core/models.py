from __future__ import annotations

import codecs
from typing import List

from pydantic import BaseModel, Field, field_validator


# ================================
# Load settings (defaults only)
# ================================

DEFAULT_PATTERN = "*.ini"
DEFAULT_ENCODING = "utf-8"


class LoadSettings(BaseModel):
    """
    Defaults live here.
    Global/repo/CLI overrides are merged by core/config.py (do NOT load config in defaults).
    """

    pattern: str = Field(default=DEFAULT_PATTERN, min_length=1)
    encoding: str = Field(default=DEFAULT_ENCODING, min_length=1)
    strict: bool = False

    @field_validator("pattern")
    @classmethod
    def _pattern_must_be_a_name(cls, v: str) -> str:
        # discovery is one level deep, so the pattern matches file names only
        if "/" in v or "\\" in v:
            raise ValueError("load.pattern must not contain path separators")
        return v

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v


# ================================
# UI config (defaults only)
# ================================

DEFAULT_EDITORS = ["cursor", "code", "subl", "zed", "nvim", "vim"]


class UIConfig(BaseModel):
    """
    UI preferences. Defaults live here.
    Global/repo/CLI overrides are merged by core/config.py.
    """

    editors: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EDITORS),
        description="Preferred editor launchers. First match wins. Can also override at runtime with SHINI_EDITOR, VISUAL, or EDITOR.",
    )
