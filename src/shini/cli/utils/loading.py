from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from shini.core.config import LoadedSettings, load_settings
from shini.core.errors import ShiniError
from shini.core.loader import LoadedIni, find_and_load

logger = logging.getLogger(__name__)


def settings_or_exit(strict: Optional[bool] = None) -> LoadedSettings:
    cli_overrides: Dict[str, Any] = {"load": {}}
    if strict is not None:
        cli_overrides["load"]["strict"] = bool(strict)
    try:
        return load_settings(start_dir=Path.cwd(), cli_overrides=cli_overrides)
    except ShiniError as e:
        logger.error("%s", e.message)
        raise typer.Exit(code=int(e.exit_code))


def load_or_exit(file: Optional[Path], settings: LoadedSettings) -> LoadedIni:
    """
    Explicit --file first, then discovery in the working directory.
    Library errors are already logged; only the exit code is decided here.
    """
    opts = settings.load
    try:
        return find_and_load(
            file,
            search_dir=Path.cwd(),
            pattern=opts.pattern,
            strict=opts.strict,
            encoding=opts.encoding,
        )
    except ShiniError as e:
        raise typer.Exit(code=int(e.exit_code))
