from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from shini.cli.utils.loading import load_or_exit, settings_or_exit
from shini.core.accessor import get_value
from shini.core.errors import ExitCode, InvalidArgumentError, LookupFailure


def get_cmd(
    section: str = typer.Argument(..., help="Section name (use 'default' for keys before any header)."),
    key: str = typer.Argument(..., help="Key within the section."),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", dir_okay=False, help="INI file. Defaults to the first *.ini in the working directory."
    ),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Print this instead of failing when the section or key is missing."
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Reject malformed lines (overrides config if set)."
    ),
) -> None:
    """Print one value, e.g. `db_host=$(shini get database host)`."""
    settings = settings_or_exit(strict)
    loaded = load_or_exit(file, settings)

    try:
        value = get_value(loaded.store, section, key)
    except InvalidArgumentError:
        raise typer.Exit(code=int(ExitCode.USAGE))
    except LookupFailure:
        if default is None:
            raise typer.Exit(code=int(ExitCode.NOT_FOUND))
        value = default

    typer.echo(value)
