from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from shini.cli.ui import (
    get_ui,
    render_entries_table,
    render_sections_table,
    render_summary,
    run_tui,
)
from shini.cli.utils.loading import load_or_exit, settings_or_exit
from shini.core.errors import ExitCode

logger = logging.getLogger(__name__)


def _should_use_tui(plain: bool) -> bool:
    # TUI only when interactive to avoid breaking pipes.
    if plain:
        return False
    return sys.stdout.isatty()


def show_cmd(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", dir_okay=False, help="INI file. Defaults to the first *.ini in the working directory."
    ),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Only show this section."),
    plain: bool = typer.Option(False, "--plain", help="Disable TUI and print a plain Rich table."),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Reject malformed lines."),
) -> None:
    """Show all parsed entries."""
    verbose = bool((ctx.obj or {}).get("verbose"))
    ui = get_ui(verbose=verbose)
    settings = settings_or_exit(strict)
    loaded = load_or_exit(file, settings)
    store = loaded.store

    if section is not None and not store.has_section(section):
        logger.warning("INI section [%s] not found", section)
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    if ui.verbose:
        ui.console.print("[bold]Settings sources:[/bold]")
        ui.console.print(f"  global: {settings.global_path or '-'}")
        ui.console.print(f"  local:  {settings.local_path or '-'}")
        ui.console.print(f"  ini:    {loaded.path}{' (discovered)' if loaded.discovered else ''}")
        ui.console.print()

    if _should_use_tui(plain):
        run_tui(store=store, section=section, ui_config=settings.ui_config)
        return

    render_entries_table(ui.console, store, section=section)
    if ui.verbose:
        render_summary(ui.console, store)


def sections_cmd(
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", dir_okay=False, help="INI file. Defaults to the first *.ini in the working directory."
    ),
    counts: bool = typer.Option(False, "--counts", help="Print a table with the number of keys per section."),
) -> None:
    """Print section names, one per line."""
    settings = settings_or_exit()
    loaded = load_or_exit(file, settings)
    if counts:
        render_sections_table(get_ui().console, loaded.store)
        return
    for name in loaded.store.sections():
        typer.echo(name)
