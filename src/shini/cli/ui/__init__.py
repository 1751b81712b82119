from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from shini.cli.ui.formatters import (
    render_entries_table,
    render_sections_table,
    render_summary,
)

THEME = Theme(
    {
        "section": "bold cyan",
        "key": "bold",
        "path": "magenta",
        "muted": "dim",
        "ok": "green",
        "warn": "yellow",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(console=Console(theme=THEME), verbose=verbose)


def run_tui(*args, **kwargs) -> None:
    # textual is imported lazily so plain output never pays for it
    from shini.cli.ui.tui import run_tui as _run

    _run(*args, **kwargs)


__all__ = [
    "UI",
    "get_ui",
    "render_entries_table",
    "render_sections_table",
    "render_summary",
    "run_tui",
]
