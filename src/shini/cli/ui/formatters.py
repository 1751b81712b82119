from __future__ import annotations

from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from shini.core.store import ConfigStore


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def _display_name(section: str) -> str:
    # whitespace-only section names are legal; make them visible
    return section if section.strip() else repr(section)


# ----------------------------
# Entries table
# ----------------------------

def entry_rows(store: ConfigStore, section: Optional[str] = None) -> List[Tuple[str, str, str, str]]:
    rows = []
    for s, k, v in store.items():
        if section is not None and s != section:
            continue
        line = store.line_of(s, k)
        rows.append((s, k, v, str(line or "")))
    return rows


def render_entries_table(
    console: Console,
    store: ConfigStore,
    *,
    section: Optional[str] = None,
) -> None:
    rows = entry_rows(store, section)
    if not rows:
        console.print("[muted]No entries.[/muted]")
        return

    table = Table(title=f"Entries ({len(rows)})", show_lines=False)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")
    table.add_column("Line", justify="right", no_wrap=True)

    for s, k, v, line in rows:
        table.add_row(_display_name(s), k, _short(v), line)

    console.print(table)


# ----------------------------
# Sections / summary
# ----------------------------

def section_counts(store: ConfigStore) -> List[Tuple[str, int]]:
    return [(s, len(store.keys(s))) for s in store.sections()]


def render_sections_table(console: Console, store: ConfigStore) -> None:
    table = Table(title=f"Sections ({len(store.sections())})", show_lines=False)
    table.add_column("Section", style="section")
    table.add_column("Keys", justify="right")
    for name, count in section_counts(store):
        table.add_row(_display_name(name), str(count))
    console.print(table)


def render_summary(console: Console, store: ConfigStore, *, header: str = "Summary") -> None:
    table = Table(title=header, show_header=True, show_lines=False)
    for c in ("source", "sections", "entries"):
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(store.source or "-", str(len(store.sections())), str(len(store)))

    console.print()
    console.print(table)
