from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import os
import shlex
import shutil
import subprocess
import sys

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.reactive import reactive
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Input,
    Static,
    TabbedContent,
    TabPane,
)

from shini.cli.ui.formatters import entry_rows, section_counts
from shini.core.models import DEFAULT_EDITORS, UIConfig
from shini.core.store import ConfigStore


def _short(s: Optional[str], n: int = 160) -> str:
    s = s or ""
    return s if len(s) <= n else s[:n] + "…"


class SummaryView(Static):
    """Overview of the loaded store rendered as Rich panels."""

    def __init__(self, store: ConfigStore) -> None:
        super().__init__()
        self._store = store

    def render(self):
        store = self._store

        overview = Table(show_header=False, box=None, pad_edge=False)
        overview.add_column("k", style="bold")
        overview.add_column("v")
        overview.add_row("Source", store.source or "-")
        overview.add_row("Sections", str(len(store.sections())))
        overview.add_row("Entries", str(len(store)))

        largest = sorted(section_counts(store), key=lambda kv: (-kv[1], kv[0]))[:10]
        top = Table(show_header=True, box=None, pad_edge=False)
        top.add_column("Section", style="bold")
        top.add_column("Keys", justify="right")
        if largest:
            for name, cnt in largest:
                top.add_row(_short(name, 60), str(cnt))
        else:
            top.add_row("(none)", "0")

        return Group(
            Panel(overview, title="Overview", border_style="blue"),
            Panel(top, title="Largest sections", border_style="blue"),
        )


@dataclass(frozen=True)
class TUIData:
    store: ConfigStore
    section: Optional[str] = None
    ui_config: Optional[UIConfig] = None


class StoreBrowser(App):
    """Browse the entries of one parsed INI file."""

    CSS = """
    Screen { overflow: hidden; }

    #toolbar { height: 3; padding: 0 1; }
    #filters { height: 4; padding: 0 1; }

    #search {
        width: 1fr;
        min-width: 30;
        height: 3;
        margin: 0 1;
        padding: 0 1;
        border: solid $accent;
    }

    DataTable { height: 1fr; }
    .pill { padding: 0 1; border: solid $panel; }
    #summary_scroll { height: 1fr; }
    """

    search_query = reactive("")

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=False),
        Binding("/", "focus_search", "Search", show=True, priority=False),
        Binding("escape", "clear_search", "Clear search", show=True, priority=False),
        Binding("o", "open_selected", "Open in editor", show=True, priority=False),
    ]

    def __init__(self, data: TUIData, **kwargs):
        super().__init__(**kwargs)
        self.data = data
        self._visible: List[Tuple[str, str, str, str]] = []
        self._mounted = False

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="toolbar"):
            yield Static(
                f"shini: {self.data.store.source or '<text>'}   (/ search · Enter/o open · Esc clear · q quit)",
                classes="pill",
            )

        with Container(id="filters"):
            with Horizontal():
                yield Static("Search:", classes="pill")
                yield Input(placeholder="filter by section/key/value…", id="search")
                yield Static("Query: (all)", id="search-status", classes="pill")

        with TabbedContent():
            with TabPane("Entries", id="tab_entries"):
                yield DataTable(id="entries_table")

            with TabPane("Sections", id="tab_sections"):
                yield DataTable(id="sections_table")

            with TabPane("Summary", id="tab_summary"):
                with VerticalScroll(id="summary_scroll"):
                    yield SummaryView(self.data.store)

        yield Footer()

    def on_mount(self) -> None:
        entries = self.query_one("#entries_table", DataTable)
        entries.cursor_type = "row"
        entries.zebra_stripes = True
        entries.add_columns("Section", "Key", "Value", "Line")

        sections = self.query_one("#sections_table", DataTable)
        sections.cursor_type = "row"
        sections.zebra_stripes = True
        sections.add_columns("Section", "Keys")

        self._refresh_entries()
        self._refresh_sections()
        self._mounted = True

        self.set_focus(entries)

    # ----------------------------
    # Actions
    # ----------------------------

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_clear_search(self) -> None:
        inp = self.query_one("#search", Input)
        inp.value = ""
        self.search_query = ""
        inp.focus()

    def action_open_selected(self) -> None:
        focused = self.focused
        if isinstance(focused, Input) and focused.id == "search":
            return
        self._open_current_entry()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        # DataTable binds Enter itself (select_cursor); open from its message
        if event.data_table.id == "entries_table":
            self._open_current_entry()

    # ----------------------------
    # Search
    # ----------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        self.search_query = (event.value or "").strip().lower()

    def watch_search_query(self, query: str) -> None:
        if not self._mounted:
            return
        self.query_one("#search-status", Static).update(f"Query: {query or '(all)'}")
        self._refresh_entries()
        self._refresh_sections()

    def _match(self, *parts: str) -> bool:
        if not self.search_query:
            return True
        blob = " ".join([p for p in parts if p]).lower()
        return self.search_query in blob

    # ----------------------------
    # Refresh tables
    # ----------------------------

    def _refresh_entries(self) -> None:
        t = self.query_one("#entries_table", DataTable)
        t.clear()
        self._visible = []

        for row in entry_rows(self.data.store, self.data.section):
            section, key, value, _line = row
            if not self._match(section, key, value):
                continue
            self._visible.append(row)
            t.add_row(section, key, _short(value, 140), _line)

    def _refresh_sections(self) -> None:
        t = self.query_one("#sections_table", DataTable)
        t.clear()
        for name, count in section_counts(self.data.store):
            if self._match(name):
                t.add_row(name, str(count))

    # ----------------------------
    # Open helpers
    # ----------------------------

    def _spawn_editor(self, file_path: Path, line: int) -> bool:
        """
        Open file in an editor at line.
        SHINI_EDITOR / VISUAL / EDITOR win over ui.editors.
        """
        editor_env = (
            os.environ.get("SHINI_EDITOR")
            or os.environ.get("VISUAL")
            or os.environ.get("EDITOR")
        )

        def _popen(cmd: List[str]) -> bool:
            try:
                subprocess.Popen(cmd)  # nosec
                return True
            except OSError:
                return False

        def _with_line(exe: str, name: str, extra: List[str]) -> List[str]:
            low = name.lower()
            if low in ("code", "cursor", "subl", "zed"):
                return [exe, "-g", f"{file_path}:{line}"] + extra
            if low in ("vim", "nvim"):
                return [exe, f"+{line}", str(file_path)] + extra
            return [exe, str(file_path)] + extra

        if editor_env:
            try:
                parts = shlex.split(editor_env)
            except ValueError:
                parts = editor_env.strip().split()
            if parts:
                name = Path(parts[0]).name
                exe = shutil.which(parts[0]) or parts[0]
                return _popen(_with_line(exe, name, parts[1:]))

        editors = DEFAULT_EDITORS
        if self.data.ui_config and self.data.ui_config.editors:
            editors = self.data.ui_config.editors

        for name in editors:
            exe = shutil.which(name)
            if exe:
                return _popen(_with_line(exe, name, []))

        if sys.platform == "darwin":
            return _popen(["open", str(file_path)])

        xdg = shutil.which("xdg-open")
        if xdg:
            return _popen([xdg, str(file_path)])

        return False

    def _open_current_entry(self) -> None:
        table = self.query_one("#entries_table", DataTable)

        row_index = table.cursor_row
        if row_index is None or row_index < 0 or row_index >= len(self._visible):
            self.notify("No entry selected.", severity="warning")
            return

        if not self.data.store.source:
            self.notify("Entries were not loaded from a file.", severity="warning")
            return

        path = Path(self.data.store.source)
        line = int(self._visible[row_index][3] or 1)
        if not self._spawn_editor(path, line):
            self.notify("Could not open editor. Set SHINI_EDITOR or EDITOR.", severity="error")
            return

        self.notify(f"Opened {path.name}:{line}", severity="information")


def run_tui(
    *,
    store: ConfigStore,
    section: Optional[str] = None,
    ui_config: Optional[UIConfig] = None,
) -> None:
    StoreBrowser(TUIData(store=store, section=section, ui_config=ui_config)).run()
