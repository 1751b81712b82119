"""Tests for the interactive store browser."""

from __future__ import annotations

import asyncio
from pathlib import Path

from textual.widgets import DataTable, Static

from shini.cli.ui.tui import StoreBrowser, TUIData
from shini.core.loader import parse_ini_text
from shini.core.store import ConfigStore


def test_browser_lists_and_filters_entries(sample_store: ConfigStore) -> None:
    async def scenario() -> None:
        app = StoreBrowser(TUIData(store=sample_store))
        async with app.run_test() as pilot:
            entries = app.query_one("#entries_table", DataTable)
            sections = app.query_one("#sections_table", DataTable)
            assert entries.row_count == 6
            assert sections.row_count == 3

            app.search_query = "cache"
            await pilot.pause()
            assert entries.row_count == 2
            assert sections.row_count == 1

            app.action_clear_search()
            await pilot.pause()
            assert entries.row_count == 6

    asyncio.run(scenario())


def test_browser_limited_to_one_section(sample_store: ConfigStore) -> None:
    async def scenario() -> None:
        app = StoreBrowser(TUIData(store=sample_store, section="database"))
        async with app.run_test():
            assert app.query_one("#entries_table", DataTable).row_count == 3

    asyncio.run(scenario())


def test_enter_and_o_open_selected_entry(tmp_path: Path) -> None:
    source = tmp_path / "a.ini"
    store = parse_ini_text("[a]\nk=v\n", source=str(source))
    opened = []

    async def scenario() -> None:
        app = StoreBrowser(TUIData(store=store))
        app._spawn_editor = lambda path, line: opened.append((path, line)) or True  # type: ignore[method-assign]
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            assert opened == [(source, 2)]

            await pilot.press("o")
            await pilot.pause()
            assert opened == [(source, 2), (source, 2)]

    asyncio.run(scenario())


def test_search_status_placeholder(sample_store: ConfigStore) -> None:
    async def scenario() -> None:
        app = StoreBrowser(TUIData(store=sample_store))
        async with app.run_test() as pilot:
            status = app.query_one("#search-status", Static)
            assert str(status.render()) == "Query: (all)"

            app.search_query = "cache"
            await pilot.pause()
            assert str(status.render()) == "Query: cache"

            app.action_clear_search()
            await pilot.pause()
            assert str(status.render()) == "Query: (all)"

    asyncio.run(scenario())
