"""Shared pytest fixtures for shini tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from shini.core.loader import parse_ini_text
from shini.core.store import ConfigStore

SAMPLE_INI = """\
; database settings
log_level = info

[database]
user=admin
password = s3cr=t
host = localhost

[cache]
enabled=true
ttl=3600
"""


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    """Returns a helper that writes text to an .ini file under tmp_path."""

    def _write(text: str, name: str = "config.ini") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_store() -> ConfigStore:
    return parse_ini_text(SAMPLE_INI, source="sample.ini")


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points HOME at an empty directory and chdirs into a fresh workdir."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return work
