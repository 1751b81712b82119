"""Tests for the shini command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from shini import __version__
from shini.cli.app import app
from shini.core.errors import ExitCode

runner = CliRunner()

INI = "top = 1\n[database]\nhost = localhost\nuser = admin\n"


@pytest.fixture
def ini_file(isolated_home: Path) -> Path:
    path = isolated_home / "app.ini"
    path.write_text(INI, encoding="utf-8")
    return path


class TestGet:
    def test_prints_value(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "database", "host", "--file", str(ini_file)])
        assert result.exit_code == ExitCode.OK
        assert result.stdout == "localhost\n"

    def test_discovers_file_in_working_directory(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "default", "top"])
        assert result.exit_code == ExitCode.OK
        assert result.stdout == "1\n"

    def test_missing_section_exit_code(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "nope", "host"])
        assert result.exit_code == ExitCode.NOT_FOUND

    def test_missing_key_exit_code(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "database", "port"])
        assert result.exit_code == ExitCode.NOT_FOUND

    def test_default_on_miss(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "database", "port", "--default", "5432"])
        assert result.exit_code == ExitCode.OK
        assert result.stdout == "5432\n"

    def test_empty_section_is_usage_error(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "", "host"])
        assert result.exit_code == ExitCode.USAGE

    def test_no_ini_file(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["--quiet", "get", "a", "b"])
        assert result.exit_code == ExitCode.NOT_FOUND

    def test_strict_format_error(self, isolated_home: Path) -> None:
        (isolated_home / "bad.ini").write_text("[a]\nnot an assignment\n")
        result = runner.invoke(app, ["--quiet", "get", "a", "b", "--strict"])
        assert result.exit_code == ExitCode.FORMAT

    def test_strict_from_settings(self, isolated_home: Path) -> None:
        (isolated_home / "bad.ini").write_text("[a]\nnot an assignment\nb=1\n")
        settings = isolated_home / ".shini" / "config.toml"
        settings.parent.mkdir()
        settings.write_text("[load]\nstrict = true\n")

        assert runner.invoke(app, ["--quiet", "get", "a", "b"]).exit_code == ExitCode.FORMAT
        result = runner.invoke(app, ["--quiet", "get", "a", "b", "--no-strict"])
        assert result.exit_code == ExitCode.OK
        assert result.stdout == "1\n"

    def test_warning_goes_to_stderr(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["get", "database", "port"])
        assert result.exit_code == ExitCode.NOT_FOUND
        assert "port" in result.output
        assert "not found" in result.output


class TestShowAndSections:
    def test_show_plain(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "show", "--plain", "--file", str(ini_file)])
        assert result.exit_code == ExitCode.OK
        assert "database" in result.stdout
        assert "localhost" in result.stdout

    def test_show_single_section(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "show", "--plain", "--section", "default"])
        assert result.exit_code == ExitCode.OK
        assert "top" in result.stdout
        assert "localhost" not in result.stdout

    def test_show_unknown_section(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "show", "--plain", "--section", "nope"])
        assert result.exit_code == ExitCode.NOT_FOUND

    def test_sections(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "sections"])
        assert result.exit_code == ExitCode.OK
        assert result.stdout.splitlines() == ["default", "database"]

    def test_sections_with_counts(self, ini_file: Path) -> None:
        result = runner.invoke(app, ["--quiet", "sections", "--counts"])
        assert result.exit_code == ExitCode.OK
        assert "Sections (2)" in result.stdout
        lines = [ln for ln in result.stdout.splitlines() if "database" in ln]
        assert lines and lines[0].split()[-2] == "2"

    def test_unlistable_working_directory(self, isolated_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def deny(self: Path):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "iterdir", deny)
        result = runner.invoke(app, ["--quiet", "get", "a", "b"])
        assert result.exit_code == ExitCode.NOT_FOUND
        assert not isinstance(result.exception, PermissionError)


class TestInitAndVersion:
    def test_init_writes_settings(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["init", "local", str(isolated_home)])
        assert result.exit_code == 0
        target = isolated_home / ".shini" / "config.toml"
        assert "[load]" in target.read_text()

    def test_init_does_not_overwrite(self, isolated_home: Path) -> None:
        target = isolated_home / ".shini" / "config.toml"
        target.parent.mkdir()
        target.write_text("# mine\n")

        result = runner.invoke(app, ["init", "local", str(isolated_home)])
        assert "not overwritten" in result.stdout
        assert target.read_text() == "# mine\n"

        runner.invoke(app, ["init", "local", str(isolated_home), "--force"])
        assert "[load]" in target.read_text()

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
