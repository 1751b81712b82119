from __future__ import annotations

from pathlib import Path

import typer

from shini.cli.utils.files import write_file

app = typer.Typer(help="Initialize shini settings.")


DEFAULT_CONFIG_TOML = """\
[load]
# file name pattern used when no --file is given (current directory only)
pattern = "*.ini"
encoding = "utf-8"
# reject lines without '=' or with an empty key instead of skipping them
strict = false

[ui]
# preferred editor launchers for `shini show` (first available wins)
editors = ["cursor", "code", "subl", "zed", "nvim", "vim"]
"""


@app.command("local")
def init_local(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    target = path.resolve() / ".shini" / "config.toml"
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"Exists, not overwritten: {target} (use --force)")
