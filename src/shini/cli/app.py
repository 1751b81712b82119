from __future__ import annotations

import typer
from rich.console import Console

from shini import __version__
from shini.cli.commands.get import get_cmd
from shini.cli.commands.init import app as init_app
from shini.cli.commands.show import sections_cmd, show_cmd
from shini.core.logging_setup import configure_logging

app = typer.Typer(
    name="shini",
    help="Read values from INI files in shell scripts.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"shini {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug diagnostics on stderr."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No diagnostics on stderr."),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {"verbose": verbose}


app.command("get")(get_cmd)
app.command("show")(show_cmd)
app.command("sections")(sections_cmd)
app.add_typer(init_app, name="init")
