from __future__ import annotations

import typer

from baseline import __version__
from baseline.cli.commands.cache_key import cache_key
from baseline.cli.commands.find import find


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(find)
app.command("cache-key")(cache_key)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Find the previous released version of a GitHub project."""


def main() -> None:
    app()
