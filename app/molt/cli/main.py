"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from molt import __version__
from molt.cli.commands import backup, config, prune
from molt.utils.formatting import err_console

app = typer.Typer(
    name="molt",
    help="Selective directory pruning and compressed backups.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"molt version {__version__}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    """Route molt's log records to stderr through Rich when debugging."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging on stderr."),
    ] = False,
) -> None:
    """molt - Selective directory pruning and compressed backups.

    Clean out a folder while keeping what matters, or pack paths into
    a .tar.gz archive with parallel compression.
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    configure_logging(debug)


app.add_typer(prune.app, name="prune")
app.add_typer(backup.app, name="backup")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
