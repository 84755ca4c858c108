"""Config command implementation.

Shows, initializes and locates the molt configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from molt.cli.types import get_config
from molt.core.config import ConfigError, MoltConfig, dump_config, save_config
from molt.core.paths import ensure_config_dir, get_config_path
from molt.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage the molt configuration file.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config = get_config()
    path = get_config_path()
    source = str(path) if path.exists() else "built-in defaults"
    console.print(f"[dim]# Source: {escape(source)}[/dim]")
    console.print(dump_config(config), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default values."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ensure_config_dir()
        saved = save_config(MoltConfig(), path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(get_config_path()))
