"""CLI package for molt.

This package contains the Typer application and all subcommands.
"""

from molt.cli.main import app

__all__ = ["app"]
