"""CLI commands for molt.

This package contains all subcommand implementations.
"""

from molt.cli.commands import backup, config, prune

__all__ = ["backup", "config", "prune"]
