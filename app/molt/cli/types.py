"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from molt.core.config import ConfigError, MoltConfig, load_config
from molt.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def split_csv(values: list[str] | None) -> list[str]:
    """Split comma-delimited option values into a flat list.

    Options such as ``-x "a,b" -x c`` may repeat; every value is split on
    commas, items are trimmed and empty items dropped.

    Args:
        values: Raw option values, or None if the option was not given.

    Returns:
        Flat list of non-empty items in the order given.
    """
    if not values:
        return []
    items: list[str] = []
    for value in values:
        items.extend(part.strip() for part in value.split(","))
    return [item for item in items if item]


def get_config() -> MoltConfig:
    """Load the user configuration or exit with an error.

    Returns:
        The validated configuration (defaults if no file exists).

    Raises:
        typer.Exit: With code 1 if the config file is invalid.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
