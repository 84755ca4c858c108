"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from typing import Literal

from rich.console import Console

from molt.core.theme import get_theme

BannerKind = Literal["prune", "backup"]

_PRUNE_BANNER = r"""
   ~~~~~~~~~~~~~~~~~~~~~~~~
      ____          __  __       _ _
     |  _ \ ___  ___|  \/  | ___ | | |_
     | |_) / _ \/ _ \ |\/| |/ _ \| | __|
     |  _ <  __/  __/ |  | | (_) | | |_
     |_|_\_\___|\___|_|  |_|\___/|_|\__|
   ~~~~~~~~~~~~~~~~~~~~~~~~"""

_BACKUP_BANNER = r"""
   ~~~~~~~~~~~~~~~~~~~~~~~~
   ____             _    _
  | __ )  __ _  ___| | _| |
  |  _ \ / _` |/ __| |/ / |
  | |_) | (_| | (__|   <|_|
  |____/ \__,_|\___|_|\_(_)
   ~~~~~~~~~~~~~~~~~~~~~~~~"""


def _detect_color_system() -> Literal["truecolor"] | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_banner(kind: BannerKind) -> None:
    """Print the closing ASCII flourish for a command.

    Args:
        kind: "prune" for the REMOLT banner, "backup" for the Back! banner.
    """
    art = _PRUNE_BANNER if kind == "prune" else _BACKUP_BANNER
    console.print(art, style="banner", markup=False, highlight=False)
    if kind == "backup":
        console.print("[info]==> Done. Happy backups![/]\n")


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"
