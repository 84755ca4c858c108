"""Utility modules for molt.

This module exports commonly used utility functions.
"""

from molt.utils.formatting import (
    console,
    err_console,
    format_size,
    print_banner,
    print_error,
    print_info,
    print_success,
)
from molt.utils.shell import (
    CommandResult,
    PipelineResult,
    command_exists,
    run_command,
    run_pipeline,
)

__all__ = [
    "CommandResult",
    "PipelineResult",
    "command_exists",
    "console",
    "err_console",
    "format_size",
    "print_banner",
    "print_error",
    "print_info",
    "print_success",
    "run_command",
    "run_pipeline",
]
