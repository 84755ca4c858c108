"""Selective directory pruning.

This module removes the contents of a directory while preserving a set
of named entries, and reports the outcome for each entry.
"""

from molt.prune.models import EntryOutcome, EntryResult, PruneOptions, PruneReport
from molt.prune.pruner import (
    InvalidParentError,
    PruneError,
    build_exclusion_set,
    join_child,
    list_entries,
    prune,
    remove_entry,
)

__all__ = [
    "EntryOutcome",
    "EntryResult",
    "InvalidParentError",
    "PruneError",
    "PruneOptions",
    "PruneReport",
    "build_exclusion_set",
    "join_child",
    "list_entries",
    "prune",
    "remove_entry",
]
