"""Selective directory pruner.

Deletes every direct child of a parent directory except the names in an
exclusion set. Per-entry failures are isolated and aggregated; only an
invalid parent directory aborts the run, and it does so before anything
is touched.

Exclusion matching is an exact string comparison between ``parent/name``
for each excluded name and ``parent/entry`` for each child. Paths are not
canonicalized, so symlinks or ``..`` inside an excluded name are matched
literally.
"""

import logging
import os
import shutil
import sys
from collections.abc import Callable, Iterable
from typing import Any

from molt.prune.models import EntryOutcome, EntryResult, PruneOptions, PruneReport

logger = logging.getLogger(__name__)

ResultCallback = Callable[[EntryResult], None]


class PruneError(Exception):
    """Base exception for pruning errors."""


class InvalidParentError(PruneError):
    """Raised when the parent path is missing, not a directory, or unreadable."""


def join_child(parent: str, name: str) -> str:
    """Join a parent directory and a child name as a plain string.

    A single trailing slash on parent is dropped so that "/root/" and
    "/root" produce the same child paths.
    """
    return f"{parent.removesuffix('/')}/{name}"


def build_exclusion_set(parent: str, names: Iterable[str]) -> frozenset[str]:
    """Resolve exclusion names to absolute paths under parent.

    Args:
        parent: Parent directory.
        names: Relative names; surrounding whitespace is trimmed.

    Returns:
        Set of joined paths. Names that match no child are harmless.
    """
    return frozenset(join_child(parent, name.strip()) for name in names)


def list_entries(parent: str) -> list[str]:
    """List the names of all direct children of parent, hidden ones included.

    Args:
        parent: Directory to list.

    Returns:
        Sorted entry names, never containing "." or "..".

    Raises:
        InvalidParentError: If parent is not a directory or cannot be listed.
    """
    if not os.path.isdir(parent):
        raise InvalidParentError(f"'{parent}' is not a valid directory!")
    try:
        return sorted(os.listdir(parent))
    except OSError as e:
        raise InvalidParentError(f"Cannot list '{parent}': {e}") from e


def remove_entry(path: str) -> str | None:
    """Forcefully remove a file, symlink or directory tree.

    Directories are removed recursively and removal continues past
    individual errors, so as much of the tree as possible is deleted.
    Symlinks are unlinked, never followed.

    Args:
        path: Path to remove.

    Returns:
        The first error message encountered, or None if the call reported
        no error. The caller decides success by checking existence.
    """
    errors: list[str] = []

    def _on_error(func: Callable[..., Any], failed_path: str, exc: Any) -> None:
        # onexc receives the exception, onerror an exc_info tuple
        error = exc[1] if isinstance(exc, tuple) else exc
        logger.debug("Failed to remove %s: %s", failed_path, error)
        errors.append(str(error))

    try:
        if os.path.isdir(path) and not os.path.islink(path):
            if sys.version_info >= (3, 12):
                shutil.rmtree(path, onexc=_on_error)
            else:
                shutil.rmtree(path, onerror=_on_error)
        else:
            os.unlink(path)
    except OSError as e:
        logger.debug("Failed to remove %s: %s", path, e)
        errors.append(str(e))

    return errors[0] if errors else None


def prune(options: PruneOptions, on_result: ResultCallback | None = None) -> PruneReport:
    """Delete every direct child of options.parent not in options.exclusions.

    Each entry is removed independently; a failure on one entry never stops
    processing of its siblings. An entry counts as failed if it still exists
    after the removal attempt, whatever the removal call reported.

    Args:
        options: Parent directory and exclusion names.
        on_result: Called with each EntryResult as soon as it is decided.

    Returns:
        PruneReport with one EntryResult per direct child.

    Raises:
        InvalidParentError: If the parent is not a readable directory. Nothing
            is removed in that case.
    """
    parent = options.parent
    names = list_entries(parent)
    excluded = build_exclusion_set(parent, options.exclusions)
    report = PruneReport(parent=parent, exclusions=excluded)

    logger.debug("Pruning %d entries in %s (excluding %s)", len(names), parent, sorted(excluded))

    for name in names:
        path = join_child(parent, name)

        if path in excluded:
            result = EntryResult(path=path, name=name, outcome=EntryOutcome.SKIPPED)
        else:
            error = remove_entry(path)
            if os.path.lexists(path):
                logger.info("Could not remove %s", path)
                result = EntryResult(
                    path=path,
                    name=name,
                    outcome=EntryOutcome.FAILED,
                    error=error or "Entry still exists after removal",
                )
            else:
                logger.debug("Removed %s", path)
                result = EntryResult(
                    path=path,
                    name=name,
                    outcome=EntryOutcome.REMOVED,
                    error=error,
                )

        report.entries.append(result)
        if on_result is not None:
            on_result(result)

    return report
