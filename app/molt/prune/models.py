"""Prune domain models.

This module defines the data structures passed into and returned by the
selective directory pruner: the options struct, per-entry results and the
aggregate report.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class EntryOutcome(str, Enum):
    """What happened to a direct child of the parent directory.

    Attributes:
        SKIPPED: Entry is in the exclusion set and was left alone.
        REMOVED: Entry no longer exists after the removal attempt.
        FAILED: Entry still exists after the removal attempt.
    """

    SKIPPED = "skipped"
    REMOVED = "removed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PruneOptions:
    """Explicit configuration for a single prune run.

    Attributes:
        parent: Directory whose direct children are pruned.
        exclusions: Names relative to parent that must survive. Surrounding
            whitespace is ignored.
    """

    parent: str
    exclusions: frozenset[str] = frozenset()

    @classmethod
    def create(cls, parent: str, exclusions: Iterable[str] = ()) -> "PruneOptions":
        """Build options from any iterable of exclusion names."""
        return cls(parent=parent, exclusions=frozenset(exclusions))


@dataclass(frozen=True, slots=True)
class EntryResult:
    """Outcome of processing one direct child.

    Attributes:
        path: Path of the entry (parent joined with name).
        name: Entry name inside the parent directory.
        outcome: Skipped, removed or failed.
        error: First error reported by the removal call, if any. A removed
            entry may still carry an error from a partially failed attempt.
    """

    path: str
    name: str
    outcome: EntryOutcome
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the entry survived a removal attempt."""
        return self.outcome == EntryOutcome.FAILED


@dataclass(slots=True)
class PruneReport:
    """Aggregate result of a prune run.

    Attributes:
        parent: Parent directory that was pruned.
        exclusions: Resolved exclusion paths.
        entries: Every processed entry in processing order.
    """

    parent: str
    exclusions: frozenset[str]
    entries: list[EntryResult] = field(default_factory=list)

    def _count(self, outcome: EntryOutcome) -> int:
        return sum(1 for e in self.entries if e.outcome == outcome)

    @property
    def processed(self) -> int:
        """Total number of direct children seen."""
        return len(self.entries)

    @property
    def skipped(self) -> int:
        return self._count(EntryOutcome.SKIPPED)

    @property
    def removed(self) -> int:
        return self._count(EntryOutcome.REMOVED)

    @property
    def failed(self) -> int:
        """Aggregate failure count."""
        return self._count(EntryOutcome.FAILED)

    @property
    def failures(self) -> list[EntryResult]:
        return [e for e in self.entries if e.failed]

    @property
    def success(self) -> bool:
        """True iff no entry survived a removal attempt."""
        return self.failed == 0

    def to_dict(self) -> dict[str, object]:
        """Serialize the report for JSON output."""
        return {
            "parent": self.parent,
            "exclusions": sorted(self.exclusions),
            "processed": self.processed,
            "skipped": self.skipped,
            "removed": self.removed,
            "failed": self.failed,
            "success": self.success,
            "entries": [
                {
                    "path": e.path,
                    "name": e.name,
                    "outcome": e.outcome.value,
                    "error": e.error,
                }
                for e in self.entries
            ],
        }
