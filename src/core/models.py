"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to the on-disk record format.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import reduce
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class UserProfile:
    """Author metadata carried by a message."""

    lang: Optional[str] = None


@dataclass(frozen=True)
class Message:
    """Minimal message used by the core processing pipeline."""

    text: str
    user: Optional[UserProfile] = None


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one message."""

    passed: bool
    ratio: float
    declared_english: bool
    ascii_ok: bool


@dataclass(frozen=True)
class RunStatistics:
    """Message counters for a batch or a whole run.

    Values are combined with ``+``; the empty instance is the identity, so
    batches can be folded in any order.
    """

    total: int = 0
    declared_english: int = 0
    ascii_ok: int = 0
    passed: int = 0
    passed_with_non_ascii: int = 0

    def __add__(self, other: "RunStatistics") -> "RunStatistics":
        if not isinstance(other, RunStatistics):
            return NotImplemented
        return RunStatistics(
            **{item.name: getattr(self, item.name) + getattr(other, item.name) for item in fields(self)}
        )


def merge_statistics(values: Iterable[RunStatistics]) -> RunStatistics:
    """Fold any number of statistics into one."""

    return reduce(lambda left, right: left + right, values, RunStatistics())


@dataclass(frozen=True)
class BatchResult:
    """Artifacts produced for a single batch."""

    raw_passing: List[str]
    filtered_passing: List[str]
    statistics: RunStatistics


@dataclass
class RunSummary:
    """Aggregated outcome of a whole run."""

    statistics: RunStatistics = field(default_factory=RunStatistics)
    directories: int = 0
    processed: List[str] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)
