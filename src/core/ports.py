"""Ports (interfaces) used by the core run loop.

Ports define the minimal contracts for batch sources, output sinks, and
reporting so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import List, Protocol

from core.models import BatchResult, Message, RunStatistics, RunSummary


class BatchSource(Protocol):
    """Enumerates and decodes batches."""

    def list_directories(self) -> List[str]:
        ...

    def list_batches(self, directory: str) -> List[str]:
        ...

    def load(self, batch_id: str) -> List[Message]:
        """Return the decoded batch or raise a BatchError."""
        ...


class OutputSink(Protocol):
    """Persists the artifacts of a processed batch."""

    def write(self, batch_id: str, result: BatchResult) -> None:
        ...


class RunReporter(Protocol):
    """Receives progress and statistics events for a run."""

    def directories_found(self, directories: List[str]) -> None:
        ...

    def directory_started(self, index: int, directory: str) -> None:
        ...

    def batches_found(self, directory: str, batch_ids: List[str]) -> None:
        ...

    def batch_started(self, index: int, batch_id: str) -> None:
        ...

    def batch_processed(self, batch_id: str, statistics: RunStatistics) -> None:
        ...

    def batch_skipped(self, batch_id: str, reason: str) -> None:
        ...

    def run_finished(self, summary: RunSummary) -> None:
        ...
