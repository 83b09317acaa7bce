"""Console progress and log-file reporting adapter.

Implements the core RunReporter port. Progress goes to stdout as the run
advances; the indented log is kept in memory and written once at the end.
"""

from __future__ import annotations

import os
from typing import List

from adapters.report_formatting import format_progress, format_statistics, format_totals
from core.models import RunStatistics, RunSummary

DEFAULT_LOG_NAME = "filter_english_tweets.log"


class RunReport:
    """Collect report lines and echo progress for a single run."""

    def __init__(self, min_ascii_percent: int, echo: bool = True) -> None:
        self._min_ascii_percent = min_ascii_percent
        self._echo = echo
        self._lines: List[str] = []
        self._directory_count = 0
        self._batch_count = 0

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def _print(self, line: str) -> None:
        if self._echo:
            print(line)

    def directories_found(self, directories: List[str]) -> None:
        self._directory_count = len(directories)
        self._lines.append(f"Processing {len(directories)} directories")

    def directory_started(self, index: int, directory: str) -> None:
        self._print(format_progress("directory", index, self._directory_count, directory))
        self._lines.append(f"  Processing {directory}")

    def batches_found(self, directory: str, batch_ids: List[str]) -> None:
        self._batch_count = len(batch_ids)
        self._lines.append(f"    Processing {len(batch_ids)} .dat-files")

    def batch_started(self, index: int, batch_id: str) -> None:
        self._print("  " + format_progress(".dat-file", index, self._batch_count, batch_id))
        self._lines.append(f"      Processing {batch_id}")

    def batch_processed(self, batch_id: str, statistics: RunStatistics) -> None:
        self._lines.extend(format_statistics(statistics, self._min_ascii_percent, indent=" " * 8))

    def batch_skipped(self, batch_id: str, reason: str) -> None:
        self._print(f"    Skipped: {reason}")
        self._lines.append(f"        Skipped: {reason}")

    def run_finished(self, summary: RunSummary) -> None:
        totals = format_totals(summary.statistics, self._min_ascii_percent, skipped=len(summary.skipped))
        self._lines.extend(totals)
        for line in totals:
            self._print(line)

    def render(self) -> str:
        return "\n".join(self._lines)

    def write(self, path: str) -> None:
        """Write the collected log, replacing any previous file."""

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.render())
