"""Run orchestration over the core ports.

The runner walks every batch the source exposes, folds per-batch statistics
into a run total, and isolates failures to the batch that raised them.
"""

from __future__ import annotations

import logging

from core.errors import BatchError
from core.models import RunSummary
from core.ports import BatchSource, OutputSink, RunReporter
from core.processor import BatchProcessor

LOGGER = logging.getLogger(__name__)


class BatchRunner:
    """Drives a full run: source -> processor -> sink, with reporting."""

    def __init__(
        self,
        processor: BatchProcessor,
        source: BatchSource,
        sink: OutputSink,
        reporter: RunReporter,
    ) -> None:
        self._processor = processor
        self._source = source
        self._sink = sink
        self._reporter = reporter

    def run(self) -> RunSummary:
        """Process every batch and return the aggregated summary.

        Totals are reported even when a sink write aborts the run, so the
        caller still sees what completed before the failure.
        """

        summary = RunSummary()
        try:
            directories = self._source.list_directories()
            summary.directories = len(directories)
            self._reporter.directories_found(directories)

            for dir_index, directory in enumerate(directories, start=1):
                self._reporter.directory_started(dir_index, directory)
                batch_ids = self._source.list_batches(directory)
                self._reporter.batches_found(directory, batch_ids)
                for batch_index, batch_id in enumerate(batch_ids, start=1):
                    self._reporter.batch_started(batch_index, batch_id)
                    self._run_batch(batch_id, summary)
        finally:
            LOGGER.info(
                "Run complete: directories=%s, batches=%s, skipped=%s, passed=%s",
                summary.directories,
                len(summary.processed),
                len(summary.skipped),
                summary.statistics.passed,
            )
            self._reporter.run_finished(summary)
        return summary

    def _run_batch(self, batch_id: str, summary: RunSummary) -> None:
        try:
            messages = self._source.load(batch_id)
        except BatchError as exc:
            LOGGER.warning("Skipping batch %s: %s", batch_id, exc.reason)
            summary.skipped.append((batch_id, exc.reason))
            self._reporter.batch_skipped(batch_id, exc.reason)
            return

        result = self._processor.process(messages)
        # Write failures are not batch errors and propagate to the caller.
        self._sink.write(batch_id, result)

        summary.statistics = summary.statistics + result.statistics
        summary.processed.append(batch_id)
        self._reporter.batch_processed(batch_id, result.statistics)
        LOGGER.debug("Processed %s: %s", batch_id, result.statistics)
