"""Errors raised for batch input that cannot be processed."""

from __future__ import annotations


class BatchError(Exception):
    """A single batch could not be loaded; the rest of the run is unaffected."""

    def __init__(self, batch_id: str, reason: str) -> None:
        super().__init__(f"{batch_id}: {reason}")
        self.batch_id = batch_id
        self.reason = reason


class BatchReadError(BatchError):
    """The batch source could not be read."""


class MalformedBatchError(BatchError):
    """The batch content does not decode into a list of message records."""
