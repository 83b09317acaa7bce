"""JSON output sink adapter.

Implements the core OutputSink port by writing two sibling files next to each
batch: all passing texts, and the same texts with noise tokens removed.
"""

from __future__ import annotations

import json
from typing import List, Tuple

from core.models import BatchResult

RAW_SUFFIX = "_en"
FILTERED_SUFFIX = "_en_filtered"


class JsonFileSink:
    """Writes passing texts as compact JSON arrays of strings."""

    def __init__(self, raw_suffix: str = RAW_SUFFIX, filtered_suffix: str = FILTERED_SUFFIX) -> None:
        if raw_suffix == filtered_suffix:
            raise ValueError("raw_suffix and filtered_suffix must differ")
        self._raw_suffix = raw_suffix
        self._filtered_suffix = filtered_suffix

    def output_paths(self, batch_id: str) -> Tuple[str, str]:
        """Return (raw_path, filtered_path) for a batch file."""

        return f"{batch_id}{self._raw_suffix}", f"{batch_id}{self._filtered_suffix}"

    def write(self, batch_id: str, result: BatchResult) -> None:
        raw_path, filtered_path = self.output_paths(batch_id)
        _write_json_array(raw_path, result.raw_passing)
        _write_json_array(filtered_path, result.filtered_passing)


def _write_json_array(path: str, texts: List[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(json.dumps(texts, ensure_ascii=False, separators=(",", ":")))
