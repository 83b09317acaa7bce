"""Filesystem batch source adapter.

Implements the core BatchSource port over a root directory whose immediate
subdirectories hold ``*.dat`` files, each a JSON array of message records.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List

from adapters.record_mapper import messages_from_payload
from core.errors import BatchReadError, MalformedBatchError
from core.models import Message

LOGGER = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.dat"


class DirectoryBatchSource:
    """Thin directory walker that satisfies the BatchSource contract."""

    def __init__(self, root: str, pattern: str = DEFAULT_PATTERN) -> None:
        self._root = Path(root)
        self._pattern = pattern

    def list_directories(self) -> List[str]:
        """Return the immediate subdirectories of the root, sorted."""

        return sorted(str(entry) for entry in self._root.iterdir() if entry.is_dir())

    def list_batches(self, directory: str) -> List[str]:
        """Return batch files directly inside a directory, sorted."""

        return sorted(str(path) for path in Path(directory).glob(self._pattern) if path.is_file())

    def load(self, batch_id: str) -> List[Message]:
        """Read and decode one batch file."""

        try:
            with open(batch_id, "r", encoding="utf-8") as handle:
                raw = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise BatchReadError(batch_id, f"cannot read file: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedBatchError(batch_id, f"invalid JSON: {exc}") from exc

        messages = messages_from_payload(payload, batch_id)
        LOGGER.debug("Loaded %s messages from %s", len(messages), os.path.basename(batch_id))
        return messages
