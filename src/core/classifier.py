"""Message classification logic (core domain)."""

from __future__ import annotations

from typing import Optional

from core.ascii_ratio import non_ascii_ratio
from core.config import FilterConfig
from core.models import ClassificationResult, Message


class Classifier:
    """Decide whether a message counts as English.

    Two heuristics must both hold:
    - The author's declared language equals the configured code exactly.
    - The non-ASCII share of the text is at or below the threshold.

    The declared language is trusted as-is; no text-based detection runs.
    """

    def __init__(self, config: Optional[FilterConfig] = None) -> None:
        self._config = config or FilterConfig()

    def ratio(self, text: str) -> float:
        return non_ascii_ratio(text)

    def declared_english(self, message: Message) -> bool:
        if message.user is None:
            return False
        return message.user.lang == self._config.language

    def ascii_ok(self, message: Message) -> bool:
        return self.ratio(message.text) <= self._config.non_ascii_threshold

    def passes(self, message: Message) -> bool:
        return self.declared_english(message) and self.ascii_ok(message)

    def classify(self, message: Message) -> ClassificationResult:
        """Evaluate both heuristics once and return the combined result."""

        ratio = self.ratio(message.text)
        declared = self.declared_english(message)
        ascii_ok = ratio <= self._config.non_ascii_threshold
        return ClassificationResult(
            passed=declared and ascii_ok,
            ratio=ratio,
            declared_english=declared,
            ascii_ok=ascii_ok,
        )
