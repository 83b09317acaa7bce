"""Core batch processing pipeline.

This module is I/O-agnostic. It receives decoded messages and returns the
passing texts plus counters; persistence is left to the caller.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from core.classifier import Classifier
from core.models import BatchResult, Message, RunStatistics
from core.token_filter import NOISE_PREFIXES, filter_tokens


class BatchProcessor:
    """Classifies a batch, collects passing texts, and counts outcomes."""

    def __init__(self, classifier: Classifier, prefixes: Sequence[str] = NOISE_PREFIXES) -> None:
        self._classifier = classifier
        self._prefixes = tuple(prefixes)

    def process(self, messages: Iterable[Message]) -> BatchResult:
        """Run one batch through classification and token filtering."""

        total = 0
        declared_english = 0
        ascii_ok = 0
        raw_passing: List[str] = []

        for message in messages:
            result = self._classifier.classify(message)
            total += 1
            declared_english += result.declared_english
            ascii_ok += result.ascii_ok
            if result.passed:
                raw_passing.append(message.text)

        filtered_passing = [filter_tokens(text, self._prefixes) for text in raw_passing]
        # Recomputed on the raw text so the count reflects what was written unfiltered.
        passed_with_non_ascii = sum(1 for text in raw_passing if self._classifier.ratio(text) > 0)

        return BatchResult(
            raw_passing=raw_passing,
            filtered_passing=filtered_passing,
            statistics=RunStatistics(
                total=total,
                declared_english=declared_english,
                ascii_ok=ascii_ok,
                passed=len(raw_passing),
                passed_with_non_ascii=passed_with_non_ascii,
            ),
        )
