"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LANGUAGE = "en"
DEFAULT_NON_ASCII_THRESHOLD = 0.3


@dataclass(frozen=True)
class FilterConfig:
    """Classification settings for the core pipeline."""

    language: str = DEFAULT_LANGUAGE
    non_ascii_threshold: float = DEFAULT_NON_ASCII_THRESHOLD

    def __post_init__(self) -> None:
        if not 0.0 <= self.non_ascii_threshold <= 1.0:
            raise ValueError(f"non_ascii_threshold must be within [0, 1]: {self.non_ascii_threshold}")
        if not self.language:
            raise ValueError("language must not be empty")

    @property
    def min_ascii_percent(self) -> int:
        """Minimum share of ASCII characters, as a whole percentage."""

        return int(round((1 - self.non_ascii_threshold) * 100))
