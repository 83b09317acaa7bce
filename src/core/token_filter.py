"""Noise token removal (core domain)."""

from __future__ import annotations

from typing import Sequence

# Mentions, hashtags, and links.
NOISE_PREFIXES = ("@", "#", "http")


def is_noise_token(token: str, prefixes: Sequence[str] = NOISE_PREFIXES) -> bool:
    """Return True when the lowercased token starts with a noise prefix."""

    lowered = token.lower()
    return any(lowered.startswith(prefix) for prefix in prefixes)


def filter_tokens(text: str, prefixes: Sequence[str] = NOISE_PREFIXES) -> str:
    """Drop noise tokens and rejoin the rest with single spaces.

    Tokens are split on the space character only. Runs of spaces produce
    empty tokens, which are kept, so whitespace is never normalized here.
    """

    if not text:
        return ""
    return " ".join(token for token in text.split(" ") if not is_noise_token(token, prefixes))
