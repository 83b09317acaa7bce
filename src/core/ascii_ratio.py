"""Non-ASCII character ratio (core domain)."""

from __future__ import annotations

ASCII_MAX = 127


def non_ascii_ratio(text: str) -> float:
    """Return the share of non-space characters above code point 127.

    Only the space character is ignored, other whitespace counts. Text with
    no remaining characters has a ratio of 0.0.
    """

    compact = text.replace(" ", "")
    if not compact:
        return 0.0
    non_ascii = sum(1 for char in compact if ord(char) > ASCII_MAX)
    return non_ascii / len(compact)


def has_non_ascii(text: str) -> bool:
    return non_ascii_ratio(text) > 0
