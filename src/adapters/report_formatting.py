"""Shared statistics report formatting helpers.

Keeping formatting here lets the console output and the log file share one
wording for the counters.
"""

from __future__ import annotations

from typing import List

from core.models import RunStatistics


def format_progress(label: str, index: int, count: int, target: str) -> str:
    """Return a progress line such as ``Processing directory  2 / 10: path``."""

    width = len(str(count))
    return f"Processing {label} {str(index).rjust(width)} / {count}: {target}"


def format_statistics(statistics: RunStatistics, min_ascii_percent: int, indent: str = "") -> List[str]:
    """Return the five counter lines, each prefixed by indent."""

    lines = [
        f"{statistics.total} Tweets",
        f"{statistics.declared_english} English according to User",
        f"{statistics.ascii_ok} with at least {min_ascii_percent}% ASCII",
        f"{statistics.passed} fulfill both criteria (will be written), of which",
        f"{statistics.passed_with_non_ascii} contain non-ASCII chars at all",
    ]
    return [f"{indent}{line}" for line in lines]


def format_totals(statistics: RunStatistics, min_ascii_percent: int, skipped: int = 0) -> List[str]:
    """Return the closing totals block of a run report."""

    lines = ["Totals:"]
    lines.extend(format_statistics(statistics, min_ascii_percent))
    if skipped:
        lines.append(f"{skipped} .dat-files skipped")
    return lines
