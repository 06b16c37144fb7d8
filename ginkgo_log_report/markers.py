"""Marker catalog for `ginkgo_log_report`.

Goal: keep the dialect's significant tokens in one place.

Conventions:
- *_TOKEN / *_MARKER : substrings matched with `in` (never anchored)
- TITLE_*            : title derivation helpers

This module is intentionally "boring":
- no side effects
- no imports from other `ginkgo_log_report` modules (avoid cycles)
"""

from __future__ import annotations

# A line *containing* this run of dashes delimits two segments.
SEPARATOR_TOKEN: str = "-" * 30

# Status markers. SKIPPED is checked before FAILED on the same line.
FAILED_MARKER: str = "[FAILED]"
SKIPPED_MARKER: str = "[SKIPPED]"

# Ginkgo prints "> Enter [It] ..." once the spec body starts running.
ENTER_MARKER: str = "> Enter"

# Trailing run summary ("Summarizing 2 Failures:").
SUMMARIZING_MARKER: str = "Summarizing"

# Lines with a path separator are source locations / stack frames.
PATH_SEPARATOR: str = "/"

TITLE_JOINER: str = ", "


def is_separator(line: str) -> bool:
    return SEPARATOR_TOKEN in line


def is_summarizing(line: str) -> bool:
    return SUMMARIZING_MARKER in line
