#!/usr/bin/env python3
"""
Line-oriented parser for Ginkgo-style test-run logs.

The log is free text with a few embedded markers (see `markers.py`):
- everything before the first dashed separator is run configuration (dropped)
- each span between two separators is one test case
- `[FAILED]` / `[SKIPPED]` set the case status (no marker -> pass)
- lines before `> Enter` are title candidates, unless they look like a path
- once `Summarizing` appears, the remaining segments are the trailing summary
  block and are dropped

The parser is lenient: it never raises for unexpected content, it only falls
back to empty titles and the `pass` default.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from . import markers
from .report_types import CaseStatus, ScanPhase, TestCase, TestReport, TitleCollection

logger = logging.getLogger(__name__)

GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class _Segment:
    """Mutable scan state for the segment currently being read."""

    def __init__(self) -> None:
        self.buffer: List[str] = []
        self.title_lines: List[str] = []
        self.status: Optional[CaseStatus] = None
        self.title_state = TitleCollection.COLLECTING

    def feed(self, line: str) -> None:
        self.buffer.append(line + "\n")

        # Last marker line wins; SKIPPED beats FAILED on the same line.
        if markers.SKIPPED_MARKER in line:
            self.status = CaseStatus.SKIP
        elif markers.FAILED_MARKER in line:
            self.status = CaseStatus.FAIL

        if markers.ENTER_MARKER in line:
            self.title_state = TitleCollection.CLOSED

        if (
            self.title_state is TitleCollection.COLLECTING
            and line != ""
            and markers.SKIPPED_MARKER not in line
            and markers.PATH_SEPARATOR not in line
        ):
            self.title_lines.append(line)

    def finalize(self) -> TestCase:
        return TestCase(
            title=markers.TITLE_JOINER.join(self.title_lines),
            status=self.status,
            log_content="".join(self.buffer),
            title_state=self.title_state,
        )


def _strip_line_ending(line: str) -> str:
    # Same as a line scanner: drop one "\n" and then one "\r".
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_log_lines(lines: Iterable[str], *, generated_at: Optional[str] = None) -> TestReport:
    """Segment a log into test cases and count them.

    Args:
        lines: Log lines in order. A trailing line terminator is tolerated.
        generated_at: Report timestamp; defaults to now (`GENERATED_AT_FORMAT`).

    Returns:
        A fully populated TestReport where every case has a status and
        `total_tests == passed_tests + failed_tests + skipped_tests`.
    """
    report = TestReport(generated_at=generated_at or datetime.now().strftime(GENERATED_AT_FORMAT))
    phase = ScanPhase.PREAMBLE
    current: Optional[_Segment] = None

    def _close(seg: Optional[_Segment]) -> None:
        if seg is None:
            return
        if phase is ScanPhase.SUMMARIZING:
            logger.debug("Discarding summary segment (%d lines)", len(seg.buffer))
            return
        case = seg.finalize()
        report.test_cases.append(case)
        if case.status is not None:
            report.count(case.status)
        logger.debug("Case %d: %s [%s]", len(report.test_cases), case.title or "(untitled)",
                     case.status.value if case.status else "unset")

    for raw in lines:
        line = _strip_line_ending(raw)

        if phase is ScanPhase.PREAMBLE:
            if markers.is_separator(line):
                phase = ScanPhase.SEGMENTS
                current = _Segment()
            continue

        if phase is ScanPhase.SEGMENTS and markers.is_summarizing(line):
            logger.debug("Entered summarizing section")
            phase = ScanPhase.SUMMARIZING

        if markers.is_separator(line):
            _close(current)
            current = _Segment()
            continue

        if current is not None:
            current.feed(line)

    _close(current)

    # Cases without any marker pass by default.
    for case in report.test_cases:
        if case.status is None:
            case.status = CaseStatus.PASS
            report.count(CaseStatus.PASS)

    report.reconcile_total()
    logger.debug(
        "Parsed %d cases (passed=%d failed=%d skipped=%d)",
        report.total_tests,
        report.passed_tests,
        report.failed_tests,
        report.skipped_tests,
    )
    return report


def parse_log_file(log_path: Path, *, generated_at: Optional[str] = None) -> TestReport:
    """Parse a log file from disk. OSError (missing/unreadable file) propagates."""
    p = Path(log_path)
    with p.open("r", encoding="utf-8", errors="replace", newline="\n") as fh:
        return parse_log_lines(fh, generated_at=generated_at)
