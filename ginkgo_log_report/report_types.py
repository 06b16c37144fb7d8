"""Typed enums and dataclasses shared by the parser and the renderer.

This module MUST NOT import `engine`, `render` or `cli` to avoid cycles.

Usage (producer -- engine.py):
    report = parse_log_lines(lines)

Usage (consumers -- render.py, cli.py):
    html = render_report_html(report)
    report.to_file(out_dir / "report.json")
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Bump when the JSON export changes in a backward-incompatible way.
SCHEMA_VERSION = 1


class CaseStatus(str, Enum):
    """Canonical status strings; the values are what the HTML filters match on."""

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


class TitleCollection(str, Enum):
    """One-way latch: COLLECTING until the entry marker, then CLOSED for good."""

    COLLECTING = "collecting"
    CLOSED = "closed"


class ScanPhase(str, Enum):
    """Scanner position in the log. Only ever moves forward."""

    PREAMBLE = "preamble"
    SEGMENTS = "segments"
    SUMMARIZING = "summarizing"


@dataclass
class TestCase:
    """One segment of the log between two separator lines."""

    __test__ = False  # not a pytest class

    title: str = ""
    status: Optional[CaseStatus] = None  # None until classified or defaulted
    log_content: str = ""
    title_state: TitleCollection = TitleCollection.COLLECTING

    @property
    def has_enter(self) -> bool:
        return self.title_state is TitleCollection.CLOSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "status": self.status.value if self.status is not None else "",
            "log_content": self.log_content,
        }


@dataclass
class TestReport:
    """Aggregate result of parsing one log."""

    __test__ = False  # not a pytest class

    generated_at: str
    test_cases: List[TestCase] = field(default_factory=list)
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    skipped_tests: int = 0

    def count(self, status: CaseStatus) -> None:
        """Bump the subtotal matching `status`."""
        if status is CaseStatus.PASS:
            self.passed_tests += 1
        elif status is CaseStatus.FAIL:
            self.failed_tests += 1
        elif status is CaseStatus.SKIP:
            self.skipped_tests += 1

    def reconcile_total(self) -> None:
        self.total_tests = self.passed_tests + self.failed_tests + self.skipped_tests

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "generated_at": self.generated_at,
            "total_tests": self.total_tests,
            "passed_tests": self.passed_tests,
            "failed_tests": self.failed_tests,
            "skipped_tests": self.skipped_tests,
            "test_cases": [tc.to_dict() for tc in self.test_cases],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_file(self, path: Path) -> None:
        """Write the JSON export to `path`, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
        logger.debug("Wrote JSON report: %s", path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestReport":
        cases = [
            TestCase(
                title=str(tc.get("title", "")),
                status=CaseStatus(tc["status"]) if tc.get("status") else None,
                log_content=str(tc.get("log_content", "")),
            )
            for tc in data.get("test_cases", [])
        ]
        return cls(
            generated_at=str(data.get("generated_at", "")),
            test_cases=cases,
            total_tests=int(data.get("total_tests", 0)),
            passed_tests=int(data.get("passed_tests", 0)),
            failed_tests=int(data.get("failed_tests", 0)),
            skipped_tests=int(data.get("skipped_tests", 0)),
        )
