"""
Ginkgo test-log to HTML report converter.

This package contains the implementation for:
- log segmentation + per-case status/title inference (`engine`)
- the report data model and JSON export (`report_types`)
- static HTML rendering with client-side filtering (`render`)

Public API is re-exported here; CLI glue lives in `ginkgo_log_report.cli`.
"""

from .engine import (  # noqa: F401
    parse_log_file,
    parse_log_lines,
)
from .render import (  # noqa: F401
    render_report_html,
    write_report_html,
)
from .report_types import (  # noqa: F401
    CaseStatus,
    TestCase,
    TestReport,
)

__all__ = [
    "CaseStatus",
    "TestCase",
    "TestReport",
    "parse_log_file",
    "parse_log_lines",
    "render_report_html",
    "write_report_html",
]
