"""HTML rendering for parsed test reports.

The page is a single static document (inline CSS + JS, no external fetches).
All report text goes through Jinja2 autoescaping, so log content cannot inject
markup. The template lives in `templates/test_report.html.j2`.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from .report_types import TestReport

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "test_report.html.j2"

# Bump when the template markup changes in a way consumers may notice.
TEMPLATE_VERSION = 1


@functools.lru_cache(maxsize=1)
def _template() -> Template:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        # ".html.j2" does not end in ".html", so list it explicitly.
        autoescape=select_autoescape(["html", "xml", "html.j2"]),
        keep_trailing_newline=True,
    )
    return env.get_template(TEMPLATE_NAME)


def _context(report: TestReport) -> Dict[str, Any]:
    # Example context passed to the template:
    # {
    #   'generated_at': '2025-10-31 14:23:45',
    #   'total_tests': 3, 'passed_tests': 1, 'failed_tests': 1, 'skipped_tests': 1,
    #   'test_cases': [
    #       {'title': 'Pods, should start', 'status': 'fail', 'log_content': '...\n'},
    #   ],
    #   'template_version': 1,
    # }
    ctx = report.to_dict()
    ctx["template_version"] = TEMPLATE_VERSION
    return ctx


def render_report_html(report: TestReport) -> str:
    """HTML: render a full report document. Pure; same report -> same bytes."""
    return _template().render(**_context(report))


def write_report_html(report: TestReport, out_path: Path) -> None:
    """Stream the rendered document into `out_path`.

    OSError / jinja2.TemplateError propagate; a partially written file is left
    in place.
    """
    p = Path(out_path)
    with p.open("w", encoding="utf-8") as fh:
        _template().stream(**_context(report)).dump(fh)
    logger.debug("Wrote HTML report: %s (%d cases)", p, len(report.test_cases))
