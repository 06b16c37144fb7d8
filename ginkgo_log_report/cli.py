"""
CLI wrapper for ginkgo_log_report.

We keep CLI glue in its own module so the parser (`engine.py`) and the
renderer (`render.py`) stay plain library code that raises instead of exiting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import argparse
import logging
import sys

from jinja2 import TemplateError

from . import engine
from . import render

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ginkgo-log-report",
        description="Convert a Ginkgo test-run log into a self-contained HTML report.",
        epilog="Examples:\n"
               "  %(prog)s --input e2e.log --output e2e.html\n"
               "  %(prog)s -i e2e.log -o e2e.html --json e2e.json -v",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", default="", help="Path to the test report log file")
    parser.add_argument("-o", "--output", default="", help="Path to the output HTML file")
    parser.add_argument(
        "--json",
        default="",
        help="Also write the parsed report as JSON to this path (optional).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output from the parser")
    return parser


def _cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    if not args.input or not args.output:
        logger.error("Please provide both input and output file paths")
        parser.print_usage(sys.stdout)
        return 1

    try:
        report = engine.parse_log_file(Path(args.input).expanduser())
    except OSError as e:
        logger.error(f"Error opening file: {e}")
        return 1

    out_path = Path(args.output).expanduser()
    try:
        render.write_report_html(report, out_path)
    except (OSError, TemplateError) as e:
        logger.error(f"Error generating HTML report: {e}")
        return 1

    if args.json:
        try:
            report.to_file(Path(args.json).expanduser())
        except OSError as e:
            logger.error(f"Error writing JSON report: {e}")
            return 1

    logger.info(f"Test report successfully converted to HTML: {args.output}")
    logger.info(
        f"Total: {report.total_tests}, Passed: {report.passed_tests}, "
        f"Failed: {report.failed_tests}, Skipped: {report.skipped_tests}"
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console-script entry point."""
    return _cli(argv)
