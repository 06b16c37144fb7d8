#!/usr/bin/env python3
"""Module entrypoint for `ginkgo_log_report`.

Usage:
  - `python3 -m ginkgo_log_report --input e2e.log --output e2e.html`
"""

from __future__ import annotations

from .cli import _cli


if __name__ == "__main__":
    raise SystemExit(_cli())
