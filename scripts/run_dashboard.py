#!/usr/bin/env python
"""Print the lab throughput dashboard for a date range."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from lab_throughput_dashboard.cli import main  # noqa: E402


if __name__ == '__main__':
    sys.exit(main())
