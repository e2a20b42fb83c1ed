"""Make the src/ layout importable when the package is not installed."""
from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def pytest_configure():
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))
