"""Pytest configuration: make the `phonetic_api` package importable without installation."""

import sys
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "apps" / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))
