"""Pytest configuration.

The package lives under `src/`. This conftest ensures tests can import `reqintent` when running
`pytest` locally without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure `import reqintent` works when running pytest without installing the package.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))
