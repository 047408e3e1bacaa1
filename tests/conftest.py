from __future__ import annotations

import sys
from pathlib import Path

# Make the src/ layout and the shared fixtures importable without an editable install.
TESTS_ROOT = Path(__file__).resolve().parent
SRC_ROOT = TESTS_ROOT.parent / "src"
for _path in (SRC_ROOT, TESTS_ROOT):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))
