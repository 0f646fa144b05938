from __future__ import annotations

import os
import sys
from pathlib import Path

# Dynamically ensure the src/ tree is importable without installation
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

# Keep tests independent from the caller's environment
for _var in ("FLAGFILE_FILES", "FLAGFILE_JSON_LOGS", "FLAGFILE_TRACE_IO"):
    os.environ.pop(_var, None)
