from __future__ import annotations

import sys
from pathlib import Path


# Ensure `import ladder_rounder` works when running tests without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
