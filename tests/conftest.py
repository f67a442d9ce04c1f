"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows `import fieldcheck` to work from a plain checkout, without an
editable install, by putting the src/ layout root on sys.path.
"""

import os
import sys
from pathlib import Path


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

# Keep test runs independent of whatever the developer shell exports.
os.environ.pop("FIELDCHECK_MAX_DEPTH", None)
os.environ.setdefault("FIELDCHECK_LOG_LEVEL", "INFO")
