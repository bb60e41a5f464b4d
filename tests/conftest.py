"""Pytest configuration.

This conftest ensures tests can import from the `sms_ledger.*` namespace when running `pytest`
from a checkout without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure `import sms_ledger...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
