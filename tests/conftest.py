"""Pytest configuration and fixtures for Coptic tests.

Hypothesis profiles:
- dev: local development, 200 examples
- ci: CI runs (CI=true), 50 derandomized examples

Override with HYPOTHESIS_PROFILE=dev|ci.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from hypothesis import settings

# Add the parent directory to sys.path so coptic can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())
