"""Pytest configuration to make the project root importable as a package.

This ensures that ``import md_writer`` works when tests are run from the
repository root or other locations without an editable install.
"""

import os
import sys

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
