from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Logging reset so handlers bound to captured streams never leak across tests.
3. Shared fixtures for generated trees.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from deeptree.core.services.generator import generate_tree  # noqa: E402
from deeptree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging(capsys):
    """
    Detach deeptree handlers before and after each test.

    Depends on capsys so the listener is drained and stopped while the
    captured stderr its console handler writes to is still open.
    """
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def depth_two_tree(tmp_path: Path) -> Path:
    """Generate a depth-2 tree under a temporary directory."""
    root = tmp_path / "tree"
    generate_tree(2, str(root))
    return root
