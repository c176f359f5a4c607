# tests/conftest.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Causa test suite.

The configuration handles:
- Python path setup for module imports
- Temporary history files for reader and CLI tests
"""

import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability and create the shared logger once.

    The logger binds its console handler to the stdout of the moment it
    is created, so it is created here rather than inside a test that
    captures output.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import causality
        import notation
        from causa_utils.logger import get_logger
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    get_logger()
    yield


@pytest.fixture
def sample_replicas():
    """Standard replica identifiers for test scenarios."""
    return ["A", "B", "C"]


@pytest.fixture
def write_history(tmp_path):
    """Write a CSV history file and return its path.

    Returns:
        Callable taking the file text and returning the path as a string
    """

    def _write(text: str, name: str = "history.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
