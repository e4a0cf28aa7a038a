# tests/conftest.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for LEC rewrite engine tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for engine components
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def engine():
    """Provide a rewrite engine with the default catalog and strategy."""
    from core.engine import RewriteEngine

    return RewriteEngine()


@pytest.fixture
def recorder():
    """Provide a fresh, empty step recorder."""
    from core.steps import StepRecorder

    return StepRecorder()


@pytest.fixture
def sample_batch():
    """Provide a batch mixing valid, invalid and assignment lines.

    Returns:
        str: Multi-expression input
    """
    return "\n".join(
        [
            "# sample input",
            "A = TRUE",
            "B = FALSE",
            "A & true",
            "",
            "(B |",
            "!(A & B)",
        ]
    )
