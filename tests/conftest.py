# tests/conftest.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Veritas test suite.

The configuration handles:
- Python path setup for module imports
- Creation of the engine logger before any output capturing fixture runs
- Common formula fixtures
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
    """Verify module availability and create the global logger.

    Yields:
        None: Control to test execution
    """
    try:
        import rpn
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the logger's handler to the session-wide stdout, not to a
    # per-test capsys stream that is closed after the test.
    from utils.logger import LogLevel, get_logger

    get_logger().set_level(LogLevel.WARNING)

    yield


@pytest.fixture
def sample_formulas():
    """Formulas covering every operator, used by cross-component checks.

    Returns:
        List[str]: RPN formulas
    """
    return [
        "A",
        "A!",
        "1",
        "0!",
        "AB&",
        "AB|",
        "AB^",
        "AB>",
        "AB=",
        "AB&!",
        "AB|!",
        "AB^!",
        "AB>!",
        "AB=!",
        "ABC&|",
        "AB&C|",
        "AB|C&!",
        "AB>C>",
        "AB=C^!",
        "AB&CD&|",
        "AB^C=D>!",
        "A1&B0|>",
        "AA!&",
        "AA!|",
    ]
