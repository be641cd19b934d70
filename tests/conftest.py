# tests/conftest.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Propcheck tests.

This module provides pytest configuration and fixtures shared by the parser,
engine and command-line tests. It ensures the project packages are importable
when the suite runs from a source checkout.
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
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def modus_ponens_kb():
    """Provide a knowledge base whose only model makes a and b true.

    Returns:
        List[str]: Knowledge-base formulas
    """
    return ["a", "if a then b"]


@pytest.fixture
def small_config():
    """Provide an engine configuration with a tight atom limit.

    Returns:
        EngineConfig: Configuration allowing at most three atoms
    """
    from logic import EngineConfig

    return EngineConfig(max_atoms=3)
