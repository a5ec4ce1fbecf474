# tests/conftest.py
# This file is part of Entail - A Propositional Argument Validator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Entail validator tests.

This module provides pytest configuration, fixtures, and utilities for testing
the argument validator. It ensures proper module path setup and provides
common arguments and an argument-file factory for all test modules.
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
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def kma_argument():
    """Provide the three-variable reference argument.

    Returns:
        Tuple of (variables, premises, conclusion)
    """
    return ["k", "m", "a"], ["(k | m) > !a", "a | m"], "a | !k"


@pytest.fixture
def write_argument_file(tmp_path):
    """Provide a factory that writes argument-file text to a temporary path.

    Returns:
        Callable taking file text (and an optional name) and returning the path
    """

    def _write(text: str, name: str = "argument.arg") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
