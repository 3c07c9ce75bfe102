# tests/conftest.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

This module makes the project packages importable from the test tree and
provides fixtures shared by the parser, logic and integration tests.
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
    """Verify the project packages are importable before any test runs.

    Yields:
        None: Control to test execution
    """
    try:
        import formula_parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Create the global logger before any test swaps out sys.stderr
    utils.get_logger()

    yield


@pytest.fixture
def basic_formula():
    """Provide a formula mixing conjunction and disjunction.

    Returns:
        str: Formula over a, b and c
    """
    return "a & b | c"


@pytest.fixture
def complex_formula():
    """Provide a formula using every binary connective.

    Returns:
        str: Formula over a, b, c, d and e
    """
    return "(a | b) & ~c -> d <-> e"


@pytest.fixture
def formula_file(tmp_path):
    """Write a small formula file and return its path.

    Returns:
        Path: File holding two formulas, a comment and a blank line
    """
    path = tmp_path / "formulas.txt"
    path.write_text("# contrapositive pair\np -> q\n\n~q -> ~p\n", encoding="utf-8")
    return path
