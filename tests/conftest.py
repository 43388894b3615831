"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

pytest_plugins = ["pytester"]

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "files"


@pytest.fixture()
def fixture_data_root() -> Path:
    """Point the fixture_data fixture at the shared test data tree.

    The tree contains a.txt, b.txt, bar.foo, foo.bar and c/d.txt.
    """
    return FIXTURES_PATH
