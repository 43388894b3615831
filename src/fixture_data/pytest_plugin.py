"""pytest fixtures for reading fixture data directories.

The plugin is registered through the ``pytest11`` entry point, so installing
the package is enough to make the fixtures available.

Usage:
    def test_something(fixture_data: DataTestApi):
        manifest = await fixture_data.get_data("manifest.json")

By default the root is a ``data`` directory next to the test module. Override
``fixture_data_root`` in a ``conftest.py`` to point somewhere else.
"""

from pathlib import Path

import pytest

from fixture_data.api import DataTestApi

DEFAULT_DATA_DIRNAME = "data"


@pytest.fixture()
def fixture_data_root(request: pytest.FixtureRequest) -> Path:
    """Root directory used by the ``fixture_data`` fixture."""
    return request.path.parent / DEFAULT_DATA_DIRNAME


@pytest.fixture()
def fixture_data(fixture_data_root: Path) -> DataTestApi:
    """A DataTestApi over ``fixture_data_root``."""
    return DataTestApi(str(fixture_data_root))
