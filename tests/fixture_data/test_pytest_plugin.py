"""Tests for the fixture_data pytest plugin."""

import textwrap
from pathlib import Path

import pytest

from fixture_data.api import DataTestApi


def test_fixture_uses_overridden_root(
    fixture_data: DataTestApi, fixture_data_root: Path
) -> None:
    assert fixture_data.root == str(fixture_data_root)


def test_default_root_is_data_dir_next_to_test(pytester: pytest.Pytester) -> None:
    data = pytester.mkdir("data")
    (data / "c").mkdir()
    (data / "c" / "d.txt").write_text("d\n")
    pytester.makepyfile(
        textwrap.dedent(
            """
            import asyncio
            from pathlib import Path


            def test_default_root(fixture_data, fixture_data_root):
                assert fixture_data_root == Path(__file__).parent / "data"
                assert fixture_data.root == str(fixture_data_root)


            def test_reads_data(fixture_data):
                assert asyncio.run(fixture_data.find_data("d.txt")) == b"d\\n"
            """
        )
    )

    result = pytester.runpytest()

    result.assert_outcomes(passed=2)


def test_root_can_be_overridden_in_conftest(pytester: pytest.Pytester) -> None:
    other = pytester.mkdir("other")
    (other / "a.txt").write_text("a\n")
    pytester.makeconftest(
        textwrap.dedent(
            """
            from pathlib import Path

            import pytest


            @pytest.fixture()
            def fixture_data_root():
                return Path(__file__).parent / "other"
            """
        )
    )
    pytester.makepyfile(
        textwrap.dedent(
            """
            import asyncio


            def test_reads_data(fixture_data):
                assert asyncio.run(fixture_data.get_data("a.txt")) == b"a\\n"
            """
        )
    )

    result = pytester.runpytest()

    result.assert_outcomes(passed=1)
