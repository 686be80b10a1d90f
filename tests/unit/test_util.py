"""Unit tests for stack inspection helpers."""

import inspect
import os

import pytest

from deprecatable.util import location_of_caller


def whoever_called_me():
    return location_of_caller()


def two_levels_up():
    return location_of_caller(depth=2)


def middle():
    return two_levels_up()


@pytest.mark.unit
class TestLocationOfCaller:
    """Tests for location_of_caller."""

    def test_returns_caller_of_caller(self):
        """Test the default depth points at the line calling the function."""
        file, line = whoever_called_me()
        expected = inspect.currentframe().f_lineno - 1

        assert file == os.path.abspath(__file__)
        assert line == expected

    def test_depth_walks_further_up(self):
        """Test depth=2 skips one more frame."""
        file, line = middle()
        expected = inspect.currentframe().f_lineno - 1

        assert file == os.path.abspath(__file__)
        assert line == expected

    def test_file_is_absolute(self):
        """Test the returned path is absolute."""
        file, _ = whoever_called_me()

        assert os.path.isabs(file)
