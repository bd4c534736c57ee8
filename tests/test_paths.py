"""Tests for path splitting."""

import pytest

from policy_store import DELIMITER, InvalidPathError
from policy_store.paths import split_path


def test_delimiter():
    assert DELIMITER == ":"


def test_single_segment():
    assert split_path("a") == ["a"]


def test_nested():
    assert split_path("a:b:c") == ["a", "b", "c"]


def test_no_escaping():
    assert split_path("a::b") == ["a", "", "b"]


@pytest.mark.parametrize("path", ["", None, 3])
def test_invalid(path):
    with pytest.raises(InvalidPathError):
        split_path(path)
