import numpy as np
import pytest

import cachematrix as cm
from cachematrix import CacheMatrix


@pytest.fixture(autouse=True)
def _reset_formatting():
    cm.configure_formatting()
    yield
    cm.configure_formatting()


def test_str_small_matrix():
    h = CacheMatrix([[1, 2], [3, 4]])
    assert str(h) == "CacheMatrix(shape=(2, 2), cached=no)\n[\n [1 2]\n [3 4]\n]"


def test_str_reports_cache_and_generation():
    h = CacheMatrix([[2.0]])
    h.set_matrix([[0.5]])
    cm.cache_solve(h)
    header = str(h).splitlines()[0]
    assert header == "CacheMatrix(shape=(1, 1), cached=yes, generation=1)"


def test_str_empty_placeholder():
    assert str(CacheMatrix()) == "CacheMatrix(shape=(0, 0), cached=no)\n[]"


def test_str_truncates_large_matrix():
    h = CacheMatrix(np.arange(100).reshape(10, 10))
    lines = str(h).splitlines()
    assert lines[2] == " [0 1 2 3 ... 6 7 8 9]"
    assert " ..." in lines
    # header, "[", 4 head rows, "...", 4 tail rows, "]"
    assert len(lines) == 12


def test_configure_edge_items():
    cm.configure_formatting(edge_items=1)
    h = CacheMatrix(np.arange(16).reshape(4, 4))
    lines = str(h).splitlines()
    assert lines[2] == " [0 ... 3]"
    assert lines[-2] == " [12 ... 15]"


def test_repr():
    h = CacheMatrix(np.eye(3))
    assert repr(h) == "<CacheMatrix shape=(3, 3) cached=False>"
    cm.cache_solve(h)
    assert repr(h) == "<CacheMatrix shape=(3, 3) cached=True>"
