import numpy as np
import pytest

import cachematrix as cm
from cachematrix._internal.runtime import DEFAULT_EDGE_ITEMS, EDGE_ITEMS_ENV_VAR, TOL_ENV_VAR, Runtime


@pytest.fixture
def fresh_runtime(monkeypatch):
    monkeypatch.delenv(TOL_ENV_VAR, raising=False)
    monkeypatch.delenv(EDGE_ITEMS_ENV_VAR, raising=False)
    cm.runtime.reset()
    yield cm.runtime
    cm.runtime.reset()


def test_defaults(fresh_runtime):
    assert fresh_runtime.solve_tol() == np.finfo(np.float64).eps
    assert fresh_runtime.edge_items() == DEFAULT_EDGE_ITEMS


def test_tol_from_environment(fresh_runtime, monkeypatch):
    monkeypatch.setenv(TOL_ENV_VAR, "1e-8")
    fresh_runtime.reset()
    assert fresh_runtime.solve_tol() == 1e-8

    a = np.array([[1.0, 0.0], [0.0, 1e-10]])
    with pytest.raises(cm.SingularMatrixError):
        cm.solve(a)


def test_values_are_cached_until_reset(fresh_runtime, monkeypatch):
    assert fresh_runtime.edge_items() == DEFAULT_EDGE_ITEMS
    monkeypatch.setenv(EDGE_ITEMS_ENV_VAR, "2")
    assert fresh_runtime.edge_items() == DEFAULT_EDGE_ITEMS
    fresh_runtime.reset()
    assert fresh_runtime.edge_items() == 2


@pytest.mark.parametrize("value", ["abc", "-1"])
def test_invalid_tol(monkeypatch, value):
    monkeypatch.setenv(TOL_ENV_VAR, value)
    with pytest.raises(ValueError, match=TOL_ENV_VAR):
        Runtime().solve_tol()


@pytest.mark.parametrize("value", ["x", "0"])
def test_invalid_edge_items(monkeypatch, value):
    monkeypatch.setenv(EDGE_ITEMS_ENV_VAR, value)
    with pytest.raises(ValueError, match=EDGE_ITEMS_ENV_VAR):
        Runtime().edge_items()
