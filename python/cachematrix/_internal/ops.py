from __future__ import annotations

from typing import Any

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError
from .runtime import runtime


def _as_square_matrix(a: Any) -> np.ndarray:
    arr = np.asarray(a)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"expected a 2D matrix, got an array with ndim={arr.ndim}")
    rows, cols = arr.shape
    if rows != cols:
        raise DimensionMismatchError(f"matrix must be square, got shape {arr.shape}")
    if rows == 0:
        raise DimensionMismatchError("cannot invert an empty matrix")
    return arr


def rcond(a: Any, inv: Any) -> float:
    """Reciprocal condition number of `a` in the 1-norm, given its inverse."""
    denom = float(np.linalg.norm(a, 1) * np.linalg.norm(inv, 1))
    if denom == 0.0 or not np.isfinite(denom):
        return 0.0
    return 1.0 / denom


def invert(a: Any, *, tol: float | None = None) -> np.ndarray:
    """Return the inverse of the square matrix `a`.

    Raises `SingularMatrixError` when LAPACK reports an exactly singular
    matrix, or when the reciprocal condition number falls below `tol`
    (defaults to the configured tolerance, machine epsilon unless overridden).
    """
    arr = _as_square_matrix(a)
    if tol is None:
        tol = runtime.solve_tol()

    try:
        inv = np.linalg.inv(arr)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"matrix is exactly singular: {exc}") from exc

    rc = rcond(arr, inv)
    if rc < tol:
        raise SingularMatrixError(
            f"system is computationally singular: reciprocal condition number = {rc:g}"
        )
    return inv


def solve(a: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Solve `a @ x = b`, or return the inverse of `a` when `b` is omitted."""
    inv = invert(a, tol=tol)
    if b is None:
        return inv

    rhs = np.asarray(b)
    n = inv.shape[0]
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise DimensionMismatchError(
            f"right-hand side of shape {rhs.shape} is incompatible with a {n}x{n} matrix"
        )
    return inv @ rhs
