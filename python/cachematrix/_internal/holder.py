from __future__ import annotations

from typing import Any

import numpy as np

from .formatting import HolderFormattingMixin


def _frozen(matrix: Any) -> np.ndarray:
    arr = np.array(matrix)
    arr.setflags(write=False)
    return arr


def _empty_matrix() -> np.ndarray:
    return _frozen(np.empty((0, 0), dtype=np.float64))


class CacheMatrix(HolderFormattingMixin):
    """A matrix paired with a lazily computed, invalidated-on-write inverse.

    The holder is a plain state container: it never validates its input. The
    cached inverse is reset to ``None`` on every `set_matrix`, so it can never
    describe a stale matrix. Whoever calls `set_cached_inverse` is responsible
    for passing the inverse of the *current* matrix (see
    `cachematrix.cache_solve`).

    Both the stored matrix and a stored ndarray inverse are read-only; writing
    into the array returned by `get_matrix` or `get_cached_inverse` raises
    ``ValueError``. The only way to change the matrix is `set_matrix`.

    The holder raises nothing of its own. Input NumPy cannot turn into an
    array (ragged nested lists) fails inside ``numpy.array`` with NumPy's
    ``ValueError``, before any state is touched.

    Not thread-safe: a concurrent caller would need to lock around
    `set_matrix` and around the check/compute/store sequence of
    `cache_solve`.
    """

    def __init__(self, matrix: Any = None) -> None:
        self._matrix: np.ndarray = _empty_matrix()
        self._cached_inverse: np.ndarray | None = None
        self._generation = 0
        if matrix is not None:
            self._matrix = _frozen(matrix)

    def set_matrix(self, new_matrix: Any) -> None:
        """Replace the stored matrix and drop the cached inverse."""
        self._matrix = _frozen(new_matrix)
        self._cached_inverse = None
        self._generation += 1

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def set_cached_inverse(self, inverse: Any) -> None:
        # Marks the caller's array read-only in place; identity is preserved.
        if isinstance(inverse, np.ndarray):
            inverse.setflags(write=False)
        self._cached_inverse = inverse

    def get_cached_inverse(self) -> np.ndarray | None:
        return self._cached_inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    @property
    def generation(self) -> int:
        """Number of times the matrix has been replaced since construction."""
        return self._generation

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._matrix.shape)


def make_cache_matrix(matrix: Any = None) -> CacheMatrix:
    """Create a `CacheMatrix` holding `matrix` (an empty placeholder by default)."""
    return CacheMatrix(matrix)
