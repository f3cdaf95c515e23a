from __future__ import annotations

import os

import numpy as np

TOL_ENV_VAR = "CACHEMATRIX_SOLVE_TOL"
EDGE_ITEMS_ENV_VAR = "CACHEMATRIX_EDGE_ITEMS"

DEFAULT_EDGE_ITEMS = 4


class Runtime:
    """Process settings read lazily from the environment and cached."""

    def __init__(
        self,
        *,
        tol_env_var: str = TOL_ENV_VAR,
        edge_items_env_var: str = EDGE_ITEMS_ENV_VAR,
    ) -> None:
        self._tol_env_var = tol_env_var
        self._edge_items_env_var = edge_items_env_var
        self._solve_tol_cache: float | None = None
        self._edge_items_cache: int | None = None

    def solve_tol(self) -> float:
        """Default tolerance for detecting computationally singular matrices."""
        if self._solve_tol_cache is not None:
            return self._solve_tol_cache

        env = os.environ.get(self._tol_env_var)
        if env:
            try:
                tol = float(env)
            except ValueError:
                raise ValueError(f"{self._tol_env_var} must be a float, got {env!r}") from None
            if tol < 0.0:
                raise ValueError(f"{self._tol_env_var} must be non-negative, got {tol}")
        else:
            tol = float(np.finfo(np.float64).eps)

        self._solve_tol_cache = tol
        return tol

    def edge_items(self) -> int:
        if self._edge_items_cache is not None:
            return self._edge_items_cache

        env = os.environ.get(self._edge_items_env_var)
        if env:
            try:
                count = int(env)
            except ValueError:
                raise ValueError(
                    f"{self._edge_items_env_var} must be an integer, got {env!r}"
                ) from None
            if count < 1:
                raise ValueError(f"{self._edge_items_env_var} must be positive, got {count}")
        else:
            count = DEFAULT_EDGE_ITEMS

        self._edge_items_cache = count
        return count

    def reset(self) -> None:
        """Forget cached settings so the next access re-reads the environment."""
        self._solve_tol_cache = None
        self._edge_items_cache = None


runtime = Runtime()
