from __future__ import annotations

import logging
import warnings
from typing import Any

from . import ops as _ops
from .holder import CacheMatrix
from .warnings import CacheMatrixCacheWarning

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "getting cached data i.e. inverse computed and stored earlier"


def cache_solve(holder: CacheMatrix, *args: Any, **kwargs: Any) -> Any:
    """Return the inverse of the matrix in `holder`, computing it at most once.

    On a miss the matrix is passed to `ops.solve` together with any extra
    positional/keyword arguments (a right-hand side `b`, a tolerance `tol`),
    and the result is stored in the holder. Errors from the solver propagate
    and leave the cache empty.

    On a hit the cached value is returned as-is; it is not re-validated
    against the current matrix, since `set_matrix` already clears it.
    """
    inv = holder.get_cached_inverse()
    if inv is not None:
        logger.info(CACHE_HIT_MESSAGE)
        if args or kwargs:
            warnings.warn(
                "cache_solve returned a cached result; extra solver arguments were ignored",
                CacheMatrixCacheWarning,
                stacklevel=2,
            )
        return inv

    data = holder.get_matrix()
    logger.debug("cache miss: solving %s matrix (generation %d)", data.shape, holder.generation)
    inv = _ops.solve(data, *args, **kwargs)
    holder.set_cached_inverse(inv)
    return inv
