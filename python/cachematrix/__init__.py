"""Matrix holder that memoizes its inverse until the matrix is replaced."""
from __future__ import annotations

import logging as _logging
from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal.errors import (
    CacheMatrixError,
    DimensionMismatchError,
    SingularMatrixError,
)
from ._internal.holder import CacheMatrix, make_cache_matrix
from ._internal.logging_config import setup_logging
from ._internal.ops import invert, rcond, solve
from ._internal.runtime import runtime
from ._internal.solve import CACHE_HIT_MESSAGE, cache_solve
from ._internal.warnings import CacheMatrixCacheWarning, CacheMatrixWarning

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

configure_formatting = _formatting.configure

__all__ = [
    "CACHE_HIT_MESSAGE",
    "CacheMatrix",
    "CacheMatrixCacheWarning",
    "CacheMatrixError",
    "CacheMatrixWarning",
    "DimensionMismatchError",
    "SingularMatrixError",
    "cache_solve",
    "configure_formatting",
    "invert",
    "make_cache_matrix",
    "rcond",
    "runtime",
    "setup_logging",
    "solve",
]
