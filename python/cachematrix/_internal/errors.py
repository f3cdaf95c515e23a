from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for errors raised by cachematrix."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix has no inverse (exactly or computationally singular)."""


class DimensionMismatchError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix is not square, or an operand has an incompatible shape."""
