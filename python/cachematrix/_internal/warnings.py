"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix warnings without
catching all UserWarning.

Keep this module dependency-free so the error and solve modules can import it.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixCacheWarning(CacheMatrixWarning):
    """Warnings about cache usage pitfalls (e.g., arguments ignored on a hit)."""
