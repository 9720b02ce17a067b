"""Warning categories raised by cachematrix.

Everything cachematrix warns about derives from CacheMatrixWarning, so
``warnings.simplefilter("ignore", CacheMatrixWarning)`` silences the package
without touching other UserWarnings.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixShapeWarning(CacheMatrixWarning):
    """A stored matrix can never be inverted (not 2-D, or not square)."""
