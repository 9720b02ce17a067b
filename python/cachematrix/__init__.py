"""Matrices that cache their inverse until the matrix is replaced."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import logging
from typing import Any, Callable

from ._internal.holder import CacheMatrix, wrap_matrix as _wrap_matrix
from ._internal.linalg import DEFAULT_TOL, invert
from ._internal.runtime import runtime as _runtime
from ._internal.solve import cache_solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixShapeWarning,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Wrap ``x`` in a CacheMatrix (an empty 0x0 matrix when omitted)."""
    return _wrap_matrix(x, stacklevel=4)


# Alias: the orchestrated "get or compute" entry point.
get_or_compute_inverse = cache_solve


def get_default_solver() -> Callable[..., Any]:
    """Return the routine cache_solve uses when no solver is passed."""
    return _runtime.get_default_solver()


def set_default_solver(solver: Callable[..., Any] | None) -> None:
    """Set the routine cache_solve uses when no solver is passed.

    Passing None restores the NumPy-based ``invert``.
    """
    _runtime.set_default_solver(solver)


def default_solver(solver: Callable[..., Any] | None):
    """Context manager: use ``solver`` as the default inside the block.

    Example::

        with cachematrix.default_solver(numpy.linalg.inv):
            inv = cachematrix.cache_solve(cm)
    """
    return _runtime.default_solver(solver)


__all__ = [
    "__version__",
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "get_or_compute_inverse",
    "invert",
    "DEFAULT_TOL",
    "get_default_solver",
    "set_default_solver",
    "default_solver",
    "CacheMatrixWarning",
    "CacheMatrixShapeWarning",
]
