from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from .holder import CacheMatrix
from .runtime import runtime

logger = logging.getLogger(__name__)


def cache_solve(
    x: CacheMatrix,
    *args: Any,
    solver: Callable[..., Any] | None = None,
    **options: Any,
) -> Any:
    """Return the inverse of the matrix held by ``x``, computing it at most once.

    If ``x`` already caches an inverse it is returned as-is (same object) and
    no computation happens. Otherwise the stored matrix is passed to
    ``solver`` (the runtime default when None) together with ``args`` and
    ``options``, and the result is cached on ``x`` before being returned.
    An ndarray result is cached as a read-only view; the solver's array
    itself is left untouched.

    ``solver`` is consumed by this function, so an option of that name
    cannot be forwarded to the inversion routine. Every other positional
    and keyword argument is passed through unchanged.

    Any exception raised by the solver propagates unchanged and nothing is
    cached, so the next call tries again.
    """
    inverse = x.get_inverse()
    if inverse is not None:
        logger.info("getting cached inverse")
        return inverse

    if solver is None:
        solver = runtime.get_default_solver()

    matrix = x.get_matrix()
    logger.debug(f"computing inverse with {getattr(solver, '__name__', repr(solver))}")
    inverse = solver(matrix, *args, **options)

    if isinstance(inverse, np.ndarray):
        # The same array is handed out on every cache hit. Freeze a view so
        # the solver's own array (possibly the input matrix) stays writeable.
        inverse = inverse.view()
        inverse.setflags(write=False)

    x._set_inverse(inverse)
    return inverse
