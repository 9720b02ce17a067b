from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .coercion import matrix_shape
from .warnings import CacheMatrixShapeWarning


def _warn_if_not_invertible_shape(matrix: Any, *, stacklevel: int = 3) -> None:
    shape = matrix_shape(matrix)
    if shape is None:
        return
    if len(shape) != 2 or shape[0] != shape[1]:
        warnings.warn(
            f"matrix of shape {shape} is not square; computing its inverse will fail",
            CacheMatrixShapeWarning,
            stacklevel=stacklevel,
        )


class CacheMatrix:
    """A matrix together with a lazily computed, cached inverse.

    The cached inverse is present only between a successful computation and
    the next ``set_matrix`` call. Use ``cache_solve`` to obtain the inverse;
    it is the only caller of ``_set_inverse``.

    Shapes are not validated here. A value that can never be inverted is
    stored anyway (with a ``CacheMatrixShapeWarning``) and the inversion
    routine reports the error when the inverse is requested.
    """

    __slots__ = ("_matrix", "_inverse")

    def __init__(self, matrix: Any = None) -> None:
        if matrix is None:
            matrix = np.empty((0, 0), dtype=np.float64)
        else:
            _warn_if_not_invertible_shape(matrix)
        self._matrix = matrix
        self._inverse: Any | None = None

    def set_matrix(self, matrix: Any) -> None:
        """Replace the stored matrix and drop any cached inverse."""
        _warn_if_not_invertible_shape(matrix)
        self._matrix = matrix
        self._inverse = None

    def get_matrix(self) -> Any:
        return self._matrix

    def get_inverse(self) -> Any | None:
        """Return the cached inverse, or None if it has not been computed."""
        return self._inverse

    def _set_inverse(self, inverse: Any) -> None:
        # Caller guarantees `inverse` is the inverse of the current matrix.
        self._inverse = inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        shape = matrix_shape(self._matrix)
        shape_text = "unknown" if shape is None else str(shape)
        return f"CacheMatrix(shape={shape_text}, cached_inverse={self.has_inverse})"


def wrap_matrix(matrix: Any, *, stacklevel: int = 3) -> CacheMatrix:
    """Build a CacheMatrix for a factory function.

    ``stacklevel`` is the ``warnings.warn`` level for shape warnings: 3
    points at the caller of this function, so a factory called directly by
    user code passes 4.
    """
    cm = CacheMatrix()
    if matrix is not None:
        _warn_if_not_invertible_shape(matrix, stacklevel=stacklevel)
        cm._matrix = matrix
    return cm
