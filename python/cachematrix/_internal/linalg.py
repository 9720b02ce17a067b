from __future__ import annotations

from typing import Any

import numpy as np

# Default singularity tolerance: machine epsilon for double precision.
DEFAULT_TOL: float = float(np.finfo(np.float64).eps)


def invert(matrix: Any, *, tol: float | None = DEFAULT_TOL, check_finite: bool = True) -> np.ndarray:
    """Compute the inverse of a square matrix with NumPy.

    Args:
        matrix: Anything ``numpy.asarray`` accepts as a 2-D numeric array.
        tol: Reject the matrix as computationally singular when its
            reciprocal 1-norm condition number is below this value. ``None``
            or ``0`` leaves only the exact-singularity check of
            ``numpy.linalg.inv``.
        check_finite: Reject inputs containing NaN or inf.

    Returns:
        A new ndarray holding the inverse.

    Raises:
        numpy.linalg.LinAlgError: If the input is not 2-D, not square, or
            singular within ``tol``.
        ValueError: If ``check_finite`` is set and the input has NaN/inf.
    """
    a = np.asarray(matrix)
    if a.ndim != 2:
        raise np.linalg.LinAlgError(
            f"{a.ndim}-dimensional array given. Matrix must be two-dimensional"
        )
    rows, cols = a.shape
    if rows != cols:
        raise np.linalg.LinAlgError(f"Matrix must be square, got shape {a.shape}")

    if check_finite and not np.isfinite(a).all():
        raise ValueError("array must not contain infs or NaNs")

    if tol and a.size:
        with np.errstate(all="ignore"):
            cond = np.linalg.cond(a, 1)
        rcond = 0.0 if not np.isfinite(cond) else 1.0 / cond
        if rcond < tol:
            raise np.linalg.LinAlgError(
                f"system is computationally singular: reciprocal condition number = {rcond:g}"
            )

    return np.linalg.inv(a)
