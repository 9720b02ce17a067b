from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _is_row(value: Any) -> bool:
    # Rows may be plain sequences or 1-D arrays.
    return is_sequence_like(value) or (
        hasattr(value, "__len__") and getattr(value, "ndim", None) == 1
    )


def matrix_shape(value: Any) -> tuple[int, ...] | None:
    """Best-effort shape of an array-like or nested sequence.

    Returns None when the shape cannot be determined (ragged rows, scalars,
    arbitrary objects). Never raises.
    """

    try:
        shape = getattr(value, "shape", None)
        if isinstance(shape, tuple):
            return tuple(int(s) for s in shape)
    except Exception:
        return None

    if not is_sequence_like(value):
        return None

    try:
        rows = list(value)
        if not rows:
            return (0, 0)
        if not all(_is_row(row) for row in rows):
            # A flat sequence of entries is a vector.
            return (len(rows),)
        widths = {len(row) for row in rows}
    except Exception:
        return None
    if len(widths) != 1:
        return None
    return (len(rows), widths.pop())
