"""Numeric ingestion — turn caller containers into flat float64 sequences.

Supported inputs:

  - any object with an ``as_float_sequence()`` method (see
    :class:`SupportsFloatSequence`)
  - ``numpy.ndarray`` of any shape: vectors as-is, matrices flattened
    row-major (C order)
  - plain Python sequences of numbers: ``list``, ``tuple``, ``range``,
    ``array.array``

Everything else is rejected with ``TypeError`` at the call site.
"""

from __future__ import annotations

import array
from typing import Any, List, Protocol, Union

import numpy as np

_SEQUENCE_TYPES = (list, tuple, range, array.array)


class SupportsFloatSequence(Protocol):
    """A container that can present itself as a flat sequence of doubles."""

    def as_float_sequence(self) -> np.ndarray:
        ...


ArrayLike = Union[SupportsFloatSequence, np.ndarray, List[float], tuple, range, Any]


def _readonly(values: np.ndarray) -> np.ndarray:
    view = values.view()
    view.flags.writeable = False
    return view


def _numeric_array(data: Any) -> np.ndarray:
    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"cannot convert {type(data).__name__} to a float sequence: {exc}"
        ) from exc
    return arr


def to_float_sequence(data: ArrayLike) -> np.ndarray:
    """Convert ``data`` to a read-only 1-D float64 array.

    Matrices are flattened row by row. A contiguous float64 ndarray is
    returned as a view without copying.
    """
    if hasattr(data, "as_float_sequence"):
        arr = np.asarray(data.as_float_sequence(), dtype=np.float64)
    elif isinstance(data, np.ndarray):
        if data.dtype.kind not in "biuf":
            raise TypeError(f"unsupported array dtype {data.dtype}")
        arr = data.astype(np.float64, copy=False)
    elif isinstance(data, _SEQUENCE_TYPES):
        arr = _numeric_array(data)
    else:
        raise TypeError(
            f"{type(data).__name__} cannot be used as plot data; "
            "pass a list, tuple, range, array.array or numpy array"
        )
    return _readonly(arr.ravel(order="C"))


def to_matrix_rows(data: ArrayLike) -> List[np.ndarray]:
    """Split a 2-D container into its rows, each a read-only float64 array.

    A 1-D input is a single row. Row count is taken from the matrix itself.
    """
    if hasattr(data, "as_float_sequence"):
        return [to_float_sequence(data)]
    if isinstance(data, np.ndarray):
        if data.dtype.kind not in "biuf":
            raise TypeError(f"unsupported array dtype {data.dtype}")
        if data.ndim > 2:
            raise TypeError(f"expected a matrix, got an array with {data.ndim} dimensions")
        mat = np.atleast_2d(data.astype(np.float64, copy=False))
        return [_readonly(row) for row in mat]
    if isinstance(data, _SEQUENCE_TYPES):
        if len(data) == 0:
            return []
        if all(isinstance(row, _SEQUENCE_TYPES + (np.ndarray,)) for row in data):
            return [to_float_sequence(row) for row in data]
        return [to_float_sequence(data)]
    raise TypeError(
        f"{type(data).__name__} cannot be used as matrix data; "
        "pass a 2-D numpy array or a list of rows"
    )
