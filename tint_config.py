# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_config.py: Runtime precision switch and (N, 3) array plumbing.

Every vector-valued entry point in Tint accepts either a single color of
shape (3,) or a stack of colors of shape (N, 3).  Internally all kernels
operate on contiguous (N, 3) arrays of the active float dtype; the
``handle_shapes`` decorator and ``as_color_batch`` helper take care of the
normalisation on the way in and the squeeze on the way out.

Precision
---------
Tint runs in either float64 (default) or float32.  All constant tables are
stored as float64 and cast at the point of use, so switching precision never
requires rebuilding a table.

    import tint_config
    tint_config.set_float_dtype("float32")     # process-wide
    with tint_config.float_precision(np.float64):
        ...                                     # temporary override

The default can also be selected before import through the
``TINT_FLOAT_DTYPE`` environment variable.
"""

from __future__ import annotations

import contextlib
import functools
import os
from typing import Any, Callable, Final, Iterator, Tuple, TypeAlias, Union

import numpy as np
import numpy.typing as npt

__all__ = [
    "ArrayFloat",
    "DTypeLike",
    "get_float_dtype",
    "set_float_dtype",
    "float_precision",
    "as_float_array",
    "as_color_batch",
    "handle_shapes",
]

ArrayFloat: TypeAlias = npt.NDArray[np.floating]
DTypeLike: TypeAlias = Union[str, type, np.dtype]

_SUPPORTED_DTYPES: Final[Tuple[np.dtype, ...]] = (
    np.dtype(np.float32),
    np.dtype(np.float64),
)


def _resolve_dtype(dtype: DTypeLike) -> np.dtype:
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"Unsupported float dtype: {dtype!r}") from exc
    if resolved not in _SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported float dtype: {resolved}. Expected float32 or float64."
        )
    return resolved


# --- Runtime Configuration ---
_FLOAT_DTYPE: np.dtype = _resolve_dtype(os.environ.get("TINT_FLOAT_DTYPE", "float64"))


def get_float_dtype() -> np.dtype:
    """Returns the dtype used for tristimulus arithmetic."""
    return _FLOAT_DTYPE


def set_float_dtype(dtype: DTypeLike) -> None:
    """
    Selects single or double precision for all subsequent conversions.

    Conversions constructed before the switch keep the matrices they were
    built with; rebuild them to pick up the new precision.

    Args:
        dtype: ``np.float32`` / ``np.float64`` or their string names.

    Raises:
        ValueError: If *dtype* is not float32 or float64.
    """
    global _FLOAT_DTYPE
    _FLOAT_DTYPE = _resolve_dtype(dtype)


@contextlib.contextmanager
def float_precision(dtype: DTypeLike) -> Iterator[np.dtype]:
    """
    Temporarily switches the active float dtype.

    The switch is process-wide: every thread sees the new dtype until the
    block exits. Not for concurrent use; enter it from one thread while no
    other thread is converting.
    """
    global _FLOAT_DTYPE
    previous = _FLOAT_DTYPE
    _FLOAT_DTYPE = _resolve_dtype(dtype)
    try:
        yield _FLOAT_DTYPE
    finally:
        _FLOAT_DTYPE = previous


def as_float_array(data: Any, readonly: bool = False) -> ArrayFloat:
    """
    Casts *data* to a contiguous array of the active float dtype.

    Args:
        data: Anything ``np.asarray`` accepts.
        readonly: If True, the returned array is a locked copy.
    """
    if not readonly:
        return np.ascontiguousarray(data, dtype=_FLOAT_DTYPE)
    arr = np.array(data, dtype=_FLOAT_DTYPE, order="C")
    arr.setflags(write=False)
    return arr


def as_color_batch(values: Any) -> Tuple[ArrayFloat, bool]:
    """
    Normalises *values* to a contiguous (N, 3) array of the active dtype.

    Returns:
        ``(batch, single)`` where *single* is True when the input was a
        single (3,) color and the caller should return ``result[0]``.

    Raises:
        ValueError: If the last dimension is not 3 or the input is not 1D/2D.
    """
    arr = np.asarray(values)
    if arr.ndim not in (1, 2):
        raise ValueError(f"Expected shape (3,) or (N, 3), got {arr.shape}")
    batch = np.ascontiguousarray(np.atleast_2d(arr), dtype=_FLOAT_DTYPE)
    if batch.shape[-1] != 3:
        raise ValueError(f"Expected last dimension size 3, got {batch.shape[-1]}")
    return batch, arr.ndim == 1


def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to (N, 3) and safeguard shape.

    - If input is (3,), returns (3,)
    - If input is (N, 3), returns (N, 3)
    """
    @functools.wraps(func)
    def wrapper(arr: Any, *args: Any, **kwargs: Any) -> ArrayFloat:
        batch, single = as_color_batch(arr)
        res = func(batch, *args, **kwargs)
        if single:
            return res[0]
        return res
    return wrapper
