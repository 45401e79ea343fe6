# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Chromatic Adaptation Transforms (von Kries family).

The adaptation matrix between two white points is

    M_cat = M^-1 @ diag(M @ W_dst / M @ W_src) @ M

where M maps XYZ into a cone-response (LMS) space.  Different choices of M
give the classic transforms; the sharpened cone space of Finlayson &
Süsstrunk is the default.

References:
    - Lindbloom, B. "Chromatic Adaptation", brucelindbloom.com
    - Süsstrunk, S., Holm, J., Finlayson, G. D. (2001). "Chromatic
      adaptation performance of different RGB sensors".
    - CIE 159:2004 (CIECAM02 / CAT02).
"""

import functools
import warnings
from enum import Enum
from typing import Final

import numpy as np

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat, as_float_array, handle_shapes

__all__ = [
    "LmsConeSpace",
    "chromatic_adaptation_transform",
    "adapt",
]

# Row-major XYZ -> LMS matrices.
_CONE_MATRICES: Final[dict[str, ArrayFloat]] = {
    "VON_KRIES": np.array([
        [ 0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532,  0.04570],
        [ 0.00000, 0.00000,  0.91822],
    ], dtype=np.float64),
    "BRADFORD": np.array([
        [ 0.8951,  0.2664, -0.1614],
        [-0.7502,  1.7135,  0.0367],
        [ 0.0389, -0.0685,  1.0296],
    ], dtype=np.float64),
    "SHARP": np.array([
        [ 1.2694, -0.0988, -0.1706],
        [-0.8364,  1.8006,  0.0357],
        [ 0.0297, -0.0315,  1.0018],
    ], dtype=np.float64),
    "CMCCAT2000": np.array([
        [ 0.7982,  0.3389, -0.1371],
        [-0.5918,  1.5512,  0.0406],
        [ 0.0008,  0.2390,  0.9753],
    ], dtype=np.float64),
    "CAT02": np.array([
        [ 0.7328,  0.4296, -0.1624],
        [-0.7036,  1.6975,  0.0061],
        [ 0.0030,  0.0136,  0.9834],
    ], dtype=np.float64),
}
for _m in _CONE_MATRICES.values():
    _m.setflags(write=False)


class LmsConeSpace(Enum):
    """Cone-response spaces available for adaptation."""
    VON_KRIES = "VON_KRIES"
    BRADFORD = "BRADFORD"
    SHARP = "SHARP"
    CMCCAT2000 = "CMCCAT2000"
    CAT02 = "CAT02"

    def matrix(self) -> ArrayFloat:
        """Returns the read-only (3, 3) XYZ -> LMS matrix."""
        return _CONE_MATRICES[self.value]


@functools.lru_cache(maxsize=64)
def _cached_cat_matrix(src_white: WhitePoint, dst_white: WhitePoint, cone_space: LmsConeSpace) -> ArrayFloat:
    M = cone_space.matrix()
    src_lms = M @ np.array(src_white.values(), dtype=np.float64)
    dst_lms = M @ np.array(dst_white.values(), dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        gains = dst_lms / src_lms
        cat = np.linalg.inv(M) @ np.diag(gains) @ M
    cat.setflags(write=False)
    return cat


def chromatic_adaptation_transform(
    src_white: WhitePoint,
    dst_white: WhitePoint,
    cone_space: LmsConeSpace = LmsConeSpace.SHARP,
) -> ArrayFloat:
    """
    Computes the adaptation matrix from *src_white* to *dst_white*.

    Results are cached per argument triple.  Equal white points yield the
    identity up to rounding.  A source white with a zero cone response
    (e.g. ``WhitePoint.NONE``) produces inf/NaN entries and a
    ``RuntimeWarning``; the matrix is not clamped.

    Returns:
        Read-only float64 (3, 3) matrix for column vectors.
    """
    src_lms = cone_space.matrix() @ np.array(src_white.values(), dtype=np.float64)
    if np.any(src_lms == 0.0):
        warnings.warn(
            f"Chromatic adaptation from {src_white.name} in {cone_space.name} "
            "space has a zero cone response; the matrix will contain inf/NaN.",
            RuntimeWarning,
            stacklevel=2,
        )
    return _cached_cat_matrix(src_white, dst_white, cone_space)


@handle_shapes
def adapt(
    xyz: ArrayFloat,
    src_white: WhitePoint,
    dst_white: WhitePoint,
    cone_space: LmsConeSpace = LmsConeSpace.SHARP,
) -> ArrayFloat:
    """
    Adapts XYZ color(s) from *src_white* to *dst_white*.

    Args:
        xyz: Input XYZ, shape (3,) or (N, 3).
        src_white: Illuminant the input is relative to.
        dst_white: Illuminant to adapt to.
        cone_space: Cone-response space of the transform.

    Returns:
        Adapted XYZ with the input's shape and the active float dtype.
    """
    if src_white is dst_white:
        return xyz.copy()
    M = as_float_array(chromatic_adaptation_transform(src_white, dst_white, cone_space))
    return xyz @ M.T
