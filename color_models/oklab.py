# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Oklab and its polar form Oklch (B. Ottosson, 2020).

Oklab is defined on D65-relative CIE XYZ:

    XYZ --M1--> LMS --cbrt--> LMS' --M2--> Lab

The cube root is applied sign-preserving so out-of-gamut (negative) cone
responses round-trip.  Oklch expresses (a, b) as chroma and hue, with hue
in radians in (-pi, pi].
"""

from typing import Final

import numpy as np
from numba import njit

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat, as_float_array

__all__ = [
    "xyz_to_oklab",
    "oklab_to_xyz",
    "xyz_to_oklch",
    "oklch_to_xyz",
]

# XYZ (D65) -> cone response
_M1_XYZ_TO_LMS = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070]
], dtype=np.float64)

# Nonlinear cone response -> Lab
_M2_LMS_TO_LAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660]
], dtype=np.float64)

# Pre-transposed for row-stacked colors
M1_T: Final[ArrayFloat] = _M1_XYZ_TO_LMS.T.copy()
M2_T: Final[ArrayFloat] = _M2_LMS_TO_LAB.T.copy()
M1_INV_T: Final[ArrayFloat] = np.linalg.inv(_M1_XYZ_TO_LMS).T.copy()
M2_INV_T: Final[ArrayFloat] = np.linalg.inv(_M2_LMS_TO_LAB).T.copy()


@njit(cache=True, fastmath=True)
def _lab_to_lch_rad_kernel(lab: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(lab)
    for i in range(lab.shape[0]):
        a = float(lab[i, 1])
        b = float(lab[i, 2])
        out[i, 0] = lab[i, 0]
        out[i, 1] = np.sqrt(a * a + b * b)
        out[i, 2] = np.arctan2(b, a)
    return out


@njit(cache=True, fastmath=True)
def _lch_rad_to_lab_kernel(lch: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(lch)
    for i in range(lch.shape[0]):
        c = float(lch[i, 1])
        h = float(lch[i, 2])
        out[i, 0] = lch[i, 0]
        out[i, 1] = c * np.cos(h)
        out[i, 2] = c * np.sin(h)
    return out


def xyz_to_oklab(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """D65 XYZ -> Oklab."""
    lms = values @ as_float_array(M1_T)
    lms_prime = np.cbrt(lms)
    return lms_prime @ as_float_array(M2_T)


def oklab_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """Oklab -> D65 XYZ."""
    lms_prime = values @ as_float_array(M2_INV_T)
    lms = lms_prime * lms_prime * lms_prime
    return lms @ as_float_array(M1_INV_T)


def xyz_to_oklch(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _lab_to_lch_rad_kernel(xyz_to_oklab(values, white_point))


def oklch_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return oklab_to_xyz(_lch_rad_to_lab_kernel(values), white_point)
