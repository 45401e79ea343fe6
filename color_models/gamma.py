# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Piecewise power-law transfer functions (display gamma).

* sRGB:    IEC 61966-2-1
* BT.601:  ITU-R BT.601 / BT.709 / BT.2020 camera OETF

Both curves are linear near zero and a shifted power law above the cutoff.
The kernels loop over the flattened buffer instead of using ``np.where`` to
avoid allocating boolean masks; values are applied per channel, so the
white point argument of the registry signature is unused.
"""

import numpy as np
from numba import njit

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat

__all__ = [
    "srgb_encode",
    "srgb_decode",
    "bt601_encode",
    "bt601_decode",
]

# sRGB
_SRGB_CUTOFF = 0.0031308
_SRGB_DECODE_CUTOFF = 0.04045
_SRGB_SLOPE = 12.92
_SRGB_OFFSET = 0.055
_SRGB_GAIN = 1.0 + _SRGB_OFFSET

# BT.601 / BT.709 OETF
_BT601_CUTOFF = 0.0181
_BT601_DECODE_CUTOFF = 0.08145
_BT601_SLOPE = 4.5
_BT601_EXPONENT = 0.45
_BT601_OFFSET = 0.0993
_BT601_GAIN = 1.0 + _BT601_OFFSET


@njit(cache=True, fastmath=True)
def _srgb_oetf_kernel(linear: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(linear)
    src = linear.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v < _SRGB_CUTOFF:
            dst[i] = _SRGB_SLOPE * v
        else:
            dst[i] = _SRGB_GAIN * v ** (1.0 / 2.4) - _SRGB_OFFSET
    return out


@njit(cache=True, fastmath=True)
def _srgb_eotf_kernel(encoded: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(encoded)
    src = encoded.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v < _SRGB_DECODE_CUTOFF:
            dst[i] = v / _SRGB_SLOPE
        else:
            dst[i] = ((v + _SRGB_OFFSET) / _SRGB_GAIN) ** 2.4
    return out


@njit(cache=True, fastmath=True)
def _bt601_oetf_kernel(linear: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(linear)
    src = linear.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v < _BT601_CUTOFF:
            dst[i] = _BT601_SLOPE * v
        else:
            dst[i] = _BT601_GAIN * v ** _BT601_EXPONENT - _BT601_OFFSET
    return out


@njit(cache=True, fastmath=True)
def _bt601_eotf_kernel(encoded: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(encoded)
    src = encoded.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v < _BT601_DECODE_CUTOFF:
            dst[i] = v / _BT601_SLOPE
        else:
            dst[i] = ((v + _BT601_OFFSET) / _BT601_GAIN) ** (1.0 / _BT601_EXPONENT)
    return out


def srgb_encode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """Linear RGB -> sRGB-encoded RGB."""
    return _srgb_oetf_kernel(values)


def srgb_decode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """sRGB-encoded RGB -> linear RGB."""
    return _srgb_eotf_kernel(values)


def bt601_encode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _bt601_oetf_kernel(values)


def bt601_decode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _bt601_eotf_kernel(values)
