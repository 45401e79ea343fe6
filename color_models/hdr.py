# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

High dynamic range encodings from ITU-R BT.2100.

* PQ    SMPTE ST 2084 perceptual quantizer. Linear input is absolute
        luminance in cd/m^2 (1.0 == 1 nit, peak 10000).
* HLG   ARIB STD-B67 hybrid log-gamma OETF on relative scene light.
* ICtCp BT.2020 RGB -> LMS -> (PQ | HLG) -> ICtCp, using the exact
        rational matrices from the recommendation (x/4096).

Negative linear input is outside the domain of both curves and is clamped
to zero before encoding.
"""

from typing import Final

import numpy as np
from numba import njit

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat, as_float_array

__all__ = [
    "pq_encode",
    "pq_decode",
    "hlg_encode",
    "hlg_decode",
    "rgb_to_ictcp_pq",
    "ictcp_pq_to_rgb",
    "rgb_to_ictcp_hlg",
    "ictcp_hlg_to_rgb",
]

# --- SMPTE ST 2084 ---
PQ_PEAK_LUMINANCE: Final[float] = 10000.0
_PQ_M1 = 0.1593017578125  # 2610 / 16384
_PQ_M2 = 78.84375         # 2523 / 4096 * 128
_PQ_C1 = 0.8359375        # 3424 / 4096
_PQ_C2 = 18.8515625       # 2413 / 4096 * 32
_PQ_C3 = 18.6875          # 2392 / 4096 * 32

# --- ARIB STD-B67 ---
_HLG_A = 0.17883277
_HLG_B = 0.28466892
_HLG_C = 0.55991073
_HLG_R = 0.5


@njit(cache=True, fastmath=True)
def _pq_inverse_eotf_kernel(linear: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(linear)
    src = linear.ravel()
    dst = out.ravel()
    for i in range(src.size):
        y = max(float(src[i]), 0.0) / PQ_PEAK_LUMINANCE
        y_p = y ** _PQ_M1
        dst[i] = ((_PQ_C1 + _PQ_C2 * y_p) / (1.0 + _PQ_C3 * y_p)) ** _PQ_M2
    return out


@njit(cache=True, fastmath=True)
def _pq_eotf_kernel(encoded: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(encoded)
    src = encoded.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v_p = max(float(src[i]), 0.0) ** (1.0 / _PQ_M2)
        n = max(v_p - _PQ_C1, 0.0)
        dst[i] = PQ_PEAK_LUMINANCE * (n / (_PQ_C2 - _PQ_C3 * v_p)) ** (1.0 / _PQ_M1)
    return out


@njit(cache=True, fastmath=True)
def _hlg_oetf_kernel(linear: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(linear)
    src = linear.ravel()
    dst = out.ravel()
    for i in range(src.size):
        e = max(float(src[i]), 0.0)
        if e <= 1.0:
            dst[i] = _HLG_R * np.sqrt(e)
        else:
            dst[i] = _HLG_A * np.log(e - _HLG_B) + _HLG_C
    return out


@njit(cache=True, fastmath=True)
def _hlg_inverse_oetf_kernel(encoded: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(encoded)
    src = encoded.ravel()
    dst = out.ravel()
    for i in range(src.size):
        e_p = float(src[i])
        if e_p <= _HLG_R:
            t = e_p / _HLG_R
            dst[i] = t * t
        else:
            dst[i] = np.exp((e_p - _HLG_C) / _HLG_A) + _HLG_B
    return out


def pq_encode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """Absolute linear light (nits) -> PQ signal in [0, 1]."""
    return _pq_inverse_eotf_kernel(values)


def pq_decode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """PQ signal -> absolute linear light (nits)."""
    return _pq_eotf_kernel(values)


def hlg_encode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _hlg_oetf_kernel(values)


def hlg_decode(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _hlg_inverse_oetf_kernel(values)


# =============================================================================
# ICtCp
# =============================================================================

_RGB_TO_LMS = np.array([
    [1688.0, 2146.0,  262.0],
    [ 683.0, 2951.0,  462.0],
    [  99.0,  309.0, 3688.0],
], dtype=np.float64) / 4096.0

_PQ_LMS_TO_ICTCP = np.array([
    [ 2048.0,   2048.0,    0.0],
    [ 6610.0, -13613.0, 7003.0],
    [17933.0, -17390.0, -543.0],
], dtype=np.float64) / 4096.0

_HLG_LMS_TO_ICTCP = np.array([
    [2048.0,  2048.0,    0.0],
    [3625.0, -7465.0, 3840.0],
    [9500.0, -9212.0, -288.0],
], dtype=np.float64) / 4096.0

# Pre-transposed for row-stacked colors
RGB_TO_LMS_T: Final[ArrayFloat] = _RGB_TO_LMS.T.copy()
LMS_TO_RGB_T: Final[ArrayFloat] = np.linalg.inv(_RGB_TO_LMS).T.copy()
PQ_LMS_TO_ICTCP_T: Final[ArrayFloat] = _PQ_LMS_TO_ICTCP.T.copy()
ICTCP_TO_PQ_LMS_T: Final[ArrayFloat] = np.linalg.inv(_PQ_LMS_TO_ICTCP).T.copy()
HLG_LMS_TO_ICTCP_T: Final[ArrayFloat] = _HLG_LMS_TO_ICTCP.T.copy()
ICTCP_TO_HLG_LMS_T: Final[ArrayFloat] = np.linalg.inv(_HLG_LMS_TO_ICTCP).T.copy()


def rgb_to_ictcp_pq(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """Linear BT.2020 RGB (nits) -> ICtCp with PQ encoding."""
    lms = values @ as_float_array(RGB_TO_LMS_T)
    return _pq_inverse_eotf_kernel(lms) @ as_float_array(PQ_LMS_TO_ICTCP_T)


def ictcp_pq_to_rgb(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    lms_pq = values @ as_float_array(ICTCP_TO_PQ_LMS_T)
    return _pq_eotf_kernel(lms_pq) @ as_float_array(LMS_TO_RGB_T)


def rgb_to_ictcp_hlg(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """Linear BT.2020 scene light -> ICtCp with HLG encoding."""
    lms = values @ as_float_array(RGB_TO_LMS_T)
    return _hlg_oetf_kernel(lms) @ as_float_array(HLG_LMS_TO_ICTCP_T)


def ictcp_hlg_to_rgb(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    lms_hlg = values @ as_float_array(ICTCP_TO_HLG_LMS_T)
    return _hlg_inverse_oetf_kernel(lms_hlg) @ as_float_array(LMS_TO_RGB_T)
