# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE colorimetric encodings of XYZ.

All functions take row-stacked (N, 3) XYZ (or encoded) values and the
reference white of the color space.  Implemented:

    - CIE xyY chromaticity + luminance
    - CIE 1976 L*a*b* and its polar form L*C*h (hue in degrees)
    - CIE 1960 UCS (U, V, W) and its chromaticity form (u, v, V)
    - CIE 1976 L*u*v*

CIE 1964 U*V*W* is listed for completeness but has no implementation; the
registry refuses to build a transform for it.

References:
    - CIE 15:2004 "Colorimetry"
    - Lindbloom, B. "Useful Color Equations", brucelindbloom.com
"""

from typing import Final, NoReturn

import numpy as np
from numba import njit

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat, as_float_array
from tint_errors import UnsupportedTransformError

__all__ = [
    "xyz_to_xyy",
    "xyy_to_xyz",
    "xyz_to_lab",
    "lab_to_xyz",
    "xyz_to_lch",
    "lch_to_xyz",
    "xyz_to_ucs",
    "ucs_to_xyz",
    "xyz_to_uvv",
    "uvv_to_xyz",
    "xyz_to_uvw",
    "uvw_to_xyz",
    "xyz_to_luv",
    "luv_to_xyz",
]

# CIELAB companding. The inverse threshold is the image of the forward
# threshold, so both branches meet at the same point.
LAB_EPSILON: Final[float] = 0.008856
LAB_SLOPE: Final[float] = 7.78703703704
LAB_OFFSET: Final[float] = 0.13793103448
_LAB_F_EPSILON: Final[float] = LAB_EPSILON ** (1.0 / 3.0)

_TINY: Final[float] = 1e-12
RAD2DEG: Final[float] = 180.0 / np.pi
DEG2RAD: Final[float] = np.pi / 180.0


def _white(white_point: WhitePoint) -> ArrayFloat:
    return as_float_array(white_point.values())


# =============================================================================
# Kernels
# =============================================================================

@njit(cache=True, fastmath=True)
def _lab_f(t: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(t)
    src = t.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v > LAB_EPSILON:
            dst[i] = v ** (1.0 / 3.0)
        else:
            dst[i] = LAB_SLOPE * v + LAB_OFFSET
    return out


@njit(cache=True, fastmath=True)
def _lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(t)
    src = t.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = float(src[i])
        if v > _LAB_F_EPSILON:
            dst[i] = v * v * v
        else:
            dst[i] = (v - LAB_OFFSET) / LAB_SLOPE
    return out


@njit(cache=True, fastmath=True)
def _lab_to_lch_kernel(lab: ArrayFloat) -> ArrayFloat:
    lch = np.empty_like(lab)
    for i in range(lab.shape[0]):
        a = float(lab[i, 1])
        b = float(lab[i, 2])
        h_deg = np.arctan2(b, a) * RAD2DEG
        if h_deg < 0.0:
            h_deg += 360.0
        lch[i, 0] = lab[i, 0]
        lch[i, 1] = np.sqrt(a * a + b * b)
        lch[i, 2] = h_deg
    return lch


@njit(cache=True, fastmath=True)
def _lch_to_lab_kernel(lch: ArrayFloat) -> ArrayFloat:
    lab = np.empty_like(lch)
    for i in range(lch.shape[0]):
        c = float(lch[i, 1])
        h_rad = float(lch[i, 2]) * DEG2RAD
        lab[i, 0] = lch[i, 0]
        lab[i, 1] = c * np.cos(h_rad)
        lab[i, 2] = c * np.sin(h_rad)
    return lab


# =============================================================================
# xyY
# =============================================================================

def xyz_to_xyy(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """
    XYZ -> xyY.

    Black (X + Y + Z == 0) has no chromaticity; it is reported at the white
    point's chromaticity with Y = 0 (Lindbloom convention) so the output is
    NaN-free.
    """
    total = np.sum(values, axis=-1)
    mask = np.abs(total) > _TINY
    xyy = np.empty_like(values)

    white = _white(white_point)
    xyy[~mask, 0] = white[0] / white.sum()
    xyy[~mask, 1] = white[1] / white.sum()
    xyy[~mask, 2] = 0.0

    if np.any(mask):
        inv_sum = 1.0 / total[mask]
        xyy[mask, 0] = values[mask, 0] * inv_sum
        xyy[mask, 1] = values[mask, 1] * inv_sum
        xyy[mask, 2] = values[mask, 1]
    return xyy


def xyy_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """xyY -> XYZ. Rows with y == 0 map to black."""
    x, y, Y = values[:, 0], values[:, 1], values[:, 2]
    xyz = np.zeros_like(values)
    mask = np.abs(y) > _TINY
    if np.any(mask):
        factor = Y[mask] / y[mask]
        xyz[mask, 0] = x[mask] * factor
        xyz[mask, 1] = Y[mask]
        xyz[mask, 2] = (1.0 - x[mask] - y[mask]) * factor
    return xyz


# =============================================================================
# CIELAB / CIELCh
# =============================================================================

def xyz_to_lab(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """XYZ -> CIE L*a*b* relative to *white_point*."""
    f = _lab_f(values / _white(white_point))
    out = np.empty_like(values)
    out[:, 0] = 116.0 * f[:, 1] - 16.0
    out[:, 1] = 500.0 * (f[:, 0] - f[:, 1])
    out[:, 2] = 200.0 * (f[:, 1] - f[:, 2])
    return out


def lab_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """CIE L*a*b* -> XYZ relative to *white_point*."""
    fy = (values[:, 0] + 16.0) / 116.0
    f = np.empty_like(values)
    f[:, 0] = fy + values[:, 1] / 500.0
    f[:, 1] = fy
    f[:, 2] = fy - values[:, 2] / 200.0
    return _lab_f_inv(f) * _white(white_point)


def xyz_to_lch(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """XYZ -> CIE L*C*h (hue in degrees, [0, 360))."""
    return _lab_to_lch_kernel(xyz_to_lab(values, white_point))


def lch_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return lab_to_xyz(_lch_to_lab_kernel(values), white_point)


# =============================================================================
# CIE 1960 UCS
# =============================================================================

def xyz_to_ucs(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """XYZ -> CIE 1960 UCS (U, V, W)."""
    X, Y, Z = values[:, 0], values[:, 1], values[:, 2]
    out = np.empty_like(values)
    out[:, 0] = (2.0 / 3.0) * X
    out[:, 1] = Y
    out[:, 2] = 0.5 * (-X + 3.0 * Y + Z)
    return out


def ucs_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    U, V, W = values[:, 0], values[:, 1], values[:, 2]
    out = np.empty_like(values)
    out[:, 0] = 1.5 * U
    out[:, 1] = V
    out[:, 2] = 1.5 * U - 3.0 * V + 2.0 * W
    return out


def xyz_to_uvv(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """
    XYZ -> CIE 1960 (u, v, V).

    u and v are the UCS chromaticities U/(U+V+W) and V/(U+V+W); V is kept
    as luminance.  Black maps to (0, 0, 0).
    """
    ucs = xyz_to_ucs(values, white_point)
    total = np.sum(ucs, axis=-1)
    mask = np.abs(total) > _TINY
    out = np.zeros_like(values)
    if np.any(mask):
        inv_sum = 1.0 / total[mask]
        out[mask, 0] = ucs[mask, 0] * inv_sum
        out[mask, 1] = ucs[mask, 1] * inv_sum
        out[mask, 2] = ucs[mask, 1]
    return out


def uvv_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """CIE 1960 (u, v, V) -> XYZ. Rows with v == 0 map to black."""
    u, v, V = values[:, 0], values[:, 1], values[:, 2]
    ucs = np.zeros_like(values)
    mask = np.abs(v) > _TINY
    if np.any(mask):
        factor = V[mask] / v[mask]
        ucs[mask, 0] = u[mask] * factor
        ucs[mask, 1] = V[mask]
        ucs[mask, 2] = -(u[mask] + v[mask] - 1.0) * factor
    return ucs_to_xyz(ucs, white_point)


def xyz_to_uvw(values: ArrayFloat, white_point: WhitePoint) -> NoReturn:
    raise UnsupportedTransformError("CIE 1964 U*V*W* is not implemented.")


def uvw_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> NoReturn:
    raise UnsupportedTransformError("CIE 1964 U*V*W* is not implemented.")


# =============================================================================
# CIELUV
# =============================================================================

def _uv_prime(xyz: ArrayFloat) -> ArrayFloat:
    """CIE 1976 (u', v'); black returns (0, 0)."""
    denom = xyz[:, 0] + 15.0 * xyz[:, 1] + 3.0 * xyz[:, 2]
    mask = np.abs(denom) > _TINY
    out = np.zeros((xyz.shape[0], 2), dtype=xyz.dtype)
    if np.any(mask):
        inv_d = 1.0 / denom[mask]
        out[mask, 0] = 4.0 * xyz[mask, 0] * inv_d
        out[mask, 1] = 9.0 * xyz[mask, 1] * inv_d
    return out


def xyz_to_luv(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """XYZ -> CIE L*u*v* relative to *white_point*."""
    white = _white(white_point)
    u_n, v_n = _uv_prime(white[np.newaxis, :])[0]
    uv = _uv_prime(values)

    L = 116.0 * _lab_f(values[:, 1] / white[1]) - 16.0

    out = np.empty_like(values)
    out[:, 0] = L
    out[:, 1] = 13.0 * L * (uv[:, 0] - u_n)
    out[:, 2] = 13.0 * L * (uv[:, 1] - v_n)
    return out


def luv_to_xyz(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    """CIE L*u*v* -> XYZ relative to *white_point*. L* <= 0 maps to black."""
    white = _white(white_point)
    u_n, v_n = _uv_prime(white[np.newaxis, :])[0]
    L, u, v = values[:, 0], values[:, 1], values[:, 2]

    mask = L > _TINY
    u_prime = np.full_like(L, u_n)
    v_prime = np.full_like(L, v_n)
    if np.any(mask):
        inv_13L = 1.0 / (13.0 * L[mask])
        u_prime[mask] = u[mask] * inv_13L + u_n
        v_prime[mask] = v[mask] * inv_13L + v_n

    Y = _lab_f_inv((L + 16.0) / 116.0) * white[1]

    out = np.zeros_like(values)
    mask_v = mask & (np.abs(v_prime) > _TINY)
    if np.any(mask_v):
        Yv, up, vp = Y[mask_v], u_prime[mask_v], v_prime[mask_v]
        inv_4vp = 1.0 / (4.0 * vp)
        out[mask_v, 0] = Yv * 9.0 * up * inv_4vp
        out[mask_v, 1] = Yv
        out[mask_v, 2] = Yv * (12.0 - 3.0 * up - 20.0 * vp) * inv_4vp
    return out
