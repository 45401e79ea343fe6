# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Cylindrical RGB models: HSL, HSV and HSI.

The three share the hexagonal hue (degrees, [0, 360)) computed from the
largest and smallest channel; they differ only in the lightness axis and
saturation:

    HSL:  L = (max + min) / 2      S = (max - L) / min(L, 1 - L)
    HSV:  V = max                  S = C / V
    HSI:  I = (r + g + b) / 3      S = 1 - min / I

Achromatic input (C == 0) reports hue 0; zero lightness reports
saturation 0.  The model is selected with an integer switch so a single
compiled kernel serves all three.
"""

from typing import Final

import numpy as np
from numba import njit

from tint_colorspace import WhitePoint
from tint_config import ArrayFloat

__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsi",
    "hsi_to_rgb",
]

_HSL: Final[int] = 0
_HSV: Final[int] = 1
_HSI: Final[int] = 2


@njit(cache=True, fastmath=True)
def _rgb_to_hsx_kernel(rgb: ArrayFloat, model: int) -> ArrayFloat:
    out = np.empty_like(rgb)
    for i in range(rgb.shape[0]):
        r = float(rgb[i, 0])
        g = float(rgb[i, 1])
        b = float(rgb[i, 2])
        x_max = max(r, g, b)
        x_min = min(r, g, b)
        c = x_max - x_min

        h = 0.0
        if c > 0.0:
            if x_max == r:
                h = (g - b) / c
                if h < 0.0:
                    h += 6.0
            elif x_max == g:
                h = (b - r) / c + 2.0
            else:
                h = (r - g) / c + 4.0
            h *= 60.0

        s = 0.0
        if model == _HSL:
            lum = 0.5 * (x_max + x_min)
            denom = min(lum, 1.0 - lum)
            if denom > 0.0:
                s = (x_max - lum) / denom
        elif model == _HSV:
            lum = x_max
            if lum > 0.0:
                s = c / lum
        else:
            lum = (r + g + b) / 3.0
            if lum > 0.0:
                s = 1.0 - x_min / lum

        out[i, 0] = h
        out[i, 1] = s
        out[i, 2] = lum
    return out


@njit(cache=True, fastmath=True)
def _hsx_to_rgb_kernel(hsx: ArrayFloat, model: int) -> ArrayFloat:
    out = np.empty_like(hsx)
    for i in range(hsx.shape[0]):
        h = float(hsx[i, 0])
        s = float(hsx[i, 1])
        lum = float(hsx[i, 2])

        hp = h / 60.0
        hp = hp - 6.0 * np.floor(hp / 6.0)
        z = 1.0 - abs(hp - 2.0 * np.floor(hp / 2.0) - 1.0)

        if model == _HSL:
            c = (1.0 - abs(2.0 * lum - 1.0)) * s
            m = lum - 0.5 * c
        elif model == _HSV:
            c = lum * s
            m = lum - c
        else:
            c = 3.0 * lum * s / (1.0 + z)
            m = lum * (1.0 - s)
        x = c * z

        if hp < 1.0:
            r1, g1, b1 = c, x, 0.0
        elif hp < 2.0:
            r1, g1, b1 = x, c, 0.0
        elif hp < 3.0:
            r1, g1, b1 = 0.0, c, x
        elif hp < 4.0:
            r1, g1, b1 = 0.0, x, c
        elif hp < 5.0:
            r1, g1, b1 = x, 0.0, c
        else:
            r1, g1, b1 = c, 0.0, x

        out[i, 0] = r1 + m
        out[i, 1] = g1 + m
        out[i, 2] = b1 + m
    return out


def rgb_to_hsl(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _rgb_to_hsx_kernel(values, _HSL)


def hsl_to_rgb(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _hsx_to_rgb_kernel(values, _HSL)


def rgb_to_hsv(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _rgb_to_hsx_kernel(values, _HSV)


def hsv_to_rgb(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _hsx_to_rgb_kernel(values, _HSV)


def rgb_to_hsi(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _rgb_to_hsx_kernel(values, _HSI)


def hsi_to_rgb(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return _hsx_to_rgb_kernel(values, _HSI)
