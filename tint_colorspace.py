# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color-Space Model
=================
A color space is the triple *(primaries, white point, transform)*:

* ``RgbPrimaries`` : CIE xy chromaticities of the red, green and blue axes.
* ``WhitePoint``   : XYZ tristimulus of the reference white, normalised Y=1.
* ``TransformFn``  : optional invertible nonlinear encoding applied on top
  of the linear RGB (or XYZ) coordinates.

``ColorSpace`` is a frozen, hashable dataclass; two spaces compare equal iff
all three fields match.  The named module constants cover the common working
and display spaces.

White point values follow ASTM E308-01 (as tabulated by B. Lindbloom), with
the DCI-P3 theatre white taken from SMPTE RP 431-2.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, Tuple, TypeAlias

__all__ = [
    "Chromaticity",
    "RgbPrimaries",
    "WhitePoint",
    "TransformFn",
    "ColorSpace",
    "LINEAR_SRGB",
    "ENCODED_SRGB",
    "BT_709",
    "ENCODED_BT_709",
    "BT_2020",
    "ENCODED_BT_2020",
    "ENCODED_BT_2100_PQ",
    "ENCODED_BT_2100_HLG",
    "ACES_CG",
    "ACES_2065_1",
    "CIE_RGB",
    "CIE_XYZ",
    "OKLAB",
    "OKLCH",
    "ICTCP_PQ",
    "ICTCP_HLG",
    "DISPLAY_P3",
    "ENCODED_DISPLAY_P3",
    "P3_D60",
    "P3_THEATER",
    "ADOBE_1998",
    "ADOBE_WIDE",
    "PRO_PHOTO",
    "APPLE",
    "ALL_COLOR_SPACES",
]

Chromaticity: TypeAlias = Tuple[float, float]
PrimaryTriplet: TypeAlias = Tuple[Chromaticity, Chromaticity, Chromaticity]
Tristimulus: TypeAlias = Tuple[float, float, float]


# ---------------------------------------------------------------------------
# 1.  Primaries
# ---------------------------------------------------------------------------
_PRIMARY_CHROMATICITIES: Final[dict[str, PrimaryTriplet]] = {
    "NONE":       ((0.0, 0.0), (0.0, 0.0), (0.0, 0.0)),
    # ITU-R BT.709 / sRGB
    "BT709":      ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06)),
    # ITU-R BT.2020 / BT.2100
    "BT2020":     ((0.708, 0.292), (0.17, 0.797), (0.131, 0.046)),
    # ACES primaries 0 (covers the whole spectral locus)
    "AP0":        ((0.7347, 0.2653), (0.0, 1.0), (0.0001, -0.077)),
    # ACES primaries 1 (ACEScg working space)
    "AP1":        ((0.713, 0.293), (0.165, 0.830), (0.128, 0.044)),
    "P3":         ((0.680, 0.320), (0.265, 0.690), (0.150, 0.060)),
    "ADOBE_1998": ((0.64, 0.33), (0.21, 0.71), (0.15, 0.06)),
    "ADOBE_WIDE": ((0.735, 0.265), (0.115, 0.826), (0.157, 0.018)),
    "APPLE":      ((0.625, 0.34), (0.28, 0.595), (0.155, 0.07)),
    "PRO_PHOTO":  ((0.734699, 0.265301), (0.159597, 0.840403), (0.036598, 0.000105)),
    "CIE_RGB":    ((0.7350, 0.2650), (0.2740, 0.7170), (0.1670, 0.0090)),
    # Pseudo-primaries: the XYZ axes themselves. Degenerate as xy,
    # the matrix builder treats them as the identity basis.
    "CIE_XYZ":    ((1.0, 0.0), (0.0, 1.0), (0.0, 0.0)),
}


class RgbPrimaries(Enum):
    """Named RGB primary sets."""
    NONE = "NONE"
    BT709 = "BT709"
    BT2020 = "BT2020"
    AP0 = "AP0"
    AP1 = "AP1"
    P3 = "P3"
    ADOBE_1998 = "ADOBE_1998"
    ADOBE_WIDE = "ADOBE_WIDE"
    APPLE = "APPLE"
    PRO_PHOTO = "PRO_PHOTO"
    CIE_RGB = "CIE_RGB"
    CIE_XYZ = "CIE_XYZ"

    def values(self) -> PrimaryTriplet:
        """Returns ``((xr, yr), (xg, yg), (xb, yb))``."""
        return _PRIMARY_CHROMATICITIES[self.value]


# ---------------------------------------------------------------------------
# 2.  White points
# ---------------------------------------------------------------------------
_WHITE_POINTS: Final[dict[str, Tristimulus]] = {
    "NONE":   (0.0, 0.0, 0.0),
    "A":      (1.09850, 1.0, 0.35585),
    "B":      (0.99072, 1.0, 0.85223),
    "C":      (0.98074, 1.0, 1.18232),
    "E":      (1.0, 1.0, 1.0),
    "D50":    (0.96422, 1.0, 0.82521),
    "D55":    (0.95682, 1.0, 0.92149),
    "D60":    (0.9523, 1.0, 1.00859),
    "D65":    (0.95047, 1.0, 1.08883),
    "D75":    (0.94972, 1.0, 1.22638),
    "P3_DCI": (0.89458689458, 1.0, 0.95441595441),
    "F2":     (0.99186, 1.0, 0.67393),
    "F7":     (0.95041, 1.0, 1.08747),
    "F11":    (1.00962, 1.0, 0.64350),
}


class WhitePoint(Enum):
    """Standard illuminants, expressed as XYZ with Y = 1."""
    NONE = "NONE"
    A = "A"
    B = "B"
    C = "C"
    E = "E"
    D50 = "D50"
    D55 = "D55"
    D60 = "D60"
    D65 = "D65"
    D75 = "D75"
    P3_DCI = "P3_DCI"
    F2 = "F2"
    F7 = "F7"
    F11 = "F11"

    def values(self) -> Tristimulus:
        """Returns the ``(X, Y, Z)`` tristimulus of the illuminant."""
        return _WHITE_POINTS[self.value]


# ---------------------------------------------------------------------------
# 3.  Nonlinear transform tags
# ---------------------------------------------------------------------------
class TransformFn(Enum):
    """
    Invertible nonlinear encodings layered over linear coordinates.

    The forward direction goes from linear to encoded, the inverse from
    encoded back to linear.  The formulas live in ``color_models``.
    """
    NONE = "NONE"
    SRGB = "SRGB"
    OKLAB = "OKLAB"
    OKLCH = "OKLCH"
    CIE_XYY = "CIE_XYY"
    CIE_LAB = "CIE_LAB"
    CIE_LCH = "CIE_LCH"
    CIE_1960_UCS = "CIE_1960_UCS"
    CIE_1960_UCS_UVV = "CIE_1960_UCS_UVV"
    CIE_1964_UVW = "CIE_1964_UVW"
    CIE_1976_LUV = "CIE_1976_LUV"
    HSL = "HSL"
    HSV = "HSV"
    HSI = "HSI"
    ICTCP_PQ = "ICTCP_PQ"
    ICTCP_HLG = "ICTCP_HLG"
    BT601 = "BT601"
    PQ = "PQ"
    HLG = "HLG"


# ---------------------------------------------------------------------------
# 4.  ColorSpace
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class ColorSpace:
    """A color space: RGB primaries, reference white and optional encoding."""
    primaries:    RgbPrimaries
    white_point:  WhitePoint
    transform_fn: TransformFn = TransformFn.NONE

    def is_linear(self) -> bool:
        return self.transform_fn is TransformFn.NONE

    def as_linear(self) -> ColorSpace:
        """Same primaries and white point without the nonlinear encoding."""
        return replace(self, transform_fn=TransformFn.NONE)

    def with_transform(self, transform_fn: TransformFn) -> ColorSpace:
        return replace(self, transform_fn=transform_fn)

    def with_primaries(self, primaries: RgbPrimaries) -> ColorSpace:
        return replace(self, primaries=primaries)

    def with_whitepoint(self, white_point: WhitePoint) -> ColorSpace:
        return replace(self, white_point=white_point)

    # CIE reference spaces relative to this space's white point.
    def to_cie_lab(self) -> ColorSpace:
        return ColorSpace(RgbPrimaries.CIE_XYZ, self.white_point, TransformFn.CIE_LAB)

    def to_cie_xyy(self) -> ColorSpace:
        return ColorSpace(RgbPrimaries.CIE_XYZ, self.white_point, TransformFn.CIE_XYY)

    def to_cie_lch(self) -> ColorSpace:
        return ColorSpace(RgbPrimaries.CIE_XYZ, self.white_point, TransformFn.CIE_LCH)


# ---------------------------------------------------------------------------
# 5.  Built-in spaces
# ---------------------------------------------------------------------------
LINEAR_SRGB: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT709, WhitePoint.D65)
ENCODED_SRGB: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT709, WhitePoint.D65, TransformFn.SRGB)
BT_709: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT709, WhitePoint.D65)
ENCODED_BT_709: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT709, WhitePoint.D65, TransformFn.BT601)
BT_2020: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65)
ENCODED_BT_2020: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.BT601)
ENCODED_BT_2100_PQ: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.PQ)
ENCODED_BT_2100_HLG: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.HLG)

# ACES working spaces use the ACES white, approximated by D60.
ACES_CG: Final[ColorSpace] = ColorSpace(RgbPrimaries.AP1, WhitePoint.D60)
ACES_2065_1: Final[ColorSpace] = ColorSpace(RgbPrimaries.AP0, WhitePoint.D60)

CIE_RGB: Final[ColorSpace] = ColorSpace(RgbPrimaries.CIE_RGB, WhitePoint.E)
CIE_XYZ: Final[ColorSpace] = ColorSpace(RgbPrimaries.CIE_XYZ, WhitePoint.D65)

OKLAB: Final[ColorSpace] = ColorSpace(RgbPrimaries.CIE_XYZ, WhitePoint.D65, TransformFn.OKLAB)
OKLCH: Final[ColorSpace] = ColorSpace(RgbPrimaries.CIE_XYZ, WhitePoint.D65, TransformFn.OKLCH)
ICTCP_PQ: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.ICTCP_PQ)
ICTCP_HLG: Final[ColorSpace] = ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.ICTCP_HLG)

DISPLAY_P3: Final[ColorSpace] = ColorSpace(RgbPrimaries.P3, WhitePoint.D65)
ENCODED_DISPLAY_P3: Final[ColorSpace] = ColorSpace(RgbPrimaries.P3, WhitePoint.D65, TransformFn.SRGB)
P3_D60: Final[ColorSpace] = ColorSpace(RgbPrimaries.P3, WhitePoint.D60)
P3_THEATER: Final[ColorSpace] = ColorSpace(RgbPrimaries.P3, WhitePoint.P3_DCI)

ADOBE_1998: Final[ColorSpace] = ColorSpace(RgbPrimaries.ADOBE_1998, WhitePoint.D65)
ADOBE_WIDE: Final[ColorSpace] = ColorSpace(RgbPrimaries.ADOBE_WIDE, WhitePoint.D50)
PRO_PHOTO: Final[ColorSpace] = ColorSpace(RgbPrimaries.PRO_PHOTO, WhitePoint.D50)
APPLE: Final[ColorSpace] = ColorSpace(RgbPrimaries.APPLE, WhitePoint.D65)

ALL_COLOR_SPACES: Final[Tuple[ColorSpace, ...]] = (
    LINEAR_SRGB,
    ENCODED_SRGB,
    BT_709,
    ENCODED_BT_709,
    BT_2020,
    ENCODED_BT_2020,
    ENCODED_BT_2100_PQ,
    ENCODED_BT_2100_HLG,
    ACES_CG,
    ACES_2065_1,
    CIE_RGB,
    CIE_XYZ,
    OKLAB,
    OKLCH,
    ICTCP_PQ,
    ICTCP_HLG,
    DISPLAY_P3,
    ENCODED_DISPLAY_P3,
    P3_D60,
    P3_THEATER,
    ADOBE_1998,
    ADOBE_WIDE,
    PRO_PHOTO,
    APPLE,
)
