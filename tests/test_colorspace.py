# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import dataclasses

import pytest

import tint_colorspace as cs
from tint_colorspace import ColorSpace, RgbPrimaries, TransformFn, WhitePoint


def test_primaries_values_are_triplets():
    for primaries in RgbPrimaries:
        values = primaries.values()
        assert len(values) == 3
        assert all(len(xy) == 2 for xy in values)
    assert RgbPrimaries.BT709.values() == ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
    assert RgbPrimaries.NONE.values() == ((0.0, 0.0), (0.0, 0.0), (0.0, 0.0))


def test_white_points_have_unit_luminance():
    for white in WhitePoint:
        if white is WhitePoint.NONE:
            assert white.values() == (0.0, 0.0, 0.0)
        else:
            assert white.values()[1] == 1.0
    assert WhitePoint.D65.values() == (0.95047, 1.0, 1.08883)
    assert WhitePoint.P3_DCI.values() == pytest.approx((0.89458689458, 1.0, 0.95441595441))


def test_linearity():
    assert cs.LINEAR_SRGB.is_linear()
    assert not cs.ENCODED_SRGB.is_linear()
    assert cs.ENCODED_SRGB.as_linear() == cs.LINEAR_SRGB


def test_with_methods_only_change_one_field():
    space = cs.ENCODED_SRGB
    assert space.with_transform(TransformFn.PQ) == ColorSpace(RgbPrimaries.BT709, WhitePoint.D65, TransformFn.PQ)
    assert space.with_primaries(RgbPrimaries.P3) == ColorSpace(RgbPrimaries.P3, WhitePoint.D65, TransformFn.SRGB)
    assert space.with_whitepoint(WhitePoint.D50) == ColorSpace(RgbPrimaries.BT709, WhitePoint.D50, TransformFn.SRGB)
    # the source space is unchanged
    assert space == ColorSpace(RgbPrimaries.BT709, WhitePoint.D65, TransformFn.SRGB)


@pytest.mark.parametrize(
    "method, tag",
    [("to_cie_lab", TransformFn.CIE_LAB), ("to_cie_xyy", TransformFn.CIE_XYY), ("to_cie_lch", TransformFn.CIE_LCH)],
)
def test_cie_derivations_keep_white_point(method, tag):
    derived = getattr(cs.PRO_PHOTO, method)()
    assert derived == ColorSpace(RgbPrimaries.CIE_XYZ, WhitePoint.D50, tag)


def test_color_space_is_frozen_and_hashable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        cs.LINEAR_SRGB.primaries = RgbPrimaries.P3
    lookup = {cs.LINEAR_SRGB: "srgb"}
    assert lookup[ColorSpace(RgbPrimaries.BT709, WhitePoint.D65)] == "srgb"


def test_builtin_definitions():
    assert cs.ACES_CG == ColorSpace(RgbPrimaries.AP1, WhitePoint.D60)
    assert cs.ACES_2065_1 == ColorSpace(RgbPrimaries.AP0, WhitePoint.D60)
    assert cs.CIE_RGB.white_point is WhitePoint.E
    assert cs.OKLAB == ColorSpace(RgbPrimaries.CIE_XYZ, WhitePoint.D65, TransformFn.OKLAB)
    assert cs.ICTCP_PQ == ColorSpace(RgbPrimaries.BT2020, WhitePoint.D65, TransformFn.ICTCP_PQ)
    assert cs.ENCODED_BT_709.transform_fn is TransformFn.BT601
    assert cs.P3_THEATER.white_point is WhitePoint.P3_DCI
    assert cs.ADOBE_WIDE.white_point is WhitePoint.D50
    assert len(cs.ALL_COLOR_SPACES) == 24
