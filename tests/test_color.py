# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import dataclasses

import numpy as np
import pytest

import tint_colorspace as cs
from tint_color import Color
from tint_colorspace import TransformFn, WhitePoint
from tint_errors import UnsupportedTransformError


def test_srgb_constructor():
    color = Color.srgb(0.2, 0.4, 0.6)
    assert color.space == cs.ENCODED_SRGB
    np.testing.assert_array_equal(color.value, [0.2, 0.4, 0.6])


def test_value_is_read_only_copy():
    source = np.array([0.1, 0.2, 0.3])
    color = Color(source, cs.LINEAR_SRGB)
    source[0] = 9.0
    assert color.value[0] == pytest.approx(0.1)
    with pytest.raises(ValueError):
        color.value[0] = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.space = cs.ACES_CG


def test_value_must_be_a_single_color():
    with pytest.raises(ValueError):
        Color(np.ones((2, 3)), cs.LINEAR_SRGB)


def test_to_converts_and_retags():
    white = Color.srgb(1.0, 1.0, 1.0).to(cs.CIE_XYZ)
    assert white.space == cs.CIE_XYZ
    np.testing.assert_allclose(white.value, WhitePoint.D65.values(), atol=1e-6)


def test_round_trip_through_oklch():
    color = Color.srgb(0.25, 0.5, 0.75)
    back = color.to(cs.OKLCH).to(cs.ENCODED_SRGB)
    np.testing.assert_allclose(back.value, color.value, atol=1e-6)


def test_to_linear_strips_encoding_only():
    color = Color.new(0.5, 0.5, 0.5, cs.ENCODED_SRGB)
    linear = color.to_linear()
    assert linear.space == cs.LINEAR_SRGB
    np.testing.assert_allclose(linear.value, [((0.5 + 0.055) / 1.055) ** 2.4] * 3)


def test_to_linear_of_linear_is_self():
    color = Color.new(0.1, 0.2, 0.3, cs.ACES_CG)
    assert color.to_linear() is color


def test_to_linear_keeps_white_point_of_cie_space():
    lab_space = cs.PRO_PHOTO.to_cie_lab()
    color = Color.new(50.0, 10.0, -20.0, lab_space)
    linear = color.to_linear()
    assert linear.space.white_point is WhitePoint.D50
    assert linear.space.transform_fn is TransformFn.NONE


def test_to_linear_unsupported():
    color = Color.new(0.1, 0.2, 0.3, cs.CIE_XYZ.with_transform(TransformFn.CIE_1964_UVW))
    with pytest.raises(UnsupportedTransformError):
        color.to_linear()


def test_equality_and_hash():
    a = Color.srgb(0.1, 0.2, 0.3)
    b = Color.new(0.1, 0.2, 0.3, cs.ENCODED_SRGB)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Color.new(0.1, 0.2, 0.3, cs.LINEAR_SRGB)
    assert a != Color.srgb(0.1, 0.2, 0.4)
    assert "Color(" in repr(a)


def test_float32_color(float32):
    color = Color.srgb(0.2, 0.4, 0.6).to(cs.ACES_CG)
    assert color.value.dtype == np.float32
