# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
import pytest

import tint_colorspace as cs
from tint_colorspace import ColorSpace, RgbPrimaries, TransformFn, WhitePoint
from tint_conversion import ColorConversion, LinearColorConversion, derive_linear_matrix
from tint_errors import (
    DegenerateColorSpaceError,
    NonLinearColorSpaceError,
    UnsupportedTransformError,
)

SAMPLE_LINEAR_SRGB = np.array([0.35, 0.2, 0.8])
SPACES = list(cs.ALL_COLOR_SPACES)


def _space_id(space):
    return f"{space.primaries.name}-{space.white_point.name}-{space.transform_fn.name}"


def _sample_in(space):
    return ColorConversion(cs.LINEAR_SRGB, space).apply(SAMPLE_LINEAR_SRGB)


# --- Scenarios -------------------------------------------------------------

def test_linear_srgb_to_aces_cg(sample_linear_srgb):
    out = LinearColorConversion(cs.LINEAR_SRGB, cs.ACES_CG).apply(sample_linear_srgb)
    np.testing.assert_allclose(out, [0.32277, 0.21839, 0.72593], atol=1e-3)


def test_linear_srgb_to_aces_2065_1(sample_linear_srgb):
    out = ColorConversion(cs.LINEAR_SRGB, cs.ACES_2065_1).apply(sample_linear_srgb)
    np.testing.assert_allclose(out, [0.37415, 0.27155, 0.72611], atol=1e-3)


def test_srgb_encoding():
    out = ColorConversion(cs.LINEAR_SRGB, cs.ENCODED_SRGB).apply([0.35, 0.1, 0.8])
    np.testing.assert_allclose(out, [0.62621, 0.34919, 0.90633], atol=1e-3)


def test_aces_cg_to_encoded_srgb():
    out = ColorConversion(cs.ACES_CG, cs.ENCODED_SRGB).apply([0.35, 0.1, 0.8])
    np.testing.assert_allclose(out, [0.71386, 0.27182, 0.95520], atol=1e-2)


def test_xyz_through_oklab_and_back():
    to_oklab = ColorConversion(cs.CIE_XYZ, cs.OKLAB)
    back = to_oklab.invert().apply(to_oklab.apply([1.0, 0.0, 0.0]))
    np.testing.assert_allclose(back, [1.0, 0.0, 0.0], atol=1e-3)


def test_srgb_white_to_xyz_is_d65():
    out = ColorConversion(cs.ENCODED_SRGB, cs.CIE_XYZ).apply([1.0, 1.0, 1.0])
    np.testing.assert_allclose(out, WhitePoint.D65.values(), atol=1e-6)


def test_srgb_white_to_lab_is_neutral():
    out = ColorConversion(cs.ENCODED_SRGB, cs.LINEAR_SRGB.to_cie_lab()).apply([1.0, 1.0, 1.0])
    np.testing.assert_allclose(out, [100.0, 0.0, 0.0], atol=1e-3)


# --- Properties ------------------------------------------------------------

@pytest.mark.parametrize("space", SPACES, ids=_space_id)
def test_identity_conversion(space):
    value = _sample_in(space)
    out = ColorConversion(space, space).apply(value)
    np.testing.assert_allclose(out, value, rtol=1e-6, atol=1e-6)


@pytest.mark.parametrize("src", SPACES, ids=_space_id)
def test_conversions_are_approximately_invertible(src):
    value = _sample_in(src)
    for dst in SPACES:
        forward = ColorConversion(src, dst)
        back = forward.invert().apply(forward.apply(value))
        np.testing.assert_allclose(back, value, atol=2e-3, err_msg=f"{_space_id(src)} -> {_space_id(dst)}")


def test_batch_matches_single_vectors():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.OKLCH)
    batch = np.array([[0.1, 0.2, 0.3], [0.9, 0.5, 0.1], [0.4, 0.4, 0.8]])
    out = conv.apply(batch)
    assert out.shape == (3, 3)
    for row, expected in zip(batch, out):
        np.testing.assert_allclose(conv.apply(row), expected)


def test_table_and_derivation_paths_agree(sample_linear_srgb):
    fast = LinearColorConversion(cs.BT_2020, cs.ACES_2065_1)
    slow = LinearColorConversion(cs.BT_2020, cs.ACES_2065_1, use_precomputed=False)
    np.testing.assert_allclose(fast.matrix, slow.matrix, atol=1e-4)
    np.testing.assert_allclose(fast.apply(sample_linear_srgb), slow.apply(sample_linear_srgb), atol=1e-4)


def test_untabulated_pair_is_derived():
    srgb_d50 = cs.LINEAR_SRGB.with_whitepoint(WhitePoint.D50)
    conv = LinearColorConversion(srgb_d50, cs.PRO_PHOTO)
    np.testing.assert_allclose(conv.matrix, derive_linear_matrix(srgb_d50, cs.PRO_PHOTO))


# --- LinearColorConversion -------------------------------------------------

def test_linear_conversion_accessors():
    conv = LinearColorConversion(cs.LINEAR_SRGB, cs.BT_2020)
    assert conv.input_space == cs.LINEAR_SRGB
    assert conv.output_space == cs.BT_2020
    assert conv.matrix.shape == (3, 3)
    assert not conv.matrix.flags.writeable
    assert "LinearColorConversion" in repr(conv)


def test_same_space_is_exact_identity():
    conv = LinearColorConversion(cs.ADOBE_WIDE, cs.ADOBE_WIDE)
    np.testing.assert_array_equal(conv.matrix, np.eye(3))
    assert conv.is_identity()


@pytest.mark.parametrize(
    "src, dst",
    [(cs.ENCODED_SRGB, cs.LINEAR_SRGB), (cs.LINEAR_SRGB, cs.OKLAB)],
)
def test_linear_conversion_rejects_nonlinear(src, dst):
    with pytest.raises(NonLinearColorSpaceError):
        LinearColorConversion(src, dst)
    with pytest.raises(ValueError):
        LinearColorConversion(src, dst)


def test_degenerate_primaries_raise():
    with pytest.raises(DegenerateColorSpaceError):
        LinearColorConversion(ColorSpace(RgbPrimaries.NONE, WhitePoint.D65), cs.LINEAR_SRGB)


# --- ColorConversion -------------------------------------------------------

def test_stage_introspection():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.ENCODED_BT_2100_PQ)
    assert conv.src_transform() is TransformFn.SRGB
    assert conv.dst_transform() is TransformFn.PQ
    assert not conv.is_linear()
    assert conv.linear_part().input_space == cs.LINEAR_SRGB
    assert conv.linear_part().output_space == cs.BT_2020


def test_pure_encoding_has_identity_linear_part():
    conv = ColorConversion(cs.LINEAR_SRGB, cs.ENCODED_SRGB)
    assert conv.src_transform() is None
    assert conv.dst_transform() is TransformFn.SRGB
    np.testing.assert_array_equal(conv.linear_part().matrix, np.eye(3))


def test_linear_only_conversion():
    conv = ColorConversion(cs.LINEAR_SRGB, cs.ACES_CG)
    assert conv.is_linear()
    np.testing.assert_allclose(
        conv.apply(SAMPLE_LINEAR_SRGB),
        LinearColorConversion(cs.LINEAR_SRGB, cs.ACES_CG).apply(SAMPLE_LINEAR_SRGB),
    )


def test_invert_swaps_spaces():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.OKLAB)
    inverse = conv.invert()
    assert inverse.src_space == cs.OKLAB
    assert inverse.dst_space == cs.ENCODED_SRGB
    assert inverse.invert() == conv


def test_equality_and_hash():
    a = ColorConversion(cs.ENCODED_SRGB, cs.OKLAB)
    b = ColorConversion(cs.ENCODED_SRGB, cs.OKLAB)
    assert a == b
    assert hash(a) == hash(b)
    assert a != ColorConversion(cs.ENCODED_SRGB, cs.OKLCH)


def test_convert_is_apply():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.ACES_CG)
    np.testing.assert_array_equal(conv.convert([0.2, 0.4, 0.6]), conv.apply([0.2, 0.4, 0.6]))


def test_unsupported_transform_raises_on_construction():
    uvw = cs.CIE_XYZ.with_transform(TransformFn.CIE_1964_UVW)
    with pytest.raises(UnsupportedTransformError):
        ColorConversion(uvw, cs.LINEAR_SRGB)
    with pytest.raises(UnsupportedTransformError):
        ColorConversion(cs.LINEAR_SRGB, uvw)


def test_bad_shape_raises():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.ACES_CG)
    with pytest.raises(ValueError):
        conv.apply([0.1, 0.2])
    with pytest.raises(ValueError):
        conv.apply(np.zeros((2, 2, 3)))


def test_apply_does_not_mutate_input():
    conv = ColorConversion(cs.ENCODED_SRGB, cs.OKLCH)
    values = np.array([[0.2, 0.4, 0.6]])
    before = values.copy()
    conv.apply(values)
    np.testing.assert_array_equal(values, before)


# --- Precision -------------------------------------------------------------

def test_float32_scenarios(float32):
    conv = ColorConversion(cs.ACES_CG, cs.ENCODED_SRGB)
    assert conv.linear_part().matrix.dtype == np.float32
    out = conv.apply(np.array([0.35, 0.1, 0.8]))
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, [0.71386, 0.27182, 0.95520], atol=1e-2)

    linear = LinearColorConversion(cs.LINEAR_SRGB, cs.ACES_CG).apply(SAMPLE_LINEAR_SRGB)
    assert linear.dtype == np.float32
    np.testing.assert_allclose(linear, [0.32277, 0.21839, 0.72593], atol=1e-3)

    encoded = ColorConversion(cs.LINEAR_SRGB, cs.ENCODED_SRGB).apply([0.35, 0.1, 0.8])
    assert encoded.dtype == np.float32
    np.testing.assert_allclose(encoded, [0.62621, 0.34919, 0.90633], atol=1e-3)


@pytest.mark.parametrize("space", [cs.OKLAB, cs.OKLCH, cs.ICTCP_PQ, cs.ENCODED_BT_2100_HLG], ids=_space_id)
def test_float32_round_trip(float32, space):
    value = np.array([0.35, 0.2, 0.8], dtype=np.float32)
    forward = ColorConversion(cs.LINEAR_SRGB, space)
    encoded = forward.apply(value)
    assert encoded.dtype == np.float32
    np.testing.assert_allclose(forward.invert().apply(encoded), value, atol=1e-3)
