# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
import pytest

from color_models import TRANSFORMS, ColorTransform, TransformPair
from color_models import cie, hdr, hsx
from color_models.registry import _check_registry
from tint_colorspace import TransformFn, WhitePoint
from tint_errors import UnsupportedTransformError

_RGB_SAMPLES = np.array([
    [0.6, 0.3, 0.2],
    [0.5, 0.9, 0.2],
    [0.1, 0.8, 0.4],
    [0.2, 0.3, 0.9],
    [0.6, 0.2, 0.9],
    [0.9, 0.2, 0.5],
])
_GAMMA_SAMPLES = np.array([
    [0.6, 0.3, 0.2],
    [0.001, 0.5, 0.95],
    [-0.001, 0.01, 2.0],
])
_XYZ_SAMPLES = np.array([
    [0.3, 0.4, 0.5],
    [0.002, 0.001, 0.003],
    [0.9, 0.8, 0.1],
    [0.9, 1.0, 1.0],
])

ROUND_TRIP_SAMPLES = {
    TransformFn.SRGB: _GAMMA_SAMPLES,
    TransformFn.BT601: _GAMMA_SAMPLES,
    TransformFn.OKLAB: _XYZ_SAMPLES,
    TransformFn.OKLCH: _XYZ_SAMPLES,
    TransformFn.CIE_XYY: _XYZ_SAMPLES,
    TransformFn.CIE_LAB: _XYZ_SAMPLES,
    TransformFn.CIE_LCH: _XYZ_SAMPLES,
    TransformFn.CIE_1960_UCS: _XYZ_SAMPLES,
    TransformFn.CIE_1960_UCS_UVV: _XYZ_SAMPLES,
    TransformFn.CIE_1976_LUV: _XYZ_SAMPLES,
    TransformFn.HSL: _RGB_SAMPLES,
    TransformFn.HSV: _RGB_SAMPLES,
    TransformFn.HSI: _RGB_SAMPLES,
    TransformFn.PQ: np.array([[0.5, 100.0, 1000.0], [4000.0, 10.0, 0.01]]),
    TransformFn.HLG: np.array([[0.05, 0.5, 1.0], [2.0, 6.0, 12.0]]),
    TransformFn.ICTCP_PQ: np.array([[100.0, 200.0, 50.0], [1.0, 0.5, 2.0]]),
    TransformFn.ICTCP_HLG: np.array([[0.2, 0.5, 0.9], [1.5, 0.1, 0.3]]),
}


def test_registry_is_complete():
    assert set(TRANSFORMS) == set(TransformFn)
    assert all(isinstance(pair, TransformPair) for pair in TRANSFORMS.values())
    implemented = {tag for tag, pair in TRANSFORMS.items() if pair.implemented}
    assert set(TransformFn) - implemented == {TransformFn.CIE_1964_UVW}


def test_round_trip_samples_cover_every_working_transform():
    working = {tag for tag, pair in TRANSFORMS.items() if pair.implemented} - {TransformFn.NONE}
    assert set(ROUND_TRIP_SAMPLES) == working


def test_registry_check_detects_missing_tag():
    broken = dict(TRANSFORMS)
    del broken[TransformFn.HSV]
    with pytest.raises(RuntimeError, match="HSV"):
        _check_registry(broken)


@pytest.mark.parametrize("tag", list(ROUND_TRIP_SAMPLES), ids=lambda t: t.name)
def test_round_trip(tag):
    samples = ROUND_TRIP_SAMPLES[tag]
    encode = ColorTransform.new(TransformFn.NONE, tag)
    decode = ColorTransform.new(tag, TransformFn.NONE)

    encoded = encode.apply(samples, WhitePoint.D65)
    assert encoded.shape == samples.shape
    np.testing.assert_allclose(decode.apply(encoded, WhitePoint.D65), samples, rtol=1e-6, atol=1e-9)
    np.testing.assert_allclose(
        encode.apply(decode.apply(encoded, WhitePoint.D65), WhitePoint.D65), encoded, rtol=1e-6, atol=1e-9
    )


@pytest.mark.parametrize("tag", [TransformFn.CIE_LAB, TransformFn.CIE_1976_LUV, TransformFn.CIE_XYY])
def test_round_trip_relative_to_other_white(tag):
    encode = ColorTransform.new(TransformFn.NONE, tag)
    decode = ColorTransform.new(tag, TransformFn.NONE)
    encoded = encode.apply(_XYZ_SAMPLES, WhitePoint.D50)
    np.testing.assert_allclose(decode.apply(encoded, WhitePoint.D50), _XYZ_SAMPLES, rtol=1e-6, atol=1e-9)


def test_single_vector_keeps_shape():
    encode = ColorTransform.new(TransformFn.NONE, TransformFn.SRGB)
    out = encode.apply([0.35, 0.1, 0.8], WhitePoint.D65)
    assert out.shape == (3,)
    np.testing.assert_allclose(out, [0.62621, 0.34919, 0.90633], atol=1e-3)


def test_compose_two_encodings():
    srgb_to_hsv = ColorTransform.new(TransformFn.SRGB, TransformFn.HSV)
    out = srgb_to_hsv.apply([1.0, 0.0, 0.0], WhitePoint.D65)
    np.testing.assert_allclose(out, [0.0, 1.0, 1.0], atol=1e-12)
    assert srgb_to_hsv.src_tag is TransformFn.SRGB
    assert srgb_to_hsv.dst_tag is TransformFn.HSV


def test_none_to_none_is_no_stage():
    assert ColorTransform.new(TransformFn.NONE, TransformFn.NONE) is None


@pytest.mark.parametrize(
    "src, dst",
    [(TransformFn.CIE_1964_UVW, TransformFn.NONE), (TransformFn.NONE, TransformFn.CIE_1964_UVW)],
)
def test_uvw_is_unsupported(src, dst):
    with pytest.raises(UnsupportedTransformError):
        ColorTransform.new(src, dst)
    with pytest.raises(NotImplementedError):
        cie.xyz_to_uvw(np.ones((1, 3)), WhitePoint.D65)


# --- Known values ----------------------------------------------------------

@pytest.mark.parametrize(
    "func, expected",
    [
        (hsx.rgb_to_hsl, [15.0, 0.5, 0.4]),
        (hsx.rgb_to_hsv, [15.0, 0.4 / 0.6, 0.6]),
        (hsx.rgb_to_hsi, [15.0, 1.0 - 0.2 / (1.1 / 3.0), 1.1 / 3.0]),
    ],
)
def test_hue_models_known_values(func, expected):
    out = func(np.array([[0.6, 0.3, 0.2]]), WhitePoint.D65)
    np.testing.assert_allclose(out[0], expected, atol=1e-9)


@pytest.mark.parametrize("func", [hsx.rgb_to_hsl, hsx.rgb_to_hsv, hsx.rgb_to_hsi])
def test_hue_models_achromatic_and_black(func):
    out = func(np.array([[0.5, 0.5, 0.5], [0.0, 0.0, 0.0]]), WhitePoint.D65)
    np.testing.assert_allclose(out[:, :2], 0.0)
    assert np.all(np.isfinite(out))


def test_hue_primaries():
    out = hsx.rgb_to_hsv(np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]), WhitePoint.D65)
    np.testing.assert_allclose(out[:, 0], [0.0, 120.0, 240.0])


def test_lab_of_white_is_neutral():
    out = cie.xyz_to_lab(np.array([WhitePoint.D50.values()]), WhitePoint.D50)
    np.testing.assert_allclose(out[0], [100.0, 0.0, 0.0], atol=1e-9)


def test_lch_hue_in_degrees_range():
    rng = np.random.default_rng(7)
    xyz = rng.uniform(0.01, 1.0, size=(64, 3))
    lch = cie.xyz_to_lch(xyz, WhitePoint.D65)
    assert np.all((lch[:, 2] >= 0.0) & (lch[:, 2] < 360.0))


def test_xyy_white_and_black():
    out = cie.xyz_to_xyy(np.array([[0.95047, 1.0, 1.08883], [0.0, 0.0, 0.0]]), WhitePoint.D65)
    np.testing.assert_allclose(out[0], [0.95047 / 3.0393, 1.0 / 3.0393, 1.0], atol=1e-9)
    np.testing.assert_allclose(out[1], [out[0, 0], out[0, 1], 0.0], atol=1e-12)
    np.testing.assert_array_equal(cie.xyy_to_xyz(np.array([[0.3, 0.0, 0.5]]), WhitePoint.D65), 0.0)


def test_uvv_black_is_zero():
    out = cie.xyz_to_uvv(np.zeros((1, 3)), WhitePoint.D65)
    np.testing.assert_array_equal(out, 0.0)
    np.testing.assert_array_equal(cie.uvv_to_xyz(out, WhitePoint.D65), 0.0)


def test_ucs_definition():
    out = cie.xyz_to_ucs(np.array([[0.3, 0.4, 0.5]]), WhitePoint.D65)
    np.testing.assert_allclose(out[0], [0.2, 0.4, 0.5 * (-0.3 + 1.2 + 0.5)])


def test_luv_black_round_trips_to_black():
    luv = cie.xyz_to_luv(np.zeros((1, 3)), WhitePoint.D65)
    np.testing.assert_allclose(luv, 0.0, atol=1e-6)
    np.testing.assert_allclose(cie.luv_to_xyz(luv, WhitePoint.D65), 0.0, atol=1e-9)


def test_pq_and_hlg_reference_points():
    np.testing.assert_allclose(hdr.pq_encode(np.array([[10000.0, 0.0, 100.0]]), WhitePoint.D65)[0, 0], 1.0)
    np.testing.assert_allclose(hdr.pq_decode(np.array([[1.0, 0.0, 0.5]]), WhitePoint.D65)[0, :2], [10000.0, 0.0], atol=1e-6)
    np.testing.assert_allclose(hdr.hlg_encode(np.array([[1.0, 12.0, 0.0]]), WhitePoint.D65)[0], [0.5, 1.0, 0.0], atol=1e-5)


def test_pq_clamps_negative_light():
    out = hdr.pq_decode(hdr.pq_encode(np.array([[-5.0, 0.0, 1.0]]), WhitePoint.D65), WhitePoint.D65)
    np.testing.assert_allclose(out[0], [0.0, 0.0, 1.0], atol=1e-9)
