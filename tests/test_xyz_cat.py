# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
import pytest

from tint_cat import LmsConeSpace, adapt, chromatic_adaptation_transform
from tint_colorspace import RgbPrimaries, WhitePoint
from tint_errors import DegenerateColorSpaceError, TintError
from tint_xyz import primary_matrix, rgb_to_xyz, rgb_to_xyz_for, xyz_to_rgb, xyz_to_rgb_for

# IEC 61966-2-1 reference matrix
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])


def test_srgb_matrix_matches_reference():
    np.testing.assert_allclose(rgb_to_xyz(RgbPrimaries.BT709, WhitePoint.D65), SRGB_TO_XYZ, atol=1e-7)


@pytest.mark.parametrize("primaries", [p for p in RgbPrimaries if p not in (RgbPrimaries.NONE, RgbPrimaries.CIE_XYZ)])
def test_rgb_white_maps_to_reference_white(primaries):
    M = rgb_to_xyz(primaries, WhitePoint.D65)
    np.testing.assert_allclose(M @ np.ones(3), WhitePoint.D65.values(), atol=1e-12)
    np.testing.assert_allclose(xyz_to_rgb(primaries, WhitePoint.D65) @ M, np.eye(3), atol=1e-10)


def test_primary_matrix_columns():
    P = primary_matrix(RgbPrimaries.BT709)
    np.testing.assert_allclose(P[:, 0], [0.64 / 0.33, 1.0, 0.03 / 0.33])
    np.testing.assert_allclose(P[1], [1.0, 1.0, 1.0])


def test_xyz_primaries_are_identity():
    np.testing.assert_array_equal(rgb_to_xyz_for(RgbPrimaries.CIE_XYZ, WhitePoint.D50), np.eye(3))
    np.testing.assert_array_equal(xyz_to_rgb_for(RgbPrimaries.CIE_XYZ, WhitePoint.D65), np.eye(3))


@pytest.mark.parametrize(
    "primaries, white",
    [
        (RgbPrimaries.NONE, WhitePoint.D65),
        (RgbPrimaries.CIE_XYZ, WhitePoint.D65),
        (RgbPrimaries.BT709, WhitePoint.NONE),
    ],
)
def test_degenerate_inputs_raise(primaries, white):
    with pytest.raises(DegenerateColorSpaceError):
        rgb_to_xyz(primaries, white)
    with pytest.raises(ValueError):
        xyz_to_rgb(primaries, white)


def test_degenerate_error_is_tint_error():
    assert issubclass(DegenerateColorSpaceError, TintError)


@pytest.mark.parametrize("cone_space", list(LmsConeSpace))
def test_cat_same_white_is_identity(cone_space):
    cat = chromatic_adaptation_transform(WhitePoint.D65, WhitePoint.D65, cone_space)
    np.testing.assert_allclose(cat, np.eye(3), atol=1e-12)


@pytest.mark.parametrize("cone_space", list(LmsConeSpace))
def test_cat_maps_source_white_to_destination_white(cone_space):
    cat = chromatic_adaptation_transform(WhitePoint.D65, WhitePoint.D50, cone_space)
    np.testing.assert_allclose(cat @ WhitePoint.D65.values(), WhitePoint.D50.values(), atol=1e-12)


def test_cat_inverse_pair():
    fwd = chromatic_adaptation_transform(WhitePoint.D65, WhitePoint.D60)
    bwd = chromatic_adaptation_transform(WhitePoint.D60, WhitePoint.D65)
    np.testing.assert_allclose(fwd @ bwd, np.eye(3), atol=1e-12)


def test_cat_default_is_sharp():
    default = chromatic_adaptation_transform(WhitePoint.A, WhitePoint.D65)
    sharp = chromatic_adaptation_transform(WhitePoint.A, WhitePoint.D65, LmsConeSpace.SHARP)
    np.testing.assert_array_equal(default, sharp)
    assert not default.flags.writeable


def test_cat_zero_cone_response_warns_and_propagates_nan():
    with pytest.warns(RuntimeWarning, match="zero cone response"):
        cat = chromatic_adaptation_transform(WhitePoint.NONE, WhitePoint.D65)
    assert not np.all(np.isfinite(cat))


def test_cone_matrices_are_read_only():
    assert LmsConeSpace.BRADFORD.matrix()[0, 0] == pytest.approx(0.8951)
    with pytest.raises(ValueError):
        LmsConeSpace.BRADFORD.matrix()[0, 0] = 1.0


def test_adapt_shapes_and_white():
    out = adapt(WhitePoint.D65.values(), WhitePoint.D65, WhitePoint.D50)
    assert out.shape == (3,)
    np.testing.assert_allclose(out, WhitePoint.D50.values(), atol=1e-12)

    batch = adapt(np.tile(WhitePoint.D65.values(), (4, 1)), WhitePoint.D65, WhitePoint.D50, LmsConeSpace.BRADFORD)
    assert batch.shape == (4, 3)
    np.testing.assert_allclose(batch, np.tile(WhitePoint.D50.values(), (4, 1)), atol=1e-12)


def test_adapt_same_white_returns_copy():
    xyz = np.array([0.2, 0.3, 0.4])
    out = adapt(xyz, WhitePoint.D65, WhitePoint.D65)
    np.testing.assert_array_equal(out, xyz)
    out[0] = 1.0
    assert xyz[0] == 0.2
