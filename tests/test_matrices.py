# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import itertools

import numpy as np
import pytest

import tint_colorspace as cs
from tint_colorspace import ColorSpace, RgbPrimaries, WhitePoint
from tint_conversion import derive_linear_matrix
from tint_matrices import const_conversion_matrix
from tools.generate_matrices import (
    DEFAULT_OUTPUT,
    WORKING_SPACES,
    constant_name,
    format_entry,
    is_current,
    main,
    render_module,
    table_pairs,
)

PAIRS = table_pairs()


def _pair_id(pair):
    return constant_name(*pair)


def test_working_spaces_are_the_distinct_linear_builtins():
    bases = {(s.primaries, s.white_point) for s in cs.ALL_COLOR_SPACES if s.is_linear()}
    assert set(WORKING_SPACES) == bases
    assert len(WORKING_SPACES) == len(bases) == 13


def test_every_builtin_linear_pair_is_tabulated():
    linear = [s for s in cs.ALL_COLOR_SPACES if s.is_linear()]
    for src, dst in itertools.product(linear, repeat=2):
        matrix = const_conversion_matrix(src.primaries, src.white_point, dst.primaries, dst.white_point)
        assert matrix is not None, f"{src} -> {dst}"
    assert len(PAIRS) == 13 * 12


@pytest.mark.parametrize("pair", PAIRS, ids=_pair_id)
def test_table_matches_runtime_derivation(pair):
    src, dst = pair
    table = const_conversion_matrix(*src, *dst)
    derived = derive_linear_matrix(ColorSpace(*src), ColorSpace(*dst))
    np.testing.assert_allclose(table, derived, atol=1e-4)


def test_equal_bases_return_identity():
    np.testing.assert_array_equal(
        const_conversion_matrix(RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65),
        np.eye(3),
    )


def test_untabulated_pair_returns_none():
    assert const_conversion_matrix(RgbPrimaries.BT709, WhitePoint.D50, RgbPrimaries.AP1, WhitePoint.D60) is None
    assert const_conversion_matrix(RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D50) is None


def test_table_entries_are_read_only():
    matrix = const_conversion_matrix(RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60)
    assert matrix.dtype == np.float64
    with pytest.raises(ValueError):
        matrix[0, 0] = 0.0


def test_format_entry():
    assert format_entry(0.41245643908969226) == "0.4124564391"
    assert format_entry(-1.5371385127977162) == "-1.5371385128"
    assert format_entry(-1e-17) == "0.0000000000"


def test_rendered_module_reproduces_table():
    source = render_module()
    assert source.startswith("# -*- coding: utf-8 -*-")
    assert source.count(": Final[Tuple[float, ...]] = (") == len(PAIRS)

    namespace = {}
    exec(compile(source, "<generated tint_matrices>", "exec"), namespace)
    lookup = namespace["const_conversion_matrix"]
    for src, dst in PAIRS:
        np.testing.assert_allclose(lookup(*src, *dst), const_conversion_matrix(*src, *dst), atol=2e-10)


def test_shipped_table_is_up_to_date():
    assert is_current(DEFAULT_OUTPUT.read_text(encoding="utf-8"), render_module())
    assert main(["--check"]) == 0


def test_stale_table_is_detected(tmp_path):
    rendered = render_module()
    assert not is_current(rendered.replace("0.6274523942", "0.6274523952", 1), rendered)
    assert not is_current(rendered.replace("BT709_D65_TO_BT2020_D65:", "BT709_TO_BT2020:", 1), rendered)

    stale = tmp_path / "tint_matrices.py"
    stale.write_text(rendered.replace("0.6274523942", "0.6274523952", 1), encoding="utf-8")
    assert main(["--check", "--output", str(stale)]) == 1
