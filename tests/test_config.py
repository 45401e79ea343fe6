# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import threading

import numpy as np
import pytest

import tint_config
from tint_config import as_color_batch, as_float_array, handle_shapes


def test_default_dtype_is_float64():
    assert tint_config.get_float_dtype() == np.float64


@pytest.mark.parametrize("dtype", ["float32", np.float32, np.dtype("float32")])
def test_float_precision_accepts_float32_spellings(dtype):
    with tint_config.float_precision(dtype) as active:
        assert active == np.float32
        assert tint_config.get_float_dtype() == np.float32
    assert tint_config.get_float_dtype() == np.float64


def test_set_float_dtype_switches_and_restores():
    previous = tint_config.get_float_dtype()
    try:
        tint_config.set_float_dtype("float32")
        assert as_float_array([1, 2, 3]).dtype == np.float32
    finally:
        tint_config.set_float_dtype(previous)
    assert as_float_array([1, 2, 3]).dtype == np.float64


@pytest.mark.parametrize("dtype", ["float16", np.int32, "complex128", "not-a-dtype"])
def test_unsupported_dtype_raises(dtype):
    with pytest.raises(ValueError):
        tint_config.set_float_dtype(dtype)


def test_float_precision_restores_on_error():
    with pytest.raises(RuntimeError):
        with tint_config.float_precision(np.float32):
            raise RuntimeError("boom")
    assert tint_config.get_float_dtype() == np.float64


def test_float_precision_is_process_wide():
    seen = []
    with tint_config.float_precision(np.float32):
        worker = threading.Thread(target=lambda: seen.append(tint_config.get_float_dtype()))
        worker.start()
        worker.join()
    assert seen == [np.float32]
    assert tint_config.get_float_dtype() == np.float64


def test_as_float_array_readonly_copy():
    src = np.array([0.1, 0.2, 0.3])
    arr = as_float_array(src, readonly=True)
    assert not arr.flags.writeable
    src[0] = 5.0
    assert arr[0] == pytest.approx(0.1)


def test_as_color_batch_single_and_stack():
    batch, single = as_color_batch([1.0, 2.0, 3.0])
    assert batch.shape == (1, 3)
    assert single

    batch, single = as_color_batch(np.ones((4, 3), dtype=np.float32))
    assert batch.shape == (4, 3)
    assert batch.dtype == np.float64
    assert not single


@pytest.mark.parametrize("bad", [[1.0, 2.0], np.zeros((2, 4)), np.zeros((2, 2, 3)), 1.0])
def test_as_color_batch_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        as_color_batch(bad)


def test_handle_shapes_preserves_input_shape():
    @handle_shapes
    def double(values):
        assert values.ndim == 2
        return values * 2.0

    assert double([1.0, 2.0, 3.0]).shape == (3,)
    assert double(np.ones((5, 3))).shape == (5, 3)
    np.testing.assert_allclose(double([1.0, 2.0, 3.0]), [2.0, 4.0, 6.0])


def test_metadata_summary_matches_package_version():
    import tint_about

    summary = tint_about.metadata_summary()
    assert summary["title"] == "Tint"
    assert summary["version"] == tint_about.__version__
