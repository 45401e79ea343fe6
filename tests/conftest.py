# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
import pytest

import tint_config


@pytest.fixture
def float32():
    """Runs the test with single precision and restores the previous dtype."""
    with tint_config.float_precision(np.float32):
        yield np.dtype(np.float32)


@pytest.fixture
def sample_linear_srgb():
    return np.array([0.35, 0.2, 0.8])
