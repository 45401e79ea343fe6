# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Nonlinear color models and the transform registry.
"""

from color_models.registry import TRANSFORMS, ColorTransform, TransformPair

__all__ = ["TRANSFORMS", "ColorTransform", "TransformPair"]
