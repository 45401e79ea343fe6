# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

``Color``: a single 3-component value tagged with its color space.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from color_models import ColorTransform
from tint_colorspace import ENCODED_SRGB, ColorSpace, TransformFn
from tint_config import ArrayFloat, as_float_array
from tint_conversion import ColorConversion

__all__ = ["Color"]


@dataclass(slots=True, frozen=True, eq=False)
class Color:
    """
    Immutable color value.

    Attributes:
        value: Read-only array of shape (3,) in the active float dtype.
        space: Color space *value* is expressed in.
    """
    value: ArrayFloat
    space: ColorSpace

    def __post_init__(self) -> None:
        value = as_float_array(self.value, readonly=True)
        if value.shape != (3,):
            raise ValueError(f"Color value must have shape (3,), got {value.shape}")
        object.__setattr__(self, "value", value)

    @classmethod
    def new(cls, x: float, y: float, z: float, space: ColorSpace) -> Color:
        return cls(np.array([x, y, z]), space)

    @classmethod
    def srgb(cls, r: float, g: float, b: float) -> Color:
        """An encoded sRGB color, components nominally in [0, 1]."""
        return cls(np.array([r, g, b]), ENCODED_SRGB)

    def to(self, space: ColorSpace) -> Color:
        """Converts into *space*; builds a fresh conversion per call."""
        return Color(ColorConversion(self.space, space).apply(self.value), space)

    def to_linear(self) -> Color:
        """
        Removes the nonlinear encoding, keeping primaries and white point.

        Raises:
            UnsupportedTransformError: If the space's encoding has no
                working inverse.
        """
        if self.space.is_linear():
            return self
        transform = ColorTransform.new(self.space.transform_fn, TransformFn.NONE)
        return Color(transform.apply(self.value, self.space.white_point), self.space.as_linear())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.space == other.space and bool(np.array_equal(self.value, other.value))

    def __hash__(self) -> int:
        return hash((self.space, self.value.tobytes()))

    def __repr__(self) -> str:
        x, y, z = (float(c) for c in self.value)
        return f"Color(({x:.6g}, {y:.6g}, {z:.6g}), {self.space})"
