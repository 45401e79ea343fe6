# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Conversion pipeline between color spaces.

A conversion from ``src`` to ``dst`` runs up to three stages:

    1. decode  : src encoding -> linear src        (ColorTransform)
    2. linear  : linear src   -> linear dst        (3x3 matrix)
    3. encode  : linear dst   -> dst encoding      (ColorTransform)

Stages that would be a no-op are omitted.  The linear matrix comes from the
precomputed table when the pair is tabulated, otherwise it is derived:

    M = XYZ->dst  @  CAT(src white -> dst white)  @  src->XYZ

Example:
    >>> conv = ColorConversion(ENCODED_SRGB, ACES_CG)
    >>> conv.apply([0.5, 0.2, 0.9])

Conversions are immutable and may be shared between threads.  Matrices are
cast to the float dtype active at construction time.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from color_models import ColorTransform
from tint_cat import LmsConeSpace, chromatic_adaptation_transform
from tint_colorspace import ColorSpace, TransformFn
from tint_config import ArrayFloat, as_float_array, handle_shapes
from tint_errors import NonLinearColorSpaceError
from tint_matrices import const_conversion_matrix
from tint_xyz import rgb_to_xyz_for, xyz_to_rgb_for

__all__ = [
    "derive_linear_matrix",
    "LinearColorConversion",
    "ColorConversion",
]

logger = logging.getLogger(__name__)


def derive_linear_matrix(
    src: ColorSpace,
    dst: ColorSpace,
    cone_space: LmsConeSpace = LmsConeSpace.SHARP,
) -> ArrayFloat:
    """
    Derives the float64 src -> dst matrix without consulting the table.

    The adaptation term is skipped when both spaces share a white point.
    """
    src_to_xyz = rgb_to_xyz_for(src.primaries, src.white_point)
    xyz_to_dst = xyz_to_rgb_for(dst.primaries, dst.white_point)
    if src.white_point is dst.white_point:
        return xyz_to_dst @ src_to_xyz
    cat = chromatic_adaptation_transform(src.white_point, dst.white_point, cone_space)
    return xyz_to_dst @ cat @ src_to_xyz


@handle_shapes
def _apply_matrix(values: ArrayFloat, matrix: ArrayFloat) -> ArrayFloat:
    return values @ matrix.T


class LinearColorConversion:
    """
    3x3 matrix conversion between two linear color spaces.

    Args:
        src: Linear source space.
        dst: Linear destination space.
        use_precomputed: Consult the precomputed table before deriving.

    Raises:
        NonLinearColorSpaceError: If either space carries an encoding.
    """
    __slots__ = ("_matrix", "_input_space", "_output_space")

    def __init__(self, src: ColorSpace, dst: ColorSpace, use_precomputed: bool = True) -> None:
        for role, space in (("source", src), ("destination", dst)):
            if not space.is_linear():
                raise NonLinearColorSpaceError(
                    f"LinearColorConversion {role} space must be linear, "
                    f"got transform {space.transform_fn.name}."
                )

        matrix: Optional[ArrayFloat] = None
        if src == dst:
            matrix = np.eye(3, dtype=np.float64)
        elif use_precomputed:
            matrix = const_conversion_matrix(
                src.primaries, src.white_point, dst.primaries, dst.white_point
            )
            logger.debug(
                "Precomputed matrix %s for %s -> %s",
                "hit" if matrix is not None else "miss", src, dst,
            )
        if matrix is None:
            matrix = derive_linear_matrix(src, dst)

        self._matrix = as_float_array(matrix, readonly=True)
        self._input_space = src
        self._output_space = dst

    @property
    def matrix(self) -> ArrayFloat:
        """Read-only (3, 3) matrix for column vectors."""
        return self._matrix

    @property
    def input_space(self) -> ColorSpace:
        return self._input_space

    @property
    def output_space(self) -> ColorSpace:
        return self._output_space

    def is_identity(self) -> bool:
        return bool(np.array_equal(self._matrix, np.eye(3)))

    def apply_raw(self, values: ArrayFloat) -> ArrayFloat:
        return values @ self._matrix.T

    def apply(self, values: Any) -> ArrayFloat:
        """Converts (3,) or (N, 3) linear values."""
        return _apply_matrix(values, self._matrix)

    def __repr__(self) -> str:
        return (
            f"LinearColorConversion({self._input_space} -> {self._output_space}, "
            f"dtype={self._matrix.dtype})"
        )


class ColorConversion:
    """
    Full conversion between two arbitrary color spaces.

    Args:
        src: Space the input values are expressed in.
        dst: Space to convert into.

    Raises:
        UnsupportedTransformError: If either space uses an encoding without
            working formulas (CIE 1964 UVW).
        DegenerateColorSpaceError: If a linear basis cannot be built.
    """
    __slots__ = ("_src_space", "_dst_space", "_src_transform", "_linear", "_dst_transform")

    def __init__(self, src: ColorSpace, dst: ColorSpace) -> None:
        self._src_space = src
        self._dst_space = dst
        self._src_transform = ColorTransform.new(src.transform_fn, TransformFn.NONE)
        self._dst_transform = ColorTransform.new(TransformFn.NONE, dst.transform_fn)

        linear = LinearColorConversion(src.as_linear(), dst.as_linear())
        self._linear: Optional[LinearColorConversion] = None if linear.is_identity() else linear

        logger.debug(
            "ColorConversion %s -> %s: decode=%s linear=%s encode=%s",
            src, dst,
            src.transform_fn.name,
            "identity" if self._linear is None else "matrix",
            dst.transform_fn.name,
        )

    @property
    def src_space(self) -> ColorSpace:
        return self._src_space

    @property
    def dst_space(self) -> ColorSpace:
        return self._dst_space

    def src_transform(self) -> Optional[TransformFn]:
        """Tag of the decode stage, or None if the source is linear."""
        return None if self._src_transform is None else self._src_transform.src_tag

    def dst_transform(self) -> Optional[TransformFn]:
        """Tag of the encode stage, or None if the destination is linear."""
        return None if self._dst_transform is None else self._dst_transform.dst_tag

    def linear_part(self) -> LinearColorConversion:
        """The linear stage, materialised even when it is the identity."""
        if self._linear is not None:
            return self._linear
        return LinearColorConversion(self._src_space.as_linear(), self._dst_space.as_linear())

    def is_linear(self) -> bool:
        """True if the conversion has no nonlinear stage."""
        return self._src_transform is None and self._dst_transform is None

    def invert(self) -> ColorConversion:
        """Builds the dst -> src conversion."""
        return ColorConversion(self._dst_space, self._src_space)

    def apply_raw(self, values: ArrayFloat) -> ArrayFloat:
        if self._src_transform is not None:
            values = self._src_transform.apply_raw(values, self._src_space.white_point)
        if self._linear is not None:
            values = self._linear.apply_raw(values)
        if self._dst_transform is not None:
            values = self._dst_transform.apply_raw(values, self._dst_space.white_point)
        return values

    def apply(self, values: Any) -> ArrayFloat:
        """
        Converts color(s) from the source to the destination space.

        Args:
            values: Shape (3,) or (N, 3).

        Returns:
            Converted values with the input's shape in the active dtype.
        """
        return _apply_conversion(values, self)

    convert = apply

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorConversion):
            return NotImplemented
        return self._src_space == other._src_space and self._dst_space == other._dst_space

    def __hash__(self) -> int:
        return hash((self._src_space, self._dst_space))

    def __repr__(self) -> str:
        return f"ColorConversion({self._src_space} -> {self._dst_space})"


@handle_shapes
def _apply_conversion(values: ArrayFloat, conversion: ColorConversion) -> ArrayFloat:
    return conversion.apply_raw(values)
