# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

RGB <-> XYZ matrix derivation from primaries and white point.

Derivation (SMPTE RP 177):
    1. Each primary (x, y) becomes the XYZ column (x/y, 1, (1-x-y)/y),
       giving the primary matrix P.
    2. The channel scales S solve P @ S = W, so RGB (1, 1, 1) lands on the
       reference white W.
    3. RGB->XYZ = P @ diag(S); XYZ->RGB is its inverse.

All matrices are returned as float64 (3, 3) arrays for column vectors; use
``values @ M.T`` for row-stacked colors.
"""

from typing import Final

import numpy as np

from tint_colorspace import RgbPrimaries, WhitePoint
from tint_config import ArrayFloat
from tint_errors import DegenerateColorSpaceError

__all__ = [
    "primary_matrix",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "rgb_to_xyz_for",
    "xyz_to_rgb_for",
]

_IDENTITY: Final[ArrayFloat] = np.eye(3, dtype=np.float64)


def primary_matrix(primaries: RgbPrimaries) -> ArrayFloat:
    """
    Builds the unscaled primary matrix P (one XYZ column per primary).

    Raises:
        DegenerateColorSpaceError: If any primary has y == 0.
    """
    columns = []
    for x, y in primaries.values():
        if y == 0.0:
            raise DegenerateColorSpaceError(
                f"Primaries {primaries.name} contain a chromaticity with y == 0."
            )
        columns.append((x / y, 1.0, (1.0 - x - y) / y))
    return np.array(columns, dtype=np.float64).T


def rgb_to_xyz(primaries: RgbPrimaries, white_point: WhitePoint) -> ArrayFloat:
    """
    Computes the linear RGB -> XYZ matrix for the given basis.

    Args:
        primaries: RGB primary set.
        white_point: Reference white; RGB (1, 1, 1) maps onto it.

    Returns:
        (3, 3) float64 matrix M with ``xyz = M @ rgb``.

    Raises:
        DegenerateColorSpaceError: On zero white point, y == 0 primaries or
            a singular primary matrix.
    """
    white = np.array(white_point.values(), dtype=np.float64)
    if not np.any(white):
        raise DegenerateColorSpaceError(f"White point {white_point.name} is zero.")

    P = primary_matrix(primaries)
    try:
        S = np.linalg.solve(P, white)
    except np.linalg.LinAlgError as exc:
        raise DegenerateColorSpaceError(
            f"Primaries {primaries.name} do not span XYZ."
        ) from exc
    return P * S


def xyz_to_rgb(primaries: RgbPrimaries, white_point: WhitePoint) -> ArrayFloat:
    """Inverse of :func:`rgb_to_xyz`."""
    M = rgb_to_xyz(primaries, white_point)
    try:
        return np.linalg.inv(M)
    except np.linalg.LinAlgError as exc:
        raise DegenerateColorSpaceError(
            f"RGB->XYZ matrix for {primaries.name}/{white_point.name} is singular."
        ) from exc


def rgb_to_xyz_for(primaries: RgbPrimaries, white_point: WhitePoint) -> ArrayFloat:
    """Like :func:`rgb_to_xyz` but yields the identity for CIE XYZ primaries."""
    if primaries is RgbPrimaries.CIE_XYZ:
        return _IDENTITY.copy()
    return rgb_to_xyz(primaries, white_point)


def xyz_to_rgb_for(primaries: RgbPrimaries, white_point: WhitePoint) -> ArrayFloat:
    """Like :func:`xyz_to_rgb` but yields the identity for CIE XYZ primaries."""
    if primaries is RgbPrimaries.CIE_XYZ:
        return _IDENTITY.copy()
    return xyz_to_rgb(primaries, white_point)
