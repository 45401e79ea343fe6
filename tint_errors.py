# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Exception hierarchy shared by all Tint modules.

Each concrete error also derives from the builtin exception a caller would
naturally catch (``ValueError`` / ``NotImplementedError``), so code that is
unaware of Tint still handles them sensibly.
"""

__all__ = [
    "TintError",
    "NonLinearColorSpaceError",
    "UnsupportedTransformError",
    "DegenerateColorSpaceError",
]


class TintError(Exception):
    """Base class for all Tint errors."""


class NonLinearColorSpaceError(TintError, ValueError):
    """A color space with a nonlinear encoding was given where a linear one is required."""


class UnsupportedTransformError(TintError, NotImplementedError):
    """A transform tag has no working forward/inverse formula."""


class DegenerateColorSpaceError(TintError, ValueError):
    """Primaries or white point do not define an invertible RGB basis."""
