# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Transform registry.

``TRANSFORMS`` maps every ``TransformFn`` tag to its (forward, inverse)
pair.  Forward functions encode linear coordinates, inverse functions
decode them.  The table is checked against the enum at import time, so a
tag added to ``TransformFn`` without formulas fails loudly instead of
surfacing as a lookup error mid-conversion.

``ColorTransform`` is the nonlinear stage of a conversion: it decodes from
the source encoding and/or encodes into the destination encoding.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Final, NamedTuple, Optional, TypeAlias

from tint_colorspace import TransformFn, WhitePoint
from tint_config import ArrayFloat, handle_shapes
from tint_errors import UnsupportedTransformError

from color_models import cie, gamma, hdr, hsx, oklab

__all__ = [
    "RawTransform",
    "TransformPair",
    "TRANSFORMS",
    "ColorTransform",
]

logger = logging.getLogger(__name__)

RawTransform: TypeAlias = Callable[[ArrayFloat, WhitePoint], ArrayFloat]


class TransformPair(NamedTuple):
    """Forward (linear -> encoded) and inverse (encoded -> linear) formulas."""
    forward: RawTransform
    inverse: RawTransform
    implemented: bool = True


def _identity(values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
    return values


TRANSFORMS: Final[Dict[TransformFn, TransformPair]] = {
    TransformFn.NONE:             TransformPair(_identity, _identity),
    TransformFn.SRGB:             TransformPair(gamma.srgb_encode, gamma.srgb_decode),
    TransformFn.OKLAB:            TransformPair(oklab.xyz_to_oklab, oklab.oklab_to_xyz),
    TransformFn.OKLCH:            TransformPair(oklab.xyz_to_oklch, oklab.oklch_to_xyz),
    TransformFn.CIE_XYY:          TransformPair(cie.xyz_to_xyy, cie.xyy_to_xyz),
    TransformFn.CIE_LAB:          TransformPair(cie.xyz_to_lab, cie.lab_to_xyz),
    TransformFn.CIE_LCH:          TransformPair(cie.xyz_to_lch, cie.lch_to_xyz),
    TransformFn.CIE_1960_UCS:     TransformPair(cie.xyz_to_ucs, cie.ucs_to_xyz),
    TransformFn.CIE_1960_UCS_UVV: TransformPair(cie.xyz_to_uvv, cie.uvv_to_xyz),
    TransformFn.CIE_1964_UVW:     TransformPair(cie.xyz_to_uvw, cie.uvw_to_xyz, implemented=False),
    TransformFn.CIE_1976_LUV:     TransformPair(cie.xyz_to_luv, cie.luv_to_xyz),
    TransformFn.HSL:              TransformPair(hsx.rgb_to_hsl, hsx.hsl_to_rgb),
    TransformFn.HSV:              TransformPair(hsx.rgb_to_hsv, hsx.hsv_to_rgb),
    TransformFn.HSI:              TransformPair(hsx.rgb_to_hsi, hsx.hsi_to_rgb),
    TransformFn.ICTCP_PQ:         TransformPair(hdr.rgb_to_ictcp_pq, hdr.ictcp_pq_to_rgb),
    TransformFn.ICTCP_HLG:        TransformPair(hdr.rgb_to_ictcp_hlg, hdr.ictcp_hlg_to_rgb),
    TransformFn.BT601:            TransformPair(gamma.bt601_encode, gamma.bt601_decode),
    TransformFn.PQ:               TransformPair(hdr.pq_encode, hdr.pq_decode),
    TransformFn.HLG:              TransformPair(hdr.hlg_encode, hdr.hlg_decode),
}


def _check_registry(table: Dict[TransformFn, TransformPair]) -> None:
    missing = set(TransformFn) - table.keys()
    extra = table.keys() - set(TransformFn)
    if missing or extra:
        raise RuntimeError(
            "Transform registry out of sync with TransformFn: "
            f"missing={sorted(t.name for t in missing)}, "
            f"extra={sorted(str(t) for t in extra)}"
        )


_check_registry(TRANSFORMS)


def _lookup(tag: TransformFn) -> TransformPair:
    try:
        pair = TRANSFORMS[tag]
    except KeyError as exc:
        raise UnsupportedTransformError(f"No transform registered for {tag!r}.") from exc
    if not pair.implemented:
        raise UnsupportedTransformError(f"Transform {tag.name} is not implemented.")
    return pair


class ColorTransform:
    """
    Nonlinear stage between two encodings that share a linear basis.

    Build with :meth:`new`; the constructor takes the already resolved
    stage functions.
    """
    __slots__ = ("_src_tag", "_dst_tag", "_decode", "_encode")

    def __init__(
        self,
        src_tag: TransformFn,
        dst_tag: TransformFn,
        decode: Optional[RawTransform],
        encode: Optional[RawTransform],
    ) -> None:
        self._src_tag = src_tag
        self._dst_tag = dst_tag
        self._decode = decode
        self._encode = encode

    @classmethod
    def new(cls, src_tag: TransformFn, dst_tag: TransformFn) -> Optional[ColorTransform]:
        """
        Composes the decode of *src_tag* with the encode of *dst_tag*.

        Returns:
            None when both tags are ``NONE`` (nothing to do).

        Raises:
            UnsupportedTransformError: If either tag has no working formulas.
        """
        if src_tag is TransformFn.NONE and dst_tag is TransformFn.NONE:
            return None

        decode = None if src_tag is TransformFn.NONE else _lookup(src_tag).inverse
        encode = None if dst_tag is TransformFn.NONE else _lookup(dst_tag).forward
        logger.debug("ColorTransform %s -> %s", src_tag.name, dst_tag.name)
        return cls(src_tag, dst_tag, decode, encode)

    @property
    def src_tag(self) -> TransformFn:
        return self._src_tag

    @property
    def dst_tag(self) -> TransformFn:
        return self._dst_tag

    def apply_raw(self, values: ArrayFloat, white_point: WhitePoint) -> ArrayFloat:
        """Stage body on pre-validated (N, 3) arrays of the active dtype."""
        if self._decode is not None:
            values = self._decode(values, white_point)
        if self._encode is not None:
            values = self._encode(values, white_point)
        return values

    def apply(self, values: Any, white_point: WhitePoint) -> ArrayFloat:
        """Applies the stage to a (3,) or (N, 3) array."""
        return _apply_shaped(values, self, white_point)

    def __repr__(self) -> str:
        return f"ColorTransform({self._src_tag.name} -> {self._dst_tag.name})"


@handle_shapes
def _apply_shaped(values: ArrayFloat, transform: ColorTransform, white_point: WhitePoint) -> ArrayFloat:
    return transform.apply_raw(values, white_point)
