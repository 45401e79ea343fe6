# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Regenerates ``tint_matrices.py`` from the runtime matrix derivation.

Usage:
    python -m tools.generate_matrices            # rewrite tint_matrices.py
    python -m tools.generate_matrices --check    # exit 1 if it is stale
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from tint_colorspace import ALL_COLOR_SPACES, ColorSpace, RgbPrimaries, WhitePoint
from tint_conversion import derive_linear_matrix

logger = logging.getLogger(__name__)

# Distinct (primaries, white) bases of the built-in linear spaces, in
# emission order.
WORKING_SPACES: Tuple[Tuple[RgbPrimaries, WhitePoint], ...] = tuple(
    dict.fromkeys(
        (space.primaries, space.white_point) for space in ALL_COLOR_SPACES if space.is_linear()
    )
)

# Decimal places per entry; fixed-point text is stable across LAPACK builds.
DECIMALS = 10

_NUMBER = re.compile(r"-?\d+\.\d+")

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "tint_matrices.py"

_HEADER = '''\
# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Precomputed linear conversion matrices.

GENERATED by ``python -m tools.generate_matrices``. Do not edit by hand.

Each constant is a row-major 3x3 matrix for column vectors, derived with the
runtime RGB<->XYZ builder and the sharpened-cone chromatic adaptation for
every ordered pair of built-in linear bases, rounded to 10 decimal places.
"""

from typing import Final, Optional, Tuple

import numpy as np

from tint_colorspace import RgbPrimaries, WhitePoint
from tint_config import ArrayFloat

__all__ = ["const_conversion_matrix"]

'''

_FOOTER = '''\
)


def _freeze(values: Tuple[float, ...]) -> ArrayFloat:
    matrix = np.array(values, dtype=np.float64).reshape(3, 3)
    matrix.setflags(write=False)
    return matrix


_TABLE: Final[dict[_Key, ArrayFloat]] = {key: _freeze(values) for key, values in _ENTRIES}
_IDENTITY: Final[ArrayFloat] = _freeze((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))


def const_conversion_matrix(
    src_primaries: RgbPrimaries,
    src_wp: WhitePoint,
    dst_primaries: RgbPrimaries,
    dst_wp: WhitePoint,
) -> Optional[ArrayFloat]:
    """
    Looks up a precomputed src -> dst matrix.

    Returns:
        Read-only float64 (3, 3) matrix, the identity when source and
        destination bases match, or None if the pair is not tabulated.
    """
    if src_primaries is dst_primaries and src_wp is dst_wp:
        return _IDENTITY
    return _TABLE.get((src_primaries, src_wp, dst_primaries, dst_wp))
'''


def format_entry(value: float) -> str:
    """Fixed-point text of one entry; negative zero is written as zero."""
    return f"{round(value, DECIMALS) + 0.0:.{DECIMALS}f}"


def constant_name(src: Tuple[RgbPrimaries, WhitePoint], dst: Tuple[RgbPrimaries, WhitePoint]) -> str:
    """``BT709_D65_TO_AP1_D60`` style identifier for a table entry."""
    return f"{src[0].name}_{src[1].name}_TO_{dst[0].name}_{dst[1].name}"


def table_pairs() -> List[Tuple[Tuple[RgbPrimaries, WhitePoint], Tuple[RgbPrimaries, WhitePoint]]]:
    """Every ordered pair of distinct working spaces."""
    return [(src, dst) for src in WORKING_SPACES for dst in WORKING_SPACES if src != dst]


def render_module() -> str:
    """Returns the full source text of ``tint_matrices.py``."""
    pairs = table_pairs()
    parts = [_HEADER]

    for src, dst in pairs:
        matrix = derive_linear_matrix(ColorSpace(*src), ColorSpace(*dst))
        rows = [", ".join(format_entry(float(v)) for v in row) for row in matrix]
        parts.append(f"{constant_name(src, dst)}: Final[Tuple[float, ...]] = (\n")
        parts.append(f"    {rows[0]},\n    {rows[1]},\n    {rows[2]},\n)\n")

    parts.append("\n_Key = Tuple[RgbPrimaries, WhitePoint, RgbPrimaries, WhitePoint]\n\n")
    parts.append("_ENTRIES: Final[Tuple[Tuple[_Key, Tuple[float, ...]], ...]] = (\n")
    for src, dst in pairs:
        parts.append(
            f"    ((RgbPrimaries.{src[0].name}, WhitePoint.{src[1].name}, "
            f"RgbPrimaries.{dst[0].name}, WhitePoint.{dst[1].name}), "
            f"{constant_name(src, dst)}),\n"
        )
    parts.append(_FOOTER)
    return "".join(parts)


def is_current(current: str, rendered: str) -> bool:
    """
    True if *current* has the layout of *rendered* and every entry lies within
    one unit of the last written decimal of it.
    """
    if _NUMBER.sub("#", current) != _NUMBER.sub("#", rendered):
        return False
    tolerance = 1.5 * 10.0 ** -DECIMALS
    return all(
        abs(float(a) - float(b)) <= tolerance
        for a, b in zip(_NUMBER.findall(current), _NUMBER.findall(rendered))
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Regenerate the precomputed matrix table.")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument("--check", action="store_true",
                        help="Do not write; fail if the output is out of date.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    text = render_module()

    if args.check:
        current = args.output.read_text(encoding="utf-8") if args.output.exists() else ""
        if not is_current(current, text):
            logger.error("%s is out of date", args.output)
            return 1
        logger.info("%s is up to date", args.output)
        return 0

    args.output.write_text(text, encoding="utf-8")
    logger.info("Wrote %d matrices to %s", len(table_pairs()), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
