"""Solve ``K = rotate(multiply(screen(E, M), O)) + X`` for X.

Every function on the right-hand side is pure and all of its arguments are
known, so the blend/rotate chain evaluates to a constant color F and the
equation reduces to ``X = K - F``: one forward pass and one subtraction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from colorsolve.channels import multiply, screen, subtract
from colorsolve.codec import decode_hex, encode_hex
from colorsolve.hue import rotate_rgb
from colorsolve.types import DEFAULT_DEGREES, RGBColor, SolveConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Intermediate colors of the solve, ending with the unknown X."""

    screened: RGBColor  # screen(E, M)
    multiplied: RGBColor  # multiply(screened, O)
    offset: RGBColor  # F = rotate(multiplied)
    unknown: RGBColor  # X = K - F, unclamped

    @property
    def in_range(self) -> bool:
        """Whether every channel of X already lies in 0-255."""
        return all(0 <= v <= 255 for v in (self.unknown.r, self.unknown.g, self.unknown.b))

    @property
    def hex(self) -> str:
        """X as ``#rrggbb``, clamped to the displayable range."""
        return encode_hex(self.unknown)


def solve(
    target: RGBColor,
    e: RGBColor,
    m: RGBColor,
    o: RGBColor,
    *,
    degrees: float = DEFAULT_DEGREES,
) -> Solution:
    """Recover X from ``target = rotate(multiply(screen(e, m), o), degrees) + X``.

    Examples
    --------
    >>> solve(RGBColor(0, 169, 145), RGBColor(107, 105, 119), RGBColor(105, 46, 99), RGBColor(111, 109, 0)).hex
    '#00625a'
    """
    screened = screen(e, m)
    logger.debug("screen(%s, %s) = %s", e.hex, m.hex, screened.hex)
    multiplied = multiply(screened, o)
    logger.debug("multiply(%s, %s) = %s", screened.hex, o.hex, multiplied.hex)
    offset = rotate_rgb(multiplied, degrees)
    logger.debug("rotate(%s, %s) = %s", multiplied.hex, degrees, offset.hex)
    unknown = subtract(target, offset)
    logger.debug("%s - %s = %s", target.hex, offset.hex, unknown)
    return Solution(screened=screened, multiplied=multiplied, offset=offset, unknown=unknown)


def solve_config(config: SolveConfig) -> Solution:
    """Decode the hex strings of *config* and :func:`solve`."""
    target = decode_hex(config.target)
    e, m, o = (decode_hex(h) for h in config.inputs)
    return solve(target, e, m, o, degrees=config.degrees)
