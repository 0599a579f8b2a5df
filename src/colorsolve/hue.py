"""Hue rotation."""

from __future__ import annotations

from dataclasses import replace

from colorsolve.codec import hsl_to_rgb, rgb_to_hsl
from colorsolve.types import HSLColor, RGBColor


def rotate(color: HSLColor, degrees: float) -> HSLColor:
    """Turn the hue by *degrees*, wrapping into ``[0, 360)``.

    Successive rotations compose exactly only for integer degrees; fractional
    angles pick up float error.
    """
    if color.hue is None:
        return color
    return replace(color, hue=(color.hue + degrees) % 360)


def rotate_rgb(color: RGBColor, degrees: float) -> RGBColor:
    """Rotate the hue of an RGB color by a round trip through HSL.

    Lossy: HSL components are rounded to integers on the way.

    Examples
    --------
    >>> rotate_rgb(RGBColor(73, 56, 0), 120)
    RGBColor(r=0, g=71, b=55)
    """
    return hsl_to_rgb(rotate(rgb_to_hsl(color), degrees))
