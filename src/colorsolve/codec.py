"""Conversions between hex strings, RGB and HSL."""

from __future__ import annotations

import logging
import math
import re

from colorsolve.channels import clamp_color
from colorsolve.errors import FormatError
from colorsolve.types import HSLColor, RGBColor
from colorsolve.utils import round_half_up

logger = logging.getLogger(__name__)

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")

# (red, green, blue) as picks from (chroma, second component, zero), one row per 60 degree sector
_SECTORS = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
)


# ---------------------------------------------------------------------------
# Hex
# ---------------------------------------------------------------------------


def decode_hex(hex_str: str) -> RGBColor:
    """Parse the first three 2-digit hex groups of *hex_str*.

    Anything that is not a hex pair (``#``, whitespace) is skipped.

    Examples
    --------
    >>> decode_hex("#00a991")
    RGBColor(r=0, g=169, b=145)
    """
    pairs = _HEX_PAIR.findall(hex_str)
    if len(pairs) < 3:
        raise FormatError(f"Expected three 2-digit hex groups, got {hex_str!r}")
    r, g, b = (int(p, 16) for p in pairs[:3])
    return RGBColor(r, g, b)


def encode_hex(color: RGBColor) -> str:
    """Render as ``#rrggbb``, clamping and rounding channels first."""
    clamped = clamp_color(color)
    r, g, b = (int(v) for v in round_half_up(clamped.as_array()))
    return RGBColor(r, g, b).hex


def colors_from_bytes(data: bytes) -> list[RGBColor]:
    """Cut *data* into consecutive 3-byte triplets, one color per triplet.

    Examples
    --------
    >>> [c.hex for c in colors_from_bytes(b"kiwi.com\\x00")]
    ['#6b6977', '#692e63', '#6f6d00']
    """
    if not data or len(data) % 3:
        raise FormatError(f"Byte string of length {len(data)} does not split into RGB triplets")
    return [RGBColor(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3)]


def colors_from_text(text: str) -> list[RGBColor]:
    """Colors from the UTF-8 bytes of *text* plus a NUL terminator."""
    data = text.encode() + b"\x00"
    logger.debug("Bytes of %r: %s", text, data.hex(" "))
    return colors_from_bytes(data)


# ---------------------------------------------------------------------------
# HSL
# ---------------------------------------------------------------------------


def rgb_to_hsl(color: RGBColor) -> HSLColor:
    """Convert to HSL with integer hue (degrees), saturation and lightness (percent).

    Examples
    --------
    >>> rgb_to_hsl(RGBColor(73, 56, 0))
    HSLColor(hue=46, saturation=100, lightness=14)
    """
    r, g, b = color.r / 255, color.g / 255, color.b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2

    if hi == lo:
        hue = saturation = 0.0
    else:
        d = hi - lo
        saturation = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)
        if hi == r:
            hue = (g - b) / d
        elif hi == g:
            hue = 2 + (b - r) / d
        else:
            hue = 4 + (r - g) / d
        hue *= 60
        if hue < 0:
            hue += 360

    h, s, light = (int(v) for v in round_half_up([hue, saturation * 100, lightness * 100]))
    # 359.5 and above rounds up to a full turn
    return HSLColor(h % 360, s, light)


def hsl_to_rgb(color: HSLColor) -> RGBColor:
    """Convert HSL back to RGB; an undefined hue gives black.

    Examples
    --------
    >>> hsl_to_rgb(HSLColor(166, 100, 14))
    RGBColor(r=0, g=71, b=55)
    """
    if color.hue is None:
        return RGBColor(0, 0, 0)

    saturation = color.saturation / 100
    lightness = color.lightness / 100

    chroma = (1 - abs(2 * lightness - 1)) * saturation
    hue_prime = color.hue / 60
    second = chroma * (1 - abs(hue_prime % 2 - 1))

    components = (chroma, second, 0.0)
    sector = _SECTORS[math.floor(hue_prime) % 6]
    m = lightness - chroma / 2
    r, g, b = (int(v) for v in round_half_up([(components[i] + m) * 255 for i in sector]))
    return RGBColor(r, g, b)
