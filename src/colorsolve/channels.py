"""Channel-wise color math: clamping, blending and subtraction."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

import numpy as np

from colorsolve.errors import UnknownModeError
from colorsolve.types import BlendMode, RGBColor
from colorsolve.utils import round_half_up


def clamp(value: float, low: float, high: float) -> float:
    """Restrict *value* to ``[low, high]``."""
    return min(max(value, low), high)


def clamp_color(color: RGBColor) -> RGBColor:
    """Clamp every channel to 0-255."""
    return RGBColor(clamp(color.r, 0, 255), clamp(color.g, 0, 255), clamp(color.b, 0, 255))


# ---------------------------------------------------------------------------
# Blending
# ---------------------------------------------------------------------------


def _screen(b: np.ndarray, s: np.ndarray) -> np.ndarray:
    return b + s - (b * s)


def _multiply(b: np.ndarray, s: np.ndarray) -> np.ndarray:
    return b * s


_BLEND_FUNCS: dict[BlendMode, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    BlendMode.SCREEN: _screen,
    BlendMode.MULTIPLY: _multiply,
}


def blend(backdrop: RGBColor, source: RGBColor, mode: BlendMode | str) -> RGBColor:
    """Blend *source* onto *backdrop* with a separable blend *mode*.

    Both colors are clamped, normalised to 0-1, combined channel by channel and
    scaled back to 0-255. Both supported modes are symmetric in their operands.

    Examples
    --------
    >>> blend(RGBColor(107, 105, 119), RGBColor(105, 46, 99), "screen")
    RGBColor(r=168, g=132, b=172)
    """
    try:
        func = _BLEND_FUNCS[BlendMode(mode)]
    except ValueError:
        msg = f"Unknown blend mode: {mode!r}. Available: {', '.join(m.value for m in BlendMode)}"
        raise UnknownModeError(msg) from None

    b = clamp_color(backdrop).as_array() / 255
    s = clamp_color(source).as_array() / 255
    r, g, bl = (int(v) for v in round_half_up(func(b, s) * 255))
    return RGBColor(r, g, bl)


screen = partial(blend, mode=BlendMode.SCREEN)
multiply = partial(blend, mode=BlendMode.MULTIPLY)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def subtract(a: RGBColor, b: RGBColor) -> RGBColor:
    """Channel-wise ``a - b``; the result is not clamped."""
    for name, operand in (("a", a), ("b", b)):
        if not isinstance(operand, RGBColor):
            msg = f"subtract() operand {name} must be RGBColor, got {type(operand).__name__}"
            raise TypeError(msg)
    return RGBColor(a.r - b.r, a.g - b.g, a.b - b.b)
