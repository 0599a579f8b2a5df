"""Core types for colorsolve."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

DEFAULT_DEGREES = 120


class BlendMode(Enum):
    """Separable blend operator."""

    SCREEN = "screen"
    MULTIPLY = "multiply"


@dataclass(frozen=True)
class RGBColor:
    """RGB color.

    Channels are integers; they are only guaranteed to be in 0-255 after
    clamping, since subtraction can push them out of range.

    Examples
    --------
    >>> RGBColor(0, 169, 145).hex
    '#00a991'
    """

    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        """CSS hex string (channels must already be in range)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_array(self) -> np.ndarray:
        """Channels as a float vector ``[r, g, b]``."""
        return np.array([self.r, self.g, self.b], dtype=np.float64)


@dataclass(frozen=True)
class HSLColor:
    """HSL color: hue in degrees, saturation and lightness in percent.

    ``hue`` is ``None`` when undefined; such a color converts to black.
    """

    hue: float | None
    saturation: float
    lightness: float


@dataclass
class SolveConfig:
    """Inputs of the color equation ``target = rotate(multiply(screen(e, m), o)) + x``."""

    target: str = "#00a991"  # brand color K
    inputs: tuple[str, str, str] = ("#6b6977", "#692e63", "#6f6d00")  # E, M, O from "kiwi.com\0"
    degrees: float = DEFAULT_DEGREES
