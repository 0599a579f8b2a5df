"""Recover an unknown color from a chain of blend and hue-rotation operations."""

import logging

from colorsolve.codec import decode_hex, encode_hex, hsl_to_rgb, rgb_to_hsl
from colorsolve.solver import Solution, solve, solve_config
from colorsolve.types import BlendMode, HSLColor, RGBColor, SolveConfig

__all__ = [
    "BlendMode",
    "HSLColor",
    "RGBColor",
    "Solution",
    "SolveConfig",
    "configure_logging",
    "decode_hex",
    "encode_hex",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "solve",
    "solve_config",
]


def configure_logging(*, verbose: bool = False, debug: bool = False) -> None:
    """Enable console logging for the colorsolve package."""
    pkg_logger = logging.getLogger("colorsolve")
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        pkg_logger.addHandler(handler)
    if debug:
        pkg_logger.setLevel(logging.DEBUG)
    elif verbose:
        pkg_logger.setLevel(logging.INFO)
    else:
        pkg_logger.setLevel(logging.WARNING)
