"""Command-line interface for colorsolve."""

from __future__ import annotations

import argparse
import logging
import math
import sys

from colorsolve import configure_logging
from colorsolve.codec import colors_from_text
from colorsolve.errors import ColorError
from colorsolve.solver import solve_config
from colorsolve.types import SolveConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    defaults = SolveConfig()
    p = argparse.ArgumentParser(
        prog="colorsolve",
        description="Solve K = rotate(multiply(screen(E, M), O)) + X for the color X.",
    )
    p.add_argument(
        "--target",
        default=defaults.target,
        metavar="HEX",
        help=f"Known color K (default: {defaults.target})",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument(
        "--inputs",
        nargs=3,
        metavar=("E", "M", "O"),
        help=f"Hex colors E, M, O (default: {' '.join(defaults.inputs)})",
    )
    src.add_argument("--text", help="Derive E, M, O from the bytes of a NUL-terminated string")
    p.add_argument(
        "--degrees",
        type=float,
        default=defaults.degrees,
        help=f"Hue rotation in degrees (default: {defaults.degrees})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Print intermediate colors")
    p.add_argument("--debug", action="store_true", help="Debug logging")
    return p


def _config_from_args(args: argparse.Namespace) -> SolveConfig:
    if args.text is not None:
        colors = colors_from_text(args.text)
        if len(colors) != 3:
            msg = f"--text must produce exactly 3 colors, got {len(colors)} from {args.text!r}"
            raise ColorError(msg)
        inputs = tuple(c.hex for c in colors)
    elif args.inputs is not None:
        inputs = tuple(args.inputs)
    else:
        inputs = SolveConfig().inputs
    if not math.isfinite(args.degrees):
        msg = f"--degrees must be a finite number, got {args.degrees}"
        raise ColorError(msg)
    return SolveConfig(target=args.target, inputs=inputs, degrees=args.degrees)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, debug=args.debug)

    try:
        config = _config_from_args(args)
        solution = solve_config(config)
    except ColorError as exc:
        parser.error(str(exc))

    logger.info("E, M, O:   %s", " ".join(config.inputs))
    logger.info("screen:    %s", solution.screened.hex)
    logger.info("multiply:  %s", solution.multiplied.hex)
    logger.info("rotate:    %s", solution.offset.hex)
    if not solution.in_range:
        logger.warning("X = %s is outside 0-255, clamping for output", solution.unknown)

    sys.stdout.write(solution.hex + "\n")


if __name__ == "__main__":
    main()
