"""Command that runs the rod heating computation and prints the profiles."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from numlab.heating import Computation


class InvalidParametersError(ValueError):
    """Raised when a length, time or step size is not positive."""

    def __init__(self) -> None:
        super().__init__(
            "All these values must be greater than zero: rod length (L), "
            "heating time (T), x step size, t step size."
        )


def validate_parameters(t: float, l: float, step_t: float, step_l: float) -> None:
    """Raise InvalidParametersError unless every value exceeds machine epsilon."""
    if any(value < sys.float_info.epsilon for value in (t, l, step_t, step_l)):
        raise InvalidParametersError()


def format_duration(seconds: float) -> str:
    """Duration with four significant digits."""
    return f"{seconds:.4g} s."


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlab-heating", description="Compute the heating of a rod."
    )
    parser.add_argument("--time", "-T", dest="t", type=float, required=True, help="heating time T")
    parser.add_argument("--length", "-L", dest="l", type=float, required=True, help="rod length L")
    parser.add_argument("--step-t", type=float, required=True, help="time step size")
    parser.add_argument("--step-x", type=float, required=True, help="space step size")
    for name in ("b0", "b1", "b2", "phi1", "phi2"):
        parser.add_argument(f"--{name}", type=float, default=0.0)
    parser.add_argument(
        "--normalized", action="store_true", help="also print the normalised solution"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        validate_parameters(args.t, args.l, args.step_t, args.step_x)
        computation = Computation(
            args.b0, args.b1, args.b2, args.phi1, args.phi2,
            args.t, args.l, args.step_t, args.step_x,
        )
    except ValueError as exc:
        print(f"Invalid parameters: {exc}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    result = computation.run()
    elapsed = time.perf_counter() - start

    header = ["x", "phi", "u"]
    if args.normalized:
        header.append("u normalized")
    print("\t".join(header))
    for i, x in enumerate(result.x):
        cells = [x, result.phi[i], result.grid[i]]
        if args.normalized:
            cells.append(result.grid_a[i])
        print("\t".join(f"{value:g}" for value in cells))
    print(f"Computation time: {format_duration(elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())