"""Tabulating Runge-Kutta results and comparing them with the exact solution."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from numlab.rungekutta import (
    AccurateSolution,
    RKMethodSolver,
    RKStep,
    SampleAccurateSolution,
    SampleEquationSystem,
)
from numlab.systemtables import Orientation

_COLUMN_NAMES = ("x", "y", "z", "t")


class RKSolutionTable:
    """One row per step holding x, y, z and t."""

    def __init__(self, solutions: Iterable[Sequence[float]]) -> None:
        self._solutions = [tuple(step) for step in solutions]

    def row_count(self) -> int:
        return len(self._solutions)

    def column_count(self) -> int:
        return len(_COLUMN_NAMES)

    def value(self, row: int, column: int) -> float:
        return self._solutions[row][column]

    def header(self, section: int, orientation: Orientation) -> int | str:
        if orientation is Orientation.VERTICAL:
            return section + 1
        if 0 <= section < len(_COLUMN_NAMES):
            return _COLUMN_NAMES[section]
        return ".."


class ComparisonRow(NamedTuple):
    """Approximate and exact values at one time point."""

    t: float
    x: float
    y: float
    z: float
    x_exact: float
    y_exact: float
    z_exact: float

    @property
    def error(self) -> float:
        """Largest absolute difference between approximate and exact values."""
        return max(
            abs(self.x - self.x_exact),
            abs(self.y - self.y_exact),
            abs(self.z - self.z_exact),
        )


def compare_with_accurate(
    approx: Iterable[RKStep], accurate: AccurateSolution
) -> list[ComparisonRow]:
    """Pair every approximate step with the exact solution at its time."""
    return [
        ComparisonRow(
            step.t,
            step.x,
            step.y,
            step.z,
            accurate.f1(step.t),
            accurate.f2(step.t),
            accurate.f3(step.t),
        )
        for step in approx
    ]


def _plain_formula(formula: str) -> str:
    return re.sub(r"<sup>(.*?)</sup>", r"^\1", formula)


def _parser() -> argparse.ArgumentParser:
    system = SampleEquationSystem()
    parser = argparse.ArgumentParser(
        prog="numlab-rungekutta",
        description=(
            "Solve x' = {}, y' = {}, z' = {} with the fourth-order "
            "Runge-Kutta method.".format(system.f1_str, system.f2_str, system.f3_str)
        ),
    )
    parser.add_argument("a", type=float, help="start of the segment")
    parser.add_argument("b", type=float, help="end of the segment")
    parser.add_argument("n", type=int, help="number of steps")
    parser.add_argument("x0", type=float, help="initial x")
    parser.add_argument("y0", type=float, help="initial y")
    parser.add_argument("z0", type=float, help="initial z")
    parser.add_argument(
        "--compare", action="store_true", help="also print the exact solution"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    init_conditions = (args.x0, args.y0, args.z0)
    solver = RKMethodSolver(SampleEquationSystem())
    try:
        approx = solver.solve(args.a, args.b, args.n, init_conditions)
    except ValueError as exc:
        print(f"Computation error: {exc}", file=sys.stderr)
        return 1

    accurate = SampleAccurateSolution(args.a, init_conditions)
    table = RKSolutionTable(approx)
    header = [""] + [
        str(table.header(column, Orientation.HORIZONTAL))
        for column in range(table.column_count())
    ]
    if args.compare:
        header += ["x exact", "y exact", "z exact"]
    print("\t".join(header))
    comparison = compare_with_accurate(approx, accurate)
    for row in range(table.row_count()):
        cells = [str(table.header(row, Orientation.VERTICAL))]
        cells += [f"{table.value(row, column):g}" for column in range(table.column_count())]
        if args.compare:
            exact = comparison[row]
            cells += [f"{exact.x_exact:g}", f"{exact.y_exact:g}", f"{exact.z_exact:g}"]
        print("\t".join(cells))
    if args.compare:
        print(f"x = {_plain_formula(accurate.f1_str)}")
        print(f"y = {_plain_formula(accurate.f2_str)}")
        print(f"z = {_plain_formula(accurate.f3_str)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())