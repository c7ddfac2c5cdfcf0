"""Solving a linear system with one chosen method or with all of them."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from numlab.linalg import determinant
from numlab.solvers import (
    DEFAULT_EPSILON,
    LESystemSolver,
    Method,
    SolverError,
    method_name,
    solver_for,
)
from numlab.systemtables import Orientation, Solution, SolutionTable

MIN_EQUATIONS = 2
MAX_EQUATIONS = 16

_METHOD_CHOICES = {method.name.lower().replace("_", "-"): method for method in Method}


@dataclass
class AllMethodsReport:
    """Outcome of running every method on one system."""

    solutions: list[Solution] = field(default_factory=list)
    fastest_method: Method = Method.GAUSS
    errors: dict[Method, str] = field(default_factory=dict)

    @property
    def fastest_message(self) -> str:
        return f"The fastest method is {method_name(self.fastest_method)}."

    @property
    def error_message(self) -> str | None:
        """Summary of the methods that failed, or None if all succeeded."""
        if not self.errors:
            return None
        lines = "".join(
            f"{method_name(method)}: {message}\n" for method, message in self.errors.items()
        )
        return "Some methods were not executed.\n\n" + lines


def _check_system(matrix: Sequence[Sequence[float]]) -> None:
    if determinant(matrix) == 0:
        raise SolverError("Matrix determinant equals to zero.")


def _timed_solve(
    solver: LESystemSolver,
    matrix: Sequence[Sequence[float]],
    b: Sequence[float],
    approximation: Sequence[float],
    epsilon: float,
) -> tuple[list[float], float]:
    start = time.perf_counter()
    result = solver.solve(matrix, b, approximation, epsilon)
    return result, time.perf_counter() - start


def _starting_point(
    b: Sequence[float], approximation: Sequence[float] | None
) -> list[float]:
    return list(b) if approximation is None else list(approximation)


def solve_with_method(
    matrix: Sequence[Sequence[float]],
    b: Sequence[float],
    method: int,
    approximation: Sequence[float] | None = None,
    epsilon: float = DEFAULT_EPSILON,
) -> Solution:
    """Solve with one method, timing it.

    The first approximation defaults to ``b``. Raises SolverError for a
    singular matrix or when the method cannot be applied.
    """
    _check_system(matrix)
    method = Method(method)
    solver = solver_for(method)
    try:
        result, duration = _timed_solve(
            solver, matrix, b, _starting_point(b, approximation), epsilon
        )
    except SolverError as exc:
        raise SolverError(f"{method_name(method)} cannot be executed. {exc}") from exc
    return Solution(method, result, duration)


def solve_with_all_methods(
    matrix: Sequence[Sequence[float]],
    b: Sequence[float],
    approximation: Sequence[float] | None = None,
    epsilon: float = DEFAULT_EPSILON,
) -> AllMethodsReport:
    """Run every method, collecting solutions, failures and the fastest method."""
    _check_system(matrix)
    start_point = _starting_point(b, approximation)
    report = AllMethodsReport()
    fastest = float("inf")
    for method in Method:
        try:
            result, duration = _timed_solve(
                solver_for(method), matrix, b, start_point, epsilon
            )
        except SolverError as exc:
            report.errors[method] = str(exc)
            continue
        if duration < fastest:
            fastest = duration
            report.fastest_method = method
        report.solutions.append(Solution(method, result, duration))
    return report


def _read_system(text: str) -> tuple[list[list[float]], list[float]]:
    rows = [line.split() for line in text.splitlines() if line.strip()]
    count = len(rows)
    if not MIN_EQUATIONS <= count <= MAX_EQUATIONS:
        raise ValueError(
            f"The number of equations must be from {MIN_EQUATIONS} to {MAX_EQUATIONS}."
        )
    matrix: list[list[float]] = []
    column: list[float] = []
    for number, row in enumerate(rows, start=1):
        if len(row) != count + 1:
            raise ValueError(
                f"Equation {number} must have {count + 1} numbers, got {len(row)}."
            )
        try:
            values = [float(item) for item in row]
        except ValueError as exc:
            raise ValueError(f"Equation {number} holds a value that is not a number.") from exc
        matrix.append(values[:-1])
        column.append(values[-1])
    return matrix, column


def _format_table(table: SolutionTable) -> str:
    header = [""] + [
        table.header(section, Orientation.HORIZONTAL)
        for section in range(table.column_count())
    ]
    lines = ["\t".join(header)]
    for row in range(table.row_count()):
        cells = [table.header(row, Orientation.VERTICAL)]
        cells += [f"{table.value(row, column):g}" for column in range(table.column_count())]
        lines.append("\t".join(cells))
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlab-systems",
        description="Solve a system of linear equations. Each line of the input "
        "holds the coefficients of one equation followed by its right-hand side.",
    )
    parser.add_argument("path", help="file with the system, or - for standard input")
    choice = parser.add_mutually_exclusive_group()
    choice.add_argument(
        "--method", choices=sorted(_METHOD_CHOICES), default="gauss", help="method to use"
    )
    choice.add_argument("--all", action="store_true", help="run every method")
    parser.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON)
    parser.add_argument(
        "--approximation",
        type=float,
        nargs="+",
        help="first approximation for iterative methods (defaults to b)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        if args.path == "-":
            text = sys.stdin.read()
        else:
            with open(args.path, encoding="utf-8") as handle:
                text = handle.read()
        matrix, column = _read_system(text)
        if args.approximation is not None and len(args.approximation) != len(column):
            raise ValueError("First approximation must have as many values as b.")
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        if args.all:
            report = solve_with_all_methods(matrix, column, args.approximation, args.epsilon)
        else:
            solution = solve_with_method(
                matrix, column, _METHOD_CHOICES[args.method], args.approximation, args.epsilon
            )
    except SolverError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.all:
        if report.solutions:
            print(_format_table(SolutionTable(report.solutions)))
            print(report.fastest_message)
        if report.error_message is not None:
            print(report.error_message, file=sys.stderr, end="")
        return 0 if report.solutions else 1
    print(_format_table(SolutionTable([solution])))
    return 0


if __name__ == "__main__":
    sys.exit(main())