"""Editable tables for a linear system, a first approximation and solutions."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from numlab.linalg import Column, Matrix
from numlab.solvers import Method


class Orientation(Enum):
    """Header orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class InvalidNumberError(ValueError):
    """Raised when text entered into a cell is not a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f'"{text}" is not a correct number.')
        self.text = text


@dataclass
class Solution:
    """Result of one method: the solution column and the time it took."""

    method: int
    column: Column = field(default_factory=list)
    duration: float = 0.0


def _parse_number(text: object) -> float | None:
    """The number in ``text``, None for empty text; raises for anything else."""
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    string = str(text)
    if not string:
        return None
    stripped = string.strip()
    if stripped and "_" not in stripped:
        try:
            return float(stripped)
        except ValueError:
            pass
    raise InvalidNumberError(string)


class SystemTable:
    """Coefficients of ``A x = b``: one row per equation, ``b`` as the last column."""

    def __init__(self, eq_count: int = 1) -> None:
        self._eq_count = eq_count
        self._matrix: Matrix = [[0.0] * eq_count for _ in range(eq_count)]
        self._column: Column = [0.0] * eq_count

    @property
    def matrix(self) -> Matrix:
        """Copy of the coefficient matrix."""
        return [row[:] for row in self._matrix]

    @property
    def column(self) -> Column:
        """Copy of the right-hand side."""
        return self._column[:]

    def row_count(self) -> int:
        return self._eq_count

    def column_count(self) -> int:
        return self._eq_count + 1

    def value(self, row: int, column: int) -> float:
        if column >= self._eq_count:
            return self._column[row]
        return self._matrix[row][column]

    def set_value(self, row: int, column: int, text: object) -> bool:
        """Store a parsed number; empty text is ignored and gives False."""
        number = _parse_number(text)
        if number is None:
            return False
        if column >= self._eq_count:
            self._column[row] = number
        else:
            self._matrix[row][column] = number
        return True

    def header(self, section: int, orientation: Orientation) -> str:
        if orientation is Orientation.VERTICAL:
            return f"Eq. {section + 1}"
        if section >= self._eq_count:
            return "b"
        return f"X{section + 1}"


class FirstApproximationTable:
    """A single editable row holding the first approximation."""

    def __init__(self, column: Iterable[float]) -> None:
        self._column: Column = [float(value) for value in column]

    @property
    def column(self) -> Column:
        """Copy of the approximation."""
        return self._column[:]

    def row_count(self) -> int:
        return 1

    def column_count(self) -> int:
        return len(self._column)

    def value(self, row: int, column: int) -> float:
        return self._column[column]

    def set_value(self, row: int, column: int, text: object) -> bool:
        """Store a parsed number; empty text is ignored and gives False."""
        number = _parse_number(text)
        if number is None:
            return False
        self._column[column] = number
        return True

    def header(self, section: int, orientation: Orientation) -> str | None:
        if orientation is Orientation.HORIZONTAL:
            return f"x{section + 1}"
        return None


_SHORT_NAMES = {
    Method.GAUSS: "Gauss",
    Method.KRAMER: "Kramer",
    Method.SEIDEL: "Seidel",
    Method.SIMPLE_ITERATION: "Simple iteration",
    Method.UPPER_RELAXATION: "Upper relaxation",
    Method.LU_DECOMPOSITION: "LU-decomp.",
}


class SolutionTable:
    """One column per solution: the unknowns followed by the duration.

    Every solution is padded with zeros or cut to the length of the first.
    """

    def __init__(self, solutions: Iterable[Solution]) -> None:
        solutions = list(solutions)
        if not solutions:
            raise ValueError("At least one solution is required.")
        self._eq_count = len(solutions[0].column)
        self._solutions = [
            dataclasses.replace(
                solution,
                column=(list(solution.column) + [0.0] * self._eq_count)[: self._eq_count],
            )
            for solution in solutions
        ]

    def row_count(self) -> int:
        return self._eq_count + 1

    def column_count(self) -> int:
        return len(self._solutions)

    def value(self, row: int, column: int) -> float:
        solution = self._solutions[column]
        if row >= self._eq_count:
            return solution.duration
        return solution.column[row]

    def header(self, section: int, orientation: Orientation) -> str:
        if orientation is Orientation.VERTICAL:
            if section >= self._eq_count:
                return "Duration"
            return f"X{section + 1}"
        try:
            return _SHORT_NAMES[Method(self._solutions[section].method)]
        except ValueError:
            return "Unknown"