"""Direct and iterative solvers for systems of linear equations."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum

from numlab.linalg import (
    Column,
    converge,
    determinant,
    diagonal_predominant,
    has_zeros_diagonal,
)

DEFAULT_EPSILON = 1e-4

_ZERO_PIVOT_MESSAGE = "A zero pivot was met, the system cannot be solved."


class Method(IntEnum):
    """Solution methods, in the order they are offered."""

    GAUSS = 0
    KRAMER = 1
    SEIDEL = 2
    SIMPLE_ITERATION = 3
    UPPER_RELAXATION = 4
    LU_DECOMPOSITION = 5


_METHOD_NAMES = {
    Method.GAUSS: "Gauss method",
    Method.KRAMER: "Kramer method",
    Method.SEIDEL: "Seidel method",
    Method.SIMPLE_ITERATION: "Simple iteration method",
    Method.UPPER_RELAXATION: "Upper relaxation method",
    Method.LU_DECOMPOSITION: "LU-decomposition method",
}


class SolverError(RuntimeError):
    """Raised when a method cannot be applied to the given system."""


class LESystemSolver(ABC):
    """Solver of ``A x = b``."""

    @abstractmethod
    def solve(
        self,
        a: Sequence[Sequence[float]],
        b: Sequence[float],
        x: Sequence[float] | None = None,
        epsilon: float = DEFAULT_EPSILON,
    ) -> Column:
        """Solve the system; ``x`` and ``epsilon`` matter to iterative methods only."""

    @abstractmethod
    def need_approximation(self) -> bool:
        """Whether the method needs a first approximation."""


class GaussMethodSolver(LESystemSolver):
    """Gaussian elimination without row permutation."""

    def solve(self, a, b, x=None, epsilon=DEFAULT_EPSILON):
        if has_zeros_diagonal(a):
            raise SolverError(
                "Matrix has at least 1 zero on diagonal, the permutation of rows "
                "can be used to deal with it but it is not implemented yet."
            )
        matrix = [[float(value) for value in row] for row in a]
        rhs = [float(value) for value in b]
        n = len(rhs)
        try:
            for j in range(n):
                pivot_row = matrix[j]
                for i in range(j + 1, n):
                    row = matrix[i]
                    alfa = row[j] / pivot_row[j]
                    for k in range(j, n):
                        row[k] -= alfa * pivot_row[k]
                    rhs[i] -= alfa * rhs[j]
            result = [0.0] * n
            for i in reversed(range(n)):
                row = matrix[i]
                total = sum(row[j] * result[j] for j in range(i + 1, n))
                result[i] = (rhs[i] - total) / row[i]
        except ZeroDivisionError as exc:
            raise SolverError(_ZERO_PIVOT_MESSAGE) from exc
        return result

    def need_approximation(self) -> bool:
        return False


class KramerMethodSolver(LESystemSolver):
    """Cramer's rule."""

    def solve(self, a, b, x=None, epsilon=DEFAULT_EPSILON):
        det = determinant(a)
        if det == 0:
            raise SolverError("Matrix determinant equals to zero.")
        result = []
        for i in range(len(a)):
            replaced = [
                [b[row_index] if j == i else value for j, value in enumerate(row)]
                for row_index, row in enumerate(a)
            ]
            result.append(determinant(replaced) / det)
        return result

    def need_approximation(self) -> bool:
        return False


class LUDecompositionMethodSolver(LESystemSolver):
    """LU decomposition followed by forward and back substitution."""

    def solve(self, a, b, x=None, epsilon=DEFAULT_EPSILON):
        if a[0][0] == 0:
            raise SolverError(
                "The upper-left element is zero, but nothing cannot be divided by zero."
            )
        size = len(a)
        lower = [[0.0] * size for _ in range(size)]
        upper = [[0.0] * size for _ in range(size)]
        try:
            upper[0] = [float(value) for value in a[0]]
            for i in range(size):
                lower[i][0] = a[i][0] / upper[0][0]
            for i in range(1, size):
                for j in range(i, size):
                    total = sum(lower[i][k] * upper[k][j] for k in range(i))
                    upper[i][j] = a[i][j] - total
                for j in range(i, size):
                    total = sum(lower[j][k] * upper[k][i] for k in range(i))
                    lower[j][i] = (a[j][i] - total) / upper[i][i]

            y = [0.0] * size
            for i in range(size):
                y[i] = b[i] - sum(lower[i][j] * y[j] for j in range(i))

            result = [0.0] * size
            for i in reversed(range(size)):
                total = sum(upper[i][j] * result[j] for j in range(i + 1, size))
                result[i] = (y[i] - total) / upper[i][i]
        except ZeroDivisionError as exc:
            raise SolverError(_ZERO_PIVOT_MESSAGE) from exc
        return result

    def need_approximation(self) -> bool:
        return False


class _IterativeSolver(LESystemSolver):
    """Common loop of the iterative methods."""

    def solve(self, a, b, x=None, epsilon=DEFAULT_EPSILON):
        if has_zeros_diagonal(a):
            raise SolverError("Matrix has at least 1 zero on diagonal.")
        if not diagonal_predominant(a):
            raise SolverError("Matrix is not diagonal-predominant.")
        if x is None:
            current = [0.0] * len(b)
        else:
            if len(x) != len(b):
                raise ValueError("First approximation must have as many values as b.")
            current = [float(value) for value in x]
        self._prepare()
        while True:
            previous = current
            current = self._sweep(a, b, previous)
            if converge(current, previous, epsilon):
                return current

    def _prepare(self) -> None:
        """Hook run once before the iterations start."""

    @abstractmethod
    def _sweep(self, a, b, previous: Column) -> Column:
        """One iteration, returning the next approximation."""

    def need_approximation(self) -> bool:
        return True


class SeidelMethodSolver(_IterativeSolver):
    """Gauss-Seidel iteration."""

    def _sweep(self, a, b, previous):
        current = list(previous)
        size = len(a)
        for i in range(size):
            row = a[i]
            var = sum(row[j] * current[j] for j in range(i))
            var += sum(row[j] * previous[j] for j in range(i + 1, size))
            current[i] = (b[i] - var) / row[i]
        return current


class SimpleIterationMethodSolver(_IterativeSolver):
    """Jacobi (simple) iteration."""

    def _sweep(self, a, b, previous):
        current = list(previous)
        for i in range(len(b)):
            row = a[i]
            var = sum(row[j] * previous[j] for j in range(len(b)) if j != i)
            current[i] = (b[i] - var) / row[i]
        return current


class UpperRelaxationMethodSolver(_IterativeSolver):
    """Successive over-relaxation with a random factor in (1, 2)."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._coef = 1.0

    def _prepare(self) -> None:
        self._coef = self._rng.uniform(1.0001, 1.9999)

    def _sweep(self, a, b, previous):
        coef = self._coef
        current = list(previous)
        size = len(a)
        for i in range(size):
            row = a[i]
            var = sum(row[j] * current[j] for j in range(i))
            var += sum(row[j] * previous[j] for j in range(i + 1, size))
            current[i] = (b[i] - var) * coef / row[i] - previous[i] * (coef - 1)
        return current


_SOLVER_TYPES: dict[Method, type[LESystemSolver]] = {
    Method.GAUSS: GaussMethodSolver,
    Method.KRAMER: KramerMethodSolver,
    Method.SEIDEL: SeidelMethodSolver,
    Method.SIMPLE_ITERATION: SimpleIterationMethodSolver,
    Method.UPPER_RELAXATION: UpperRelaxationMethodSolver,
    Method.LU_DECOMPOSITION: LUDecompositionMethodSolver,
}


def method_name(method: int) -> str:
    """Human-readable name of a method."""
    try:
        return _METHOD_NAMES[Method(method)]
    except ValueError:
        return "Unknown method"


def solver_for(method: int) -> LESystemSolver:
    """A new solver for ``method``; raises ValueError for an unknown method."""
    return _SOLVER_TYPES[Method(method)]()