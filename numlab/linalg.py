"""Column and matrix helpers for linear equation systems."""

from __future__ import annotations

import math
from collections.abc import Sequence

Column = list[float]
Matrix = list[list[float]]


def add_columns(left: Sequence[float], right: Sequence[float]) -> Column:
    """Element-wise sum of two columns of equal length."""
    if len(left) != len(right):
        raise ValueError("Column sum cannot be calculated.")
    return [lv + rv for lv, rv in zip(left, right)]


def subtract_columns(left: Sequence[float], right: Sequence[float]) -> Column:
    """Element-wise difference of two columns of equal length."""
    if len(left) != len(right):
        raise ValueError("Column subtraction cannot be calculated.")
    return [lv - rv for lv, rv in zip(left, right)]


def scale_column(factor: float, column: Sequence[float]) -> Column:
    """Column multiplied by a scalar."""
    return [value * factor for value in column]


def multiply_matrix_column(matrix: Sequence[Sequence[float]], column: Sequence[float]) -> Column:
    """Product of a square matrix and a column, sized by the column."""
    size = len(column)
    return [sum(row[j] * column[j] for j in range(size)) for row in matrix[:size]]


def converge(xk: Sequence[float], xkp: Sequence[float], epsilon: float) -> bool:
    """Whether the Euclidean distance between two iterates is below ``epsilon``."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(xk, xkp))) < epsilon


def diagonal_predominant(a: Sequence[Sequence[float]]) -> bool:
    """Whether every off-diagonal row sum of magnitudes is at most the diagonal entry."""
    for i, row in enumerate(a):
        off_diagonal = sum(abs(value) for value in row) - abs(row[i])
        if off_diagonal > row[i]:
            return False
    return True


def has_zeros_diagonal(a: Sequence[Sequence[float]]) -> bool:
    """Whether any diagonal entry is zero."""
    return any(row[i] == 0 for i, row in enumerate(a))


def determinant(a: Sequence[Sequence[float]]) -> float:
    """Determinant by cofactor expansion along the first row."""
    size = len(a)
    if size == 1:
        return a[0][0]
    if size == 2:
        return a[0][0] * a[1][1] - a[1][0] * a[0][1]
    det = 0.0
    for i, pivot in enumerate(a[0]):
        minor = [list(row[:i]) + list(row[i + 1:]) for row in a[1:]]
        sign = 1.0 if i % 2 == 0 else -1.0
        det += sign * pivot * determinant(minor)
    return det


def second_vector_norm(v: Sequence[float]) -> float:
    """Euclidean norm of a column."""
    return math.sqrt(sum(value**2 for value in v))