"""Implicit finite-difference scheme for heating of a rod with a nonlocal term."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

# The scheme is defined with this rounded value.
PI = 3.14

ProgressCallback = Callable[[int, int], None]


@dataclass
class ComputationResult:
    """Profiles along the rod at the final time."""

    x: list[float] = field(default_factory=list)
    phi: list[float] = field(default_factory=list)
    grid: list[float] = field(default_factory=list)
    grid_a: list[float] = field(default_factory=list)


class Computation:
    """Heating of a rod of length ``l`` over time ``t``.

    ``grid`` holds the solution with the integral term, ``grid_a`` the one
    without it, normalised so that its integral over the rod is one.
    """

    coeff = 1.0

    def __init__(
        self,
        b0: float,
        b1: float,
        b2: float,
        phi1: float,
        phi2: float,
        t: float,
        l: float,
        step_t: float,
        step_l: float,
    ) -> None:
        if step_t <= 0 or step_l <= 0:
            raise ValueError("Step sizes must be greater than zero.")
        self.b0, self.b1, self.b2 = b0, b1, b2
        self.phi1, self.phi2 = phi1, phi2
        self.t, self.l = t, l
        self.step_t, self.step_l = step_t, step_l
        self.count_t = int(t / step_t) + 1
        self.count_l = int(l / step_l) + 1
        if self.count_t < 1:
            raise ValueError("Heating time must not be negative.")
        if self.count_l < 2:
            raise ValueError("The rod must hold at least two grid points.")

    def _phi(self, x: float) -> float:
        return (
            1.0 / self.l
            + self.phi1 * math.cos(PI * x / self.l)
            + self.phi2 * math.cos(2.0 * PI * x / self.l)
        )

    def _b(self, x: float) -> float:
        return (
            self.b0
            + self.b1 * math.cos(PI * x / self.l)
            + self.b2 * math.cos(2.0 * PI * x / self.l)
        )

    def _simpson(self, values: Sequence[float], weights: Sequence[float] | None = None) -> float:
        if weights is None:
            weights = [1.0] * len(values)
        last = self.count_l - 1
        total = weights[0] * values[0]
        for i in range(1, last):
            if i % 2 == 0:
                total += 2.0 * weights[i + 1] * values[i + 1]
            else:
                total += 4.0 * weights[i] * values[i]
        total += weights[last] * values[last]
        return total * self.step_l / 3.0

    def _tridiagonal(
        self, a: float, b: float, c: float, al: float, c0: float, f: Sequence[float]
    ) -> list[float]:
        size = self.count_l
        alpha = [-c0 / b]
        beta = [f[0] / b]
        for i in range(1, size - 1):
            denom = a * alpha[i - 1] + b
            alpha.append(-c / denom)
            beta.append((f[i] - a * beta[i - 1]) / denom)
        y = [0.0] * size
        y[-1] = (f[-1] - al * beta[-1]) / (al * alpha[-1] + b)
        for i in range(size - 2, -1, -1):
            y[i] = alpha[i] * y[i + 1] + beta[i]
        return y

    def run(self, progress: ProgressCallback | None = None) -> ComputationResult:
        """Carry out the computation, reporting ``(current, total)`` to ``progress``."""

        def report(current: int) -> None:
            if progress is not None:
                progress(current, maximum)

        size = self.count_l
        maximum = 2 * size + self.count_t * (2 * size)
        report(0)
        current = 0

        xs = [i * self.step_l for i in range(size)]
        phi = []
        b = []
        for x in xs:
            phi.append(self._phi(x))
            b.append(self._b(x))
            current += 1
            report(current)

        layer = list(phi)
        layer_a = list(phi)

        r = self.coeff * self.coeff * self.step_t / (self.step_l * self.step_l)
        diag_a, diag_b, diag_c = r, -1.0 - 2.0 * r, r
        edge_last, edge_first = 2.0 * r, 2.0 * r

        for _ in range(self.count_t - 1):
            integral = self._simpson(layer, b)
            f = []
            f_a = []
            for u, u_a, bi in zip(layer, layer_a, b):
                f.append(-u * (1.0 + self.step_t * bi - self.step_t * integral))
                f_a.append(-u_a * (1.0 + self.step_t * bi))
                current += 1
                report(current)
            layer = self._tridiagonal(diag_a, diag_b, diag_c, edge_last, edge_first, f)
            layer_a = self._tridiagonal(diag_a, diag_b, diag_c, edge_last, edge_first, f_a)
            for _ in range(size):
                current += 1
                report(current)

        square = self._simpson(layer_a)
        normalised = []
        for value in layer_a:
            normalised.append(value / square)
            current += 1
            report(current)

        if progress is not None:
            progress(maximum, maximum)
        return ComputationResult(x=xs, phi=phi, grid=layer, grid_a=normalised)