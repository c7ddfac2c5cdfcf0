"""Classic fourth-order Runge-Kutta method for a system of three equations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import NamedTuple


class EquationSystem(ABC):
    """Right-hand sides of ``x' = f1``, ``y' = f2``, ``z' = f3``."""

    f1_str: str = ""
    f2_str: str = ""
    f3_str: str = ""

    @abstractmethod
    def f1(self, x: float, y: float, z: float) -> float:
        """Derivative of x."""

    @abstractmethod
    def f2(self, x: float, y: float, z: float) -> float:
        """Derivative of y."""

    @abstractmethod
    def f3(self, x: float, y: float, z: float) -> float:
        """Derivative of z."""


class AccurateSolution(ABC):
    """Exact solution ``x(t)``, ``y(t)``, ``z(t)`` with printable formulas."""

    f1_str: str = ""
    f2_str: str = ""
    f3_str: str = ""

    @abstractmethod
    def f1(self, t: float) -> float:
        """x at time t."""

    @abstractmethod
    def f2(self, t: float) -> float:
        """y at time t."""

    @abstractmethod
    def f3(self, t: float) -> float:
        """z at time t."""


class SampleEquationSystem(EquationSystem):
    """``x' = y``, ``y' = x``, ``z' = x + y + z``."""

    f1_str = "y"
    f2_str = "x"
    f3_str = "x + y + z"

    def f1(self, x, y, z):
        return float(y)

    def f2(self, x, y, z):
        return float(x)

    def f3(self, x, y, z):
        return x + y + z


def _short(value: float) -> str:
    return f"{value:.2g}"


class SampleAccurateSolution(AccurateSolution):
    """Exact solution of :class:`SampleEquationSystem` for given initial values."""

    def __init__(self, t_start: float, init_conditions: Sequence[float]) -> None:
        x0, y0, z0 = init_conditions
        self.c1 = math.exp(-t_start) * (x0 + y0) / 2
        self.c2 = math.exp(t_start) * (x0 - y0) / 2
        self.c3 = math.exp(-t_start) * z0 - 2 * self.c1 * t_start
        c1, c2, c3 = _short(self.c1), _short(self.c2), _short(self.c3)
        self.f1_str = f"{c1}e<sup>t</sup> + ({c2}) * e<sup>-t</sup>"
        self.f2_str = f"{c1}e<sup>t</sup> - ({c2}) * e<sup>-t</sup>"
        self.f3_str = f"{c3}e<sup>t</sup> + 2 * ({c1}) * te<sup>t</sup>"

    def f1(self, t):
        return self.c1 * math.exp(t) + self.c2 * math.exp(-t)

    def f2(self, t):
        return self.c1 * math.exp(t) - self.c2 * math.exp(-t)

    def f3(self, t):
        return math.exp(t) * (self.c3 + 2 * self.c1 * t)


class RKStep(NamedTuple):
    """Approximate values at time ``t``."""

    x: float
    y: float
    z: float
    t: float


class RKMethodSolver:
    """Integrates an :class:`EquationSystem` with the RK4 method."""

    def __init__(self, system: EquationSystem) -> None:
        self.system = system

    def _derivatives(self, state: Sequence[float]) -> tuple[float, float, float]:
        x, y, z = state
        return self.system.f1(x, y, z), self.system.f2(x, y, z), self.system.f3(x, y, z)

    def solve(
        self, a: float, b: float, n: int, init_conditions: Sequence[float]
    ) -> list[RKStep]:
        """Take ``n`` steps over ``[a, b]``; the initial point is not included."""
        n = int(n)
        if n <= 0:
            raise ValueError("Number of steps must be greater than zero.")
        if b <= a:
            raise ValueError("Ending point must be greater than starting point.")

        h = (b - a) / n
        t = a + h
        state = [float(value) for value in init_conditions]
        if len(state) != 3:
            raise ValueError("Exactly three initial conditions are required.")

        result: list[RKStep] = []
        for _ in range(n):
            k1 = [h * value for value in self._derivatives(state)]
            k2 = [
                h * value
                for value in self._derivatives([s + k / 2 for s, k in zip(state, k1)])
            ]
            k3 = [
                h * value
                for value in self._derivatives([s + k / 2 for s, k in zip(state, k2)])
            ]
            k4 = [
                h * value
                for value in self._derivatives([s + k for s, k in zip(state, k3)])
            ]
            state = [
                s + (p + 2 * q + 2 * r + w) / 6
                for s, p, q, r, w in zip(state, k1, k2, k3, k4)
            ]
            result.append(RKStep(state[0], state[1], state[2], t))
            t += h
        return result