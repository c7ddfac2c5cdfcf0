"""Natural cubic spline through points with distinct abscissas."""

from __future__ import annotations

import bisect


class DuplicatePointError(ValueError):
    """Raised when a point whose x coordinate is already used is inserted."""

    def __init__(self) -> None:
        super().__init__(
            "Point with this x coordinate is already exists. Please, try again."
        )


class Spline:
    """Cubic spline kept up to date as points are inserted.

    Segment ``i`` (for ``i >= 1``) spans ``[x[i-1], x[i]]`` and is expressed
    around its right node ``x[i]``.
    """

    def __init__(self) -> None:
        self._points: list[tuple[float, float]] = []
        self._a: list[float] = []
        self._b: list[float] = []
        self._c: list[float] = []
        self._d: list[float] = []

    def insert(self, x: float, y: float) -> None:
        """Insert a point, keeping points ordered by x, and rebuild the spline."""
        x, y = float(x), float(y)
        xs = [px for px, _ in self._points]
        if x in xs:
            raise DuplicatePointError()
        self._points.insert(bisect.bisect_left(xs, x), (x, y))
        if self.available():
            self._update()

    def clear(self) -> None:
        """Remove every point."""
        self._points.clear()
        self._a, self._b, self._c, self._d = [], [], [], []

    def points(self) -> list[tuple[float, float]]:
        """The points, ordered by x."""
        return list(self._points)

    def available(self) -> bool:
        """Whether there are enough points to build a spline."""
        return len(self._points) >= 2

    def interpolated_value(self, i: int, x: float) -> float:
        """Value at ``x`` of the cubic polynomial of segment ``i``."""
        a, b, c, d = self._a[i], self._b[i], self._c[i], self._d[i]
        delta = x - self._points[i][0]
        return a + b * delta + (c / 2.0) * delta**2 + (d / 6.0) * delta**3

    def _update(self) -> None:
        size = len(self._points)
        self._a = [0.0] * size
        self._b = [0.0] * size
        self._c = [0.0] * size
        self._d = [0.0] * size
        self._solve_coefficients()

    def _solve_coefficients(self) -> None:
        if not self.available():
            return
        xs = [px for px, _ in self._points]
        ys = [py for _, py in self._points]
        n = len(xs) - 1
        h = [right - left for left, right in zip(xs, xs[1:])]
        a, b, c, d = self._a, self._b, self._c, self._d
        diag_main = 2.0

        vec = [
            6.0
            * (h[i] * (ys[i + 2] - ys[i + 1]) - h[i + 1] * (ys[i + 1] - ys[i]))
            / (h[i + 1] * h[i] * (h[i + 1] + h[i]))
            for i in range(n - 1)
        ]

        if n > 2:
            upper = [h[i + 2] / (h[i + 1] + h[i + 2]) for i in range(n - 2)]
            lower = [h[i + 1] / (h[i + 1] + h[i + 2]) for i in range(n - 2)]
            p = [-upper[0] / diag_main]
            for i in range(1, n - 2):
                p.append(-upper[i] / (lower[i - 1] * p[i - 1] + diag_main))
            q = [vec[0] / diag_main]
            for i in range(1, n - 1):
                denom = lower[i - 1] * p[i - 1] + diag_main
                q.append((vec[i] - lower[i - 1] * q[i - 1]) / denom)
            c[n - 1] = q[n - 2]
            for i in range(n - 2, 0, -1):
                c[i] = p[i - 1] * c[i + 1] + q[i - 1]
        elif n == 2:
            c[1] = vec[0] / diag_main

        c[0] = c[n] = 0.0
        d[0] = c[1] / h[0]
        b[0] = c[1] * h[0] / 3.0 + (ys[1] - ys[0]) / h[0]
        for i in range(1, n + 1):
            step = h[i - 1]
            a[i] = ys[i]
            b[i] = c[i] * step / 3.0 + c[i - 1] * step / 6.0 + (ys[i] - ys[i - 1]) / step
            d[i] = (c[i] - c[i - 1]) / step