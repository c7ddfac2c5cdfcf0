"""Chart data for a spline: sampled curve, points, axis lines and ranges."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator

from numlab.spline import Spline

STEPS = 100
GAP_FACTOR = 0.25

Point = tuple[float, float]
ProgressCallback = Callable[[int, int, str], None]


def _stepped(start: float, stop: float, step: float) -> Iterator[float]:
    x = start
    while x < stop:
        yield x
        x += step


def format_coordinates(x: float, y: float) -> str:
    """Status-bar text for a hovered point."""
    return f"Coordinates: {x:f}, {y:f}"


class SplineChart:
    """Series and axis ranges that a plot of a spline is drawn from.

    The tracked extremes survive :meth:`clear`, so axis ranges only grow.
    """

    def __init__(self) -> None:
        self.spline_series: list[Point] = []
        self.points_series: list[Point] = []
        self.axis_h_series: list[Point] = []
        self.axis_v_series: list[Point] = []
        self.x_range: tuple[float, float] = (0.0, 1.0)
        self.y_range: tuple[float, float] = (0.0, 1.0)
        self._min_x = self._min_y = sys.float_info.max
        self._max_x = self._max_y = -sys.float_info.max

    def clear(self) -> None:
        """Empty every series."""
        self.spline_series.clear()
        self.points_series.clear()
        self.axis_h_series.clear()
        self.axis_v_series.clear()

    def load(self, spline: Spline, progress: ProgressCallback | None = None) -> None:
        """Fill the series from ``spline``, reporting stages to ``progress``."""

        def report(current: int, message: str) -> None:
            if progress is not None:
                progress(current, 3, message)

        self.clear()
        report(1, "Drawing points")
        points = spline.points()
        for x, y in points:
            self.points_series.append((x, y))
            if x < self._min_x:
                self._min_x = x
            elif x > self._max_x:
                self._max_x = x
            if y < self._min_y:
                self._min_y = y
            elif y > self._max_y:
                self._max_y = y

        report(2, "Rendering curve")
        if spline.available():
            self._sample_curve(spline, points)

        report(3, "Drawing axes")
        self._reset_ranges()
        report(4, "Finished")

    def _sample_curve(self, spline: Spline, points: list[Point]) -> None:
        step = (self._max_x - self._min_x) / STEPS
        delta = (self._max_x - self._min_x) * 3
        front_x = points[0][0]
        for x in _stepped(front_x - delta, front_x, step):
            self.spline_series.append((x, spline.interpolated_value(1, x)))

        for i, ((prev_x, _), (x_end, _)) in enumerate(zip(points, points[1:]), start=1):
            for x in _stepped(prev_x, x_end, step):
                y = spline.interpolated_value(i, x)
                self.spline_series.append((x, y))
                if y < self._min_y:
                    self._min_y = y
                elif y > self._max_y:
                    self._max_y = y

        back_x = points[-1][0]
        last = len(points) - 1
        for x in _stepped(back_x, back_x + delta, step):
            self.spline_series.append((x, spline.interpolated_value(last, x)))

    def _reset_ranges(self) -> None:
        x_delta = (self._max_x - self._min_x) * GAP_FACTOR
        y_delta = (self._max_y - self._min_y) * GAP_FACTOR
        self.x_range = (self._min_x - x_delta, self._max_x + x_delta)
        self.y_range = (self._min_y - y_delta, self._max_y + y_delta)
        self.axis_h_series.extend([(self.x_range[0], 0.0), (self.x_range[1], 0.0)])
        self.axis_v_series.extend([(0.0, self.y_range[0]), (0.0, self.y_range[1])])