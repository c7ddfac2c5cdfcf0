"""Numerical methods: cubic splines, linear system solvers, Runge-Kutta integration and rod heating."""

__version__ = "0.1.0"

__all__ = [
    "heating",
    "heatingapp",
    "linalg",
    "rkapp",
    "rungekutta",
    "solvers",
    "spline",
    "splinechart",
    "systemsapp",
    "systemtables",
]