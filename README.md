# numlab

A small workbench of classic numerical methods, with no dependencies outside
the standard library.

- **Cubic splines**: `numlab.spline` builds a cubic spline through points with
  distinct x coordinates, solving for its coefficients with the tridiagonal
  matrix algorithm. `numlab.splinechart` samples the spline into series of
  points and computes axis ranges for plotting.
- **Linear systems**: `numlab.linalg` has column and matrix helpers
  (`determinant`, `converge`, `diagonal_predominant`, ...). `numlab.solvers`
  offers Gauss elimination, Cramer's rule, LU decomposition, and the iterative
  Seidel, simple iteration and upper relaxation methods. `numlab.systemtables`
  holds editable tables of a system, a first approximation and solutions.
  `numlab.systemsapp` times one method or all of them on a system.
- **Runge-Kutta**: `numlab.rungekutta` integrates a system of three ordinary
  differential equations with the fourth-order Runge-Kutta method, and gives the
  exact solution of a sample system to compare against; `numlab.rkapp` tabulates
  and compares the results.
- **Rod heating**: `numlab.heating` runs an implicit finite-difference scheme for
  heating of a rod with a nonlocal integral term.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

Interpolating with a spline:

```python
from numlab.spline import Spline

spline = Spline()
spline.insert(0.0, 0.0)
spline.insert(1.0, 1.0)
spline.insert(2.0, 0.0)

print(spline.available())                 # True: at least two points
print(spline.interpolated_value(1, 0.5))  # segment 1 spans [0.0, 1.0]
```

Points are kept ordered by x. Inserting a point whose x coordinate is already
present raises `DuplicatePointError`. `SplineChart.load(spline, progress)` fills
`spline_series`, `points_series`, `axis_h_series`, `axis_v_series`, `x_range`
and `y_range`, calling `progress(current, total, message)` at each stage.

Solving a linear system:

```python
from numlab.linalg import determinant
from numlab.solvers import GaussMethodSolver, Method, solver_for

a = [[2.0, 1.0], [1.0, 3.0]]
b = [3.0, 5.0]

print(determinant(a))                # 5.0
print(GaussMethodSolver().solve(a, b))  # about [0.8, 1.4]
print(solver_for(Method.SEIDEL).solve(a, b, [0.0, 0.0], 1e-4))
```

The iterative solvers start from the given approximation (zeros if none is
given) and iterate until successive approximations are closer than `epsilon`.
They raise `SolverError` for a matrix with a zero on its diagonal or one that is
not diagonally predominant. The other methods raise `SolverError` when they meet
a zero pivot or a zero determinant.

`numlab.systemsapp.solve_with_method` and `solve_with_all_methods` check the
determinant first and time each method; the latter returns an
`AllMethodsReport` with the solutions, the fastest method and the errors of the
methods that failed.

Runge-Kutta integration:

```python
from numlab.rungekutta import RKMethodSolver, SampleEquationSystem

steps = RKMethodSolver(SampleEquationSystem()).solve(0.0, 1.0, 10, (1.0, 0.0, 0.0))
print(steps[-1])  # RKStep(x=..., y=..., z=..., t=1.0...)
```

The initial point is not part of the result. `n` must be positive and `b`
greater than `a`, otherwise `ValueError` is raised.

Rod heating:

```python
from numlab.heating import Computation

result = Computation(0.0, 0.0, 0.0, 0.0, 0.0, t=1.0, l=1.0, step_t=0.01, step_l=0.1).run()
print(result.x, result.grid)
```

`run(progress)` may be given a callback that receives `(current, total)`.

## Command-line tools

```
numlab-systems --help
numlab-rungekutta --help
numlab-heating --help
```

- `numlab-systems PATH [--method NAME | --all] [--epsilon E] [--approximation V ...]`
  reads a system from a file (or `-` for standard input), one equation per
  line: the coefficients followed by the right-hand side, from 2 to 16
  equations. It prints the solution table with durations; with `--all` it also
  names the fastest method and reports the methods that failed. The first
  approximation defaults to the right-hand side.
- `numlab-rungekutta A B N X0 Y0 Z0 [--compare]` integrates
  `x' = y, y' = x, z' = x + y + z` over `[A, B]` in `N` steps; `--compare` adds
  the exact solution and its formulas.
- `numlab-heating --time T --length L --step-t DT --step-x DX` with optional
  `--b0 --b1 --b2 --phi1 --phi2` and `--normalized` prints the initial profile
  and the profile at the final time, and the computation time. The length,
  time and both step sizes must all be greater than zero.

## What the package does not do

There is no graphical interface and no plotting. `SplineChart` and
`compare_with_accurate` produce the data a plot would be drawn from, and the
commands print tables as text; drawing them is left to the caller.