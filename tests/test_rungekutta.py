import math

import pytest

from numlab.rungekutta import (
    AccurateSolution,
    EquationSystem,
    RKMethodSolver,
    RKStep,
    SampleAccurateSolution,
    SampleEquationSystem,
)


class _Linear(EquationSystem):
    def f1(self, x, y, z):
        return 1.0

    def f2(self, x, y, z):
        return 2.0

    def f3(self, x, y, z):
        return -1.0


def test_sample_system_values_and_strings():
    system = SampleEquationSystem()
    assert system.f1(1.0, 2.0, 3.0) == 2.0
    assert system.f2(1.0, 2.0, 3.0) == 1.0
    assert system.f3(1.0, 2.0, 3.0) == 6.0
    assert (system.f1_str, system.f2_str, system.f3_str) == ("y", "x", "x + y + z")


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EquationSystem()
    with pytest.raises(TypeError):
        AccurateSolution()


def test_accurate_solution_formula_strings():
    accurate = SampleAccurateSolution(0.0, (1.0, 1.0, 0.0))
    assert accurate.f1_str == "1e<sup>t</sup> + (0) * e<sup>-t</sup>"
    assert accurate.f2_str == "1e<sup>t</sup> - (0) * e<sup>-t</sup>"
    assert accurate.f3_str == "0e<sup>t</sup> + 2 * (1) * te<sup>t</sup>"


@pytest.mark.parametrize("t0", [0.0, 0.5, -1.0])
def test_accurate_solution_matches_initial_conditions(t0):
    init = (1.5, -0.5, 2.0)
    accurate = SampleAccurateSolution(t0, init)
    assert accurate.f1(t0) == pytest.approx(init[0])
    assert accurate.f2(t0) == pytest.approx(init[1])
    assert accurate.f3(t0) == pytest.approx(init[2])


def test_accurate_solution_satisfies_system():
    accurate = SampleAccurateSolution(0.2, (1.0, 2.0, 3.0))
    system = SampleEquationSystem()
    t, eps = 0.7, 1e-6
    x, y, z = accurate.f1(t), accurate.f2(t), accurate.f3(t)
    dx = (accurate.f1(t + eps) - accurate.f1(t - eps)) / (2 * eps)
    dz = (accurate.f3(t + eps) - accurate.f3(t - eps)) / (2 * eps)
    assert dx == pytest.approx(system.f1(x, y, z), rel=1e-6)
    assert dz == pytest.approx(system.f3(x, y, z), rel=1e-6)


def test_solver_shape_and_times():
    steps = RKMethodSolver(SampleEquationSystem()).solve(0.0, 1.0, 10, (1.0, 0.0, 0.0))
    assert len(steps) == 10
    assert all(isinstance(step, RKStep) for step in steps)
    assert steps[0].t == pytest.approx(0.1)
    assert steps[-1].t == pytest.approx(1.0)
    assert all(b.t > a.t for a, b in zip(steps, steps[1:]))


def test_solver_close_to_accurate_solution():
    init = (1.0, 2.0, 0.5)
    steps = RKMethodSolver(SampleEquationSystem()).solve(0.0, 2.0, 200, init)
    accurate = SampleAccurateSolution(0.0, init)
    for step in steps:
        assert step.x == pytest.approx(accurate.f1(step.t), rel=1e-6)
        assert step.y == pytest.approx(accurate.f2(step.t), rel=1e-6)
        assert step.z == pytest.approx(accurate.f3(step.t), rel=1e-6)


def test_solver_exact_for_constant_derivatives():
    steps = RKMethodSolver(_Linear()).solve(1.0, 3.0, 4, (0.0, 1.0, 2.0))
    for step in steps:
        elapsed = step.t - 1.0
        assert step.x == pytest.approx(elapsed)
        assert step.y == pytest.approx(1.0 + 2 * elapsed)
        assert step.z == pytest.approx(2.0 - elapsed)


def test_step_is_indexable_like_row():
    step = RKMethodSolver(_Linear()).solve(0.0, 1.0, 1, (0.0, 0.0, 0.0))[0]
    assert tuple(step) == (step.x, step.y, step.z, step.t)
    assert math.isclose(step[3], 1.0)


@pytest.mark.parametrize("n", [0, -3])
def test_solver_rejects_non_positive_steps(n):
    with pytest.raises(ValueError, match="Number of steps must be greater than zero."):
        RKMethodSolver(SampleEquationSystem()).solve(0.0, 1.0, n, (0.0, 0.0, 0.0))


@pytest.mark.parametrize("a, b", [(1.0, 1.0), (2.0, 1.0)])
def test_solver_rejects_bad_segment(a, b):
    with pytest.raises(ValueError, match="Ending point must be greater than starting point."):
        RKMethodSolver(SampleEquationSystem()).solve(a, b, 5, (0.0, 0.0, 0.0))