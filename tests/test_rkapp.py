import pytest

from numlab.rkapp import RKSolutionTable, compare_with_accurate, main
from numlab.rungekutta import (
    RKMethodSolver,
    RKStep,
    SampleAccurateSolution,
    SampleEquationSystem,
)
from numlab.systemtables import Orientation


@pytest.fixture
def table():
    return RKSolutionTable([RKStep(1.0, 2.0, 3.0, 0.5), RKStep(4.0, 5.0, 6.0, 1.0)])


def test_table_sizes(table):
    assert table.row_count() == 2
    assert table.column_count() == 4


def test_table_values(table):
    assert table.value(0, 2) == 3.0
    assert table.value(1, 3) == 1.0


@pytest.mark.parametrize("section, name", [(0, "x"), (1, "y"), (2, "z"), (3, "t"), (4, "..")])
def test_horizontal_headers(table, section, name):
    assert table.header(section, Orientation.HORIZONTAL) == name


def test_vertical_headers_are_one_based(table):
    assert table.header(0, Orientation.VERTICAL) == 1
    assert table.header(1, Orientation.VERTICAL) == 2


def test_comparison_is_close_to_exact_solution():
    init = (1.0, 0.5, 0.25)
    steps = RKMethodSolver(SampleEquationSystem()).solve(0.0, 1.0, 100, init)
    rows = compare_with_accurate(steps, SampleAccurateSolution(0.0, init))
    assert len(rows) == len(steps)
    assert [row.t for row in rows] == [step.t for step in steps]
    assert all(row.error < 1e-6 for row in rows)


def test_comparison_keeps_approximate_values():
    steps = [RKStep(1.0, 2.0, 3.0, 0.0)]
    rows = compare_with_accurate(steps, SampleAccurateSolution(0.0, (0.0, 0.0, 0.0)))
    assert (rows[0].x, rows[0].y, rows[0].z) == (1.0, 2.0, 3.0)
    assert rows[0].x_exact == 0.0
    assert rows[0].error == 3.0


def test_main_compare_prints_formulas(capsys):
    assert main(["0", "1", "5", "1", "1", "1", "--compare"]) == 0
    out = capsys.readouterr().out
    assert "x exact" in out
    assert "<sup>" not in out
    assert "x = " in out


def test_main_reports_bad_segment(capsys):
    assert main(["1", "0", "10", "0", "0", "0"]) == 1
    assert "Ending point must be greater than starting point." in capsys.readouterr().err


def test_main_reports_bad_step_count(capsys):
    assert main(["0", "1", "0", "0", "0", "0"]) == 1
    assert "Number of steps must be greater than zero." in capsys.readouterr().err