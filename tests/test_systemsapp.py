import pytest

from numlab.linalg import multiply_matrix_column
from numlab.solvers import Method, SolverError
from numlab.systemsapp import (
    AllMethodsReport,
    main,
    solve_with_all_methods,
    solve_with_method,
)

DOMINANT = [[4.0, 1.0], [1.0, 3.0]]
RHS = [1.0, 2.0]
SWAPPED = [[0.0, 1.0], [1.0, 0.0]]


def _residual_ok(matrix, b, x, tol=1e-3):
    return all(abs(p - q) < tol for p, q in zip(multiply_matrix_column(matrix, x), b))


@pytest.mark.parametrize("method", list(Method))
def test_each_method_solves_dominant_system(method):
    solution = solve_with_method(DOMINANT, RHS, method)
    assert solution.method == method
    assert solution.duration >= 0
    assert _residual_ok(DOMINANT, RHS, solution.column)


def test_explicit_approximation_is_used():
    solution = solve_with_method(DOMINANT, RHS, Method.SEIDEL, [0.0, 0.0], 1e-8)
    assert _residual_ok(DOMINANT, RHS, solution.column, 1e-6)


def test_singular_matrix_rejected():
    with pytest.raises(SolverError, match="Matrix determinant equals to zero."):
        solve_with_method([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0], Method.GAUSS)


def test_singular_matrix_rejected_for_all_methods():
    with pytest.raises(SolverError, match="determinant"):
        solve_with_all_methods([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])


def test_failing_method_message_names_method():
    with pytest.raises(SolverError) as info:
        solve_with_method(SWAPPED, [1.0, 2.0], Method.GAUSS)
    assert str(info.value).startswith("Gauss method cannot be executed. Matrix has")


def test_all_methods_on_dominant_system():
    report = solve_with_all_methods(DOMINANT, RHS)
    assert [s.method for s in report.solutions] == list(Method)
    assert report.errors == {}
    assert report.error_message is None
    assert report.fastest_method in Method
    for solution in report.solutions:
        assert _residual_ok(DOMINANT, RHS, solution.column)


def test_all_methods_collects_errors():
    report = solve_with_all_methods(SWAPPED, [1.0, 2.0])
    assert [s.method for s in report.solutions] == [Method.KRAMER]
    assert set(report.errors) == set(Method) - {Method.KRAMER}
    assert report.fastest_method == Method.KRAMER
    assert report.fastest_message == "The fastest method is Kramer method."
    assert report.error_message.startswith("Some methods were not executed.\n\n")
    assert "Gauss method: Matrix has at least 1 zero on diagonal" in report.error_message


def test_empty_report_defaults_to_gauss():
    report = AllMethodsReport()
    assert report.fastest_method == Method.GAUSS
    assert report.error_message is None


def test_main_single_method(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("2 1 3\n1 3 5\n", encoding="utf-8")
    assert main([str(path), "--method", "kramer"]) == 0
    out = capsys.readouterr().out
    assert "Kramer" in out
    assert "Duration" in out
    assert "X2" in out


def test_main_all_methods(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("4 1 1\n1 3 2\n", encoding="utf-8")
    assert main([str(path), "--all"]) == 0
    out = capsys.readouterr().out
    assert "The fastest method is" in out
    assert "LU-decomp." in out


def test_main_singular(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("1 2 1\n2 4 2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "determinant" in capsys.readouterr().err


def test_main_too_few_equations(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("1 2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "number of equations" in capsys.readouterr().err


def test_main_bad_row_length(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("1 2 3\n4 5\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Equation 2" in capsys.readouterr().err