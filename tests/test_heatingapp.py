import pytest

from numlab.heatingapp import (
    InvalidParametersError,
    format_duration,
    main,
    validate_parameters,
)


@pytest.mark.parametrize(
    "values",
    [(0.0, 1.0, 0.1, 0.1), (1.0, -1.0, 0.1, 0.1), (1.0, 1.0, 1e-17, 0.1), (1.0, 1.0, 0.1, 0.0)],
)
def test_validate_rejects(values):
    with pytest.raises(InvalidParametersError, match="must be greater than zero"):
        validate_parameters(*values)


def test_invalid_parameters_is_value_error():
    with pytest.raises(ValueError):
        validate_parameters(-1.0, -1.0, -1.0, -1.0)


def test_format_duration():
    assert format_duration(1.5) == "1.5 s."
    assert format_duration(12.34567) == "12.35 s."


def test_main_prints_profile(capsys):
    argv = ["-T", "1", "-L", "1", "--step-t", "0.5", "--step-x", "0.25"]
    assert main(argv) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "x\tphi\tu"
    assert len(lines) == 5 + 2
    assert lines[-1].startswith("Computation time: ")


def test_main_normalized_column(capsys):
    argv = ["-T", "1", "-L", "1", "--step-t", "0.5", "--step-x", "0.25", "--normalized"]
    assert main(argv) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].split("\t") == ["x", "phi", "u", "u normalized"]
    assert all(len(line.split("\t")) == 4 for line in lines[1:-1])


def test_main_rejects_zero_length(capsys):
    assert main(["-T", "1", "-L", "0", "--step-t", "0.5", "--step-x", "0.25"]) == 1
    assert "must be greater than zero" in capsys.readouterr().err