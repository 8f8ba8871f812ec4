"""Test label-based text persistence."""

import pytest

from valvegear.core.formulas import compute
from valvegear.core.parameters import ParameterModel
from valvegear.core.text_io import (
    apply_lines,
    format_records,
    format_value,
    load_inputs,
    parse_leading_float,
    save_inputs,
    save_outputs,
)
from valvegear.core.types import LoadStatus


@pytest.mark.parametrize(
    "text, expected",
    [
        ("20.5", 20.5),
        ("  20.5 extra text", 20.5),
        ("\t66", 66.0),
        ("-3", -3.0),
        ("+.5", 0.5),
        ("1e3", 1000.0),
        ("2.5E-1in", 0.25),
        ("18\"", 18.0),
    ],
)
def test_parse_leading_float(text, expected):
    assert parse_leading_float(text) == expected


@pytest.mark.parametrize("text", ["notanumber", "", "   ", "abc 12", ".", "-"])
def test_parse_leading_float_failure(text):
    assert parse_leading_float(text) is None


def test_format_records():
    lines = format_records([("Bore", 20.5), ("Piston Stroke", 26.0)])
    assert lines == ["Bore: 20.5", "Piston Stroke: 26.0"]


def test_format_value_precision():
    """Fixed significant digits, like a default C++ stream."""
    assert format_value(348339.79, precision=6) == "348340"
    assert format_value(0.423839128, precision=6) == "0.423839"
    assert format_value(0.1 + 0.2) == repr(0.1 + 0.2)


def test_tolerant_parse_trailing_text():
    model = ParameterModel()
    result = apply_lines(model, ["Bore: 20.5 extra text"])

    assert model.input_by_name("Bore").value == 20.5
    assert "Bore" in result.matched
    assert result.fallbacks == []


def test_unparseable_value_becomes_zero():
    model = ParameterModel()
    model.input_by_name("Bore").value = 9.0
    result = apply_lines(model, ["Bore: notanumber"])

    assert model.input_by_name("Bore").value == 0.0
    assert result.fallbacks == ["Bore"]


def test_unmatched_label_left_unchanged(example_model):
    """A file without a "Lead:" line keeps the previous Lead value."""
    lines = [f"{item.name}: 1" for _, item in example_model.iter_inputs() if item.name != "Lead"]
    result = apply_lines(example_model, lines)

    assert example_model.input_by_name("Lead").value == 0.858
    assert result.unmatched == ["Lead"]
    assert example_model.input_by_name("Bore").value == 1.0


def test_first_matching_line_wins():
    model = ParameterModel()
    apply_lines(model, ["Bore: 1", "Bore: 2"])
    assert model.input_by_name("Bore").value == 1.0


@pytest.mark.parametrize(
    "line",
    [
        "bore: 20.5",  # case-sensitive
        " Bore: 20.5",  # must start at column 0
        "Bore : 20.5",  # no whitespace before colon
        "# Bore: 20.5",
    ],
)
def test_strict_label_matching(line):
    model = ParameterModel()
    result = apply_lines(model, [line])

    assert model.input_by_name("Bore").value == 0.0
    assert "Bore" in result.unmatched


def test_lines_in_any_order():
    model = ParameterModel()
    apply_lines(model, ["Port Width: 18", "Drive Wheel Diameter: 66"])

    assert model.get_input(7) == 18.0
    assert model.get_input(1) == 66.0


def test_missing_file_reports_not_found(tmp_path, example_model):
    before = example_model.input_values()
    result = load_inputs(example_model, tmp_path / "missing.txt")

    assert result.status is LoadStatus.NOT_FOUND
    assert not result.loaded
    assert result.message == "No file found."
    assert (example_model.input_values() == before).all()


def test_save_inputs_format(tmp_path, example_model):
    path = save_inputs(example_model, tmp_path / "inputs.txt")

    assert path.read_text(encoding="utf-8").splitlines() == [
        "Drive Wheel Diameter: 66.0",
        "Piston Stroke: 26.0",
        "Bore: 20.5",
        "Lead: 0.858",
        "Lap: 3.39",
        "Valve Travel: 5.5",
        "Port Width: 18.0",
    ]


def test_save_outputs_overwrites(tmp_path, example_model):
    path = tmp_path / "outputs.txt"
    path.write_text("stale content\n" * 20, encoding="utf-8")
    compute(example_model)
    save_outputs(example_model, path)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 9
    assert lines[0].startswith("Wheel Speed: ")
    assert lines[1] == "Piston Speed: 1456.0"
    assert lines[-1].startswith("Combination Lever Length: ")


def test_save_into_missing_directory_raises(tmp_path, example_model):
    with pytest.raises(OSError):
        save_inputs(example_model, tmp_path / "nope" / "inputs.txt")


def test_save_then_load_roundtrip(tmp_path, example_model):
    path = save_inputs(example_model, tmp_path / "inputs.txt")
    model = ParameterModel()
    result = load_inputs(model, path)

    assert result.loaded
    assert result.unmatched == []
    assert (model.input_values() == example_model.input_values()).all()


def test_roundtrip_at_written_precision(tmp_path):
    model = ParameterModel()
    model.set_input_values([66.123456789, 26, 20.5, 0.858, 3.39, 5.5, 18])
    path = save_inputs(model, tmp_path / "inputs.txt", precision=6)

    reloaded = ParameterModel()
    load_inputs(reloaded, path)
    assert reloaded.get_input(1) == 66.1235


def test_load_windows_line_endings(tmp_path):
    path = tmp_path / "inputs.txt"
    path.write_bytes(b"Bore: 20.5\r\nLead: 0.858\r\n")
    model = ParameterModel()
    load_inputs(model, path)

    assert model.input_by_name("Bore").value == 20.5
    assert model.input_by_name("Lead").value == 0.858
