"""Test the session object (manual entry, load, calculate, save)."""

import numpy as np
import pytest

from valvegear.core.types import CalcStatus, LoadStatus, SaveStatus

EXAMPLES = [66.0, 26.0, 20.5, 0.858, 3.39, 5.5, 18.0]


def test_initial_state(session):
    assert not session.has_save
    assert session.last_result is None


def test_enter_inputs_sequence(session):
    session.enter_inputs(EXAMPLES)
    np.testing.assert_array_equal(session.model.input_values(), EXAMPLES)


def test_enter_inputs_mapping(session):
    """Mapping keys may be letters or canonical names."""
    session.enter_inputs({"D": 66, "Bore": 20.5})

    assert session.model.get_input(1) == 66.0
    assert session.model.get_input(3) == 20.5
    assert session.model.get_input(2) == 0.0


def test_enter_inputs_unknown_key(session):
    with pytest.raises(KeyError):
        session.enter_inputs({"Q": 1.0})


def test_save_refused_before_calculation(session):
    result = session.save()

    assert result.status is SaveStatus.NO_DATA
    assert "cannot save" in result.message
    assert not session.config.storage.inputs_path.exists()


def test_full_cycle(session):
    session.enter_inputs(EXAMPLES)
    calc = session.calculate()
    assert calc.status is CalcStatus.OK
    assert session.last_result is calc

    saved = session.save()
    assert saved.ok
    assert saved.written == [session.config.storage.inputs_path, session.config.storage.outputs_path]

    session.model.set_input_values([1.0] * 7)
    loaded = session.load()
    assert loaded.status is LoadStatus.LOADED
    assert session.has_save
    np.testing.assert_array_equal(session.model.input_values(), EXAMPLES)


def test_load_missing_file(session):
    session.enter_inputs(EXAMPLES)
    result = session.load()

    assert result.status is LoadStatus.NOT_FOUND
    assert not session.has_save
    np.testing.assert_array_equal(session.model.input_values(), EXAMPLES)


def test_partial_save(session):
    """An outputs failure does not roll back the inputs file."""
    session.enter_inputs(EXAMPLES)
    session.calculate()
    session.config.storage.outputs_path.parent.rmdir()

    result = session.save()

    assert result.status is SaveStatus.PARTIAL
    assert session.config.storage.inputs_path.exists()
    assert list(result.errors) == ["outputs"]
    assert "outputs" in result.message


def test_failed_save(session):
    session.enter_inputs(EXAMPLES)
    session.calculate()
    session.config.storage.inputs_path.parent.rmdir()
    session.config.storage.outputs_path.parent.rmdir()

    result = session.save()

    assert result.status is SaveStatus.FAILED
    assert result.written == []
    assert set(result.errors) == {"inputs", "outputs"}


def test_ensure_directories_idempotent(session):
    session.ensure_directories()
    session.ensure_directories()
    assert session.config.storage.inputs_path.parent.is_dir()
    assert session.config.storage.outputs_path.parent.is_dir()
