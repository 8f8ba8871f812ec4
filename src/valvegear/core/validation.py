"""Input gate and output sanity checks.

Inputs must be strictly positive before any formula runs. Outputs are checked
for negative values after the full pipeline has been evaluated; the check only
reports, it never alters stored values.
"""

from __future__ import annotations

from dataclasses import dataclass

from .parameters import ParameterModel


@dataclass
class CheckRecord:
    """Outcome of a single pass over one parameter collection.

    Attributes:
        ok: True if every field passed.
        failed_index: 1-based index of the first offending field, or None.
        failed_name: Canonical name of that field, or None.
        value: Offending value, or None.
    """

    ok: bool
    failed_index: int | None = None
    failed_name: str | None = None
    value: float | None = None

    @property
    def message(self) -> str:
        if self.ok:
            return ""
        return f"Value for [{self.failed_name}] is invalid: {self.value}"


class InputCheck(CheckRecord):
    @property
    def message(self) -> str:
        if self.ok:
            return ""
        return f"Input for [{self.failed_name}] is either invalid or not entered yet."


class OutputCheck(CheckRecord):
    @property
    def message(self) -> str:
        if self.ok:
            return ""
        return (
            f"Output for [{self.failed_name}] is invalid, please re-enter your values, "
            "and ensure they're correct."
        )


def check_inputs(model: ParameterModel) -> InputCheck:
    """Fail fast on the first input that is not strictly positive.

    Zero is rejected along with negatives: there is no separate "unset" state.
    """
    for index, item in model.iter_inputs():
        if item.value <= 0.0:
            return InputCheck(ok=False, failed_index=index, failed_name=item.name, value=item.value)
    return InputCheck(ok=True)


def check_outputs(model: ParameterModel) -> OutputCheck:
    """Report the first negative output.

    Non-finite values (from a zero Port Width or zero Lap + Lead) are not
    negative and therefore pass.
    """
    for index, item in model.iter_outputs():
        if item.value < 0:
            return OutputCheck(ok=False, failed_index=index, failed_name=item.name, value=item.value)
    return OutputCheck(ok=True)


def can_export(model: ParameterModel) -> bool:
    """Whether there is computed data worth saving.

    A Wheel Speed of exactly 0.0 means no calculation has been run yet.
    """
    return model.get_output(1) != 0.0
