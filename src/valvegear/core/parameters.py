"""Parameter model for valve gear inputs and outputs.

This module defines the ordered records the rest of the package operates on.

Layout:
    inputs[0:7]   - InputField  (D, S, B, L, A, T, W)
    outputs[0:9]  - OutputField (WS, FPM, BA, VPM, PA, PH, HT, TM, CLL)

Both collections are plain lists of fixed length, built once when the model is
constructed. Public accessors take a stable 1-based index.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from .constants import N_INPUTS, N_OUTPUTS


@dataclass
class InputField:
    """A single user-supplied measurement.

    Attributes:
        letter: Short code, e.g. "D" for Drive Wheel Diameter.
        name: Canonical label, used for display and as the persistence key.
        description: Prompt text shown to the user.
        example: Reference value (inches) shown next to the prompt.
        value: The live value. 0.0 means "not entered yet".
    """

    letter: str
    name: str
    description: str
    example: float
    value: float = 0.0


@dataclass
class OutputField:
    """A single computed quantity."""

    letter: str
    name: str
    value: float = 0.0


# (letter, name, description, example) in canonical index order
INPUT_SPECS: tuple[tuple[str, str, str, float], ...] = (
    ("D", "Drive Wheel Diameter", "The drive wheel diameter.", 66.0),
    ("S", "Piston Stroke", "The piston stroke.", 26.0),
    ("B", "Bore", "The bore.", 20.5),
    ("L", "Lead", "The lead.", 0.858),
    ("A", "Lap", "The lap (covering port at mid).", 3.39),
    ("T", "Valve Travel", "The valve travel.", 5.5),
    ("W", "Port Width", "The port width.", 18.0),
)

# (letter, name) in canonical index order
OUTPUT_SPECS: tuple[tuple[str, str], ...] = (
    ("WS", "Wheel Speed"),
    ("FPM", "Piston Speed"),
    ("BA", "Bore Area"),
    ("VPM", "Volume Swept per Minute"),
    ("PA", "Port Area"),
    ("PH", "Port Height"),
    ("HT", "Half Travel"),
    ("TM", "Travel Margin"),
    ("CLL", "Combination Lever Length"),
)

INPUT_NAMES: tuple[str, ...] = tuple(spec[1] for spec in INPUT_SPECS)
OUTPUT_NAMES: tuple[str, ...] = tuple(spec[1] for spec in OUTPUT_SPECS)


def _new_inputs() -> list[InputField]:
    return [InputField(letter, name, desc, example) for letter, name, desc, example in INPUT_SPECS]


def _new_outputs() -> list[OutputField]:
    return [OutputField(letter, name) for letter, name in OUTPUT_SPECS]


@dataclass
class ParameterModel:
    """The 7 inputs and 9 outputs of one calculator session.

    Every ``value`` starts at 0.0; the reference values live in
    ``InputField.example`` until ``load_examples`` copies them over.
    """

    inputs: list[InputField] = field(default_factory=_new_inputs)
    outputs: list[OutputField] = field(default_factory=_new_outputs)

    def __post_init__(self) -> None:
        if len(self.inputs) != N_INPUTS:
            raise ValueError(f"Expected {N_INPUTS} inputs, got {len(self.inputs)}")
        if len(self.outputs) != N_OUTPUTS:
            raise ValueError(f"Expected {N_OUTPUTS} outputs, got {len(self.outputs)}")

    # --- Index access (1-based) ---

    def input_field(self, index: int) -> InputField:
        """Return the input record at 1-based ``index``."""
        return self.inputs[_offset(index, N_INPUTS, "input")]

    def output_field(self, index: int) -> OutputField:
        """Return the output record at 1-based ``index``."""
        return self.outputs[_offset(index, N_OUTPUTS, "output")]

    def get_input(self, index: int) -> float:
        return self.input_field(index).value

    def set_input(self, index: int, value: float) -> None:
        self.input_field(index).value = float(value)

    def get_output(self, index: int) -> float:
        return self.output_field(index).value

    def set_output(self, index: int, value: float) -> None:
        self.output_field(index).value = float(value)

    # --- Lookups ---

    def input_by_letter(self, letter: str) -> InputField:
        for item in self.inputs:
            if item.letter == letter:
                return item
        raise KeyError(f"Unknown input letter: {letter!r}")

    def input_by_name(self, name: str) -> InputField:
        for item in self.inputs:
            if item.name == name:
                return item
        raise KeyError(f"Unknown input name: {name!r}")

    def output_by_letter(self, letter: str) -> OutputField:
        for item in self.outputs:
            if item.letter == letter:
                return item
        raise KeyError(f"Unknown output letter: {letter!r}")

    # --- Iteration ---

    def iter_inputs(self) -> Iterator[tuple[int, InputField]]:
        """Yield ``(index, record)`` pairs in ascending index order."""
        for i in range(N_INPUTS):
            yield i + 1, self.inputs[i]

    def iter_outputs(self) -> Iterator[tuple[int, OutputField]]:
        """Yield ``(index, record)`` pairs in ascending index order."""
        for i in range(N_OUTPUTS):
            yield i + 1, self.outputs[i]

    # --- Array views ---

    def input_values(self) -> np.ndarray:
        """Input values as a float64 array in index order."""
        return np.array([item.value for item in self.inputs], dtype=np.float64)

    def output_values(self) -> np.ndarray:
        """Output values as a float64 array in index order."""
        return np.array([item.value for item in self.outputs], dtype=np.float64)

    def example_values(self) -> np.ndarray:
        return np.array([item.example for item in self.inputs], dtype=np.float64)

    def set_input_values(self, values: Sequence[float] | np.ndarray) -> None:
        """Overwrite all 7 input values at once."""
        if len(values) != N_INPUTS:
            raise ValueError(f"Expected {N_INPUTS} input values, got {len(values)}")
        for item, value in zip(self.inputs, values):
            item.value = float(value)

    def set_output_values(self, values: Sequence[float] | np.ndarray) -> None:
        if len(values) != N_OUTPUTS:
            raise ValueError(f"Expected {N_OUTPUTS} output values, got {len(values)}")
        for item, value in zip(self.outputs, values):
            item.value = float(value)

    def load_examples(self) -> None:
        """Copy each input's example value into its live value."""
        for item in self.inputs:
            item.value = item.example

    def reset_outputs(self) -> None:
        for item in self.outputs:
            item.value = 0.0

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Name -> value mapping for both collections (for JSON reports)."""
        return {
            "inputs": {item.name: item.value for item in self.inputs},
            "outputs": {item.name: item.value for item in self.outputs},
        }


def _offset(index: int, size: int, kind: str) -> int:
    if not 1 <= index <= size:
        raise IndexError(f"{kind} index must be in 1..{size}, got {index}")
    return index - 1
