"""Valve gear formula pipeline.

The nine outputs form a fixed straight-line dataflow graph. Each step reads raw
inputs and outputs computed by earlier steps only:

    WS  <- D
    FPM <- S
    BA  <- B
    VPM <- FPM, BA
    PA  <- VPM
    PH  <- PA, W
    HT  <- A, L, PH
    TM  <- T, A, L
    CLL <- S, A, L, HT

Steps run once each, in the order of ``FORMULA_STEPS``. Nothing is sorted or
recomputed. Division by zero (Port Width = 0, Lap + Lead = 0) yields inf/nan
rather than raising.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from .constants import (
    INCHES_PER_FOOT,
    MINUTES_PER_HOUR,
    N_INPUTS,
    N_OUTPUTS,
    PORT_STEAM_VELOCITY,
    REFERENCE_RPM,
    SQ_INCHES_PER_SQ_FOOT,
)
from .parameters import INPUT_SPECS, OUTPUT_SPECS, ParameterModel

# 0-based positions into the input vector
D, S, B, L, A, T, W = range(N_INPUTS)
# 0-based positions into the output vector
WS, FPM, BA, VPM, PA, PH, HT, TM, CLL = range(N_OUTPUTS)

StepFn = Callable[[np.ndarray, np.ndarray], float]


@dataclass(frozen=True)
class FormulaStep:
    """One output formula.

    Attributes:
        index: 1-based output index this step writes.
        letter: Output letter code.
        expression: Human-readable formula.
        reads_inputs: Input letters the formula uses.
        reads_outputs: Output letters the formula uses (all earlier steps).
        fn: ``fn(x, y)`` where ``x`` holds the inputs and ``y`` the outputs so far.
    """

    index: int
    letter: str
    expression: str
    reads_inputs: tuple[str, ...]
    reads_outputs: tuple[str, ...]
    fn: StepFn


def _wheel_speed(x: np.ndarray, y: np.ndarray) -> float:
    return (x[D] * np.pi * REFERENCE_RPM * MINUTES_PER_HOUR) / INCHES_PER_FOOT


def _piston_speed(x: np.ndarray, y: np.ndarray) -> float:
    return (REFERENCE_RPM * 2 * x[S]) / INCHES_PER_FOOT


def _bore_area(x: np.ndarray, y: np.ndarray) -> float:
    return np.pi * (x[B] / 2) ** 2


def _volume_swept(x: np.ndarray, y: np.ndarray) -> float:
    return (y[FPM] * y[BA]) / SQ_INCHES_PER_SQ_FOOT


def _port_area(x: np.ndarray, y: np.ndarray) -> float:
    return y[VPM] / PORT_STEAM_VELOCITY


def _port_height(x: np.ndarray, y: np.ndarray) -> float:
    return (y[PA] * INCHES_PER_FOOT) / x[W]


def _half_travel(x: np.ndarray, y: np.ndarray) -> float:
    return x[A] + x[L] + y[PH]


def _travel_margin(x: np.ndarray, y: np.ndarray) -> float:
    return x[T] - (x[A] + x[L])


def _combination_lever(x: np.ndarray, y: np.ndarray) -> float:
    return (x[S] * y[HT]) / (2.0 * ((x[A] + x[L]) / 2.0))


FORMULA_STEPS: tuple[FormulaStep, ...] = (
    FormulaStep(1, "WS", "D * pi * 336 * 60 / 12", ("D",), (), _wheel_speed),
    FormulaStep(2, "FPM", "336 * 2 * S / 12", ("S",), (), _piston_speed),
    FormulaStep(3, "BA", "pi * (B / 2)^2", ("B",), (), _bore_area),
    FormulaStep(4, "VPM", "FPM * BA / 144", (), ("FPM", "BA"), _volume_swept),
    FormulaStep(5, "PA", "VPM / 7874", (), ("VPM",), _port_area),
    FormulaStep(6, "PH", "PA * 12 / W", ("W",), ("PA",), _port_height),
    FormulaStep(7, "HT", "A + L + PH", ("A", "L"), ("PH",), _half_travel),
    FormulaStep(8, "TM", "T - (A + L)", ("T", "A", "L"), (), _travel_margin),
    FormulaStep(9, "CLL", "(S * HT) / (2 * ((A + L) / 2))", ("S", "A", "L"), ("HT",), _combination_lever),
)


def check_step_order(steps: Sequence[FormulaStep]) -> None:
    """Raise ValueError unless ``steps`` is a valid straight-line pipeline.

    Steps must cover output indices 1..N_OUTPUTS in order, and each step may
    only read outputs written by an earlier step.
    """
    input_letters = {spec[0] for spec in INPUT_SPECS}
    output_letters = [spec[0] for spec in OUTPUT_SPECS]

    if [step.index for step in steps] != list(range(1, N_OUTPUTS + 1)):
        raise ValueError("Formula steps must cover every output index in ascending order")

    written: set[str] = set()
    for step in steps:
        if step.letter != output_letters[step.index - 1]:
            raise ValueError(f"Step {step.index} writes {step.letter}, expected {output_letters[step.index - 1]}")
        unknown = set(step.reads_inputs) - input_letters
        if unknown:
            raise ValueError(f"Step {step.letter} reads unknown inputs: {sorted(unknown)}")
        pending = [letter for letter in step.reads_outputs if letter not in written]
        if pending:
            raise ValueError(f"Step {step.letter} reads outputs not yet computed: {pending}")
        written.add(step.letter)


check_step_order(FORMULA_STEPS)


def compute_outputs(inputs: Sequence[float] | np.ndarray) -> np.ndarray:
    """Evaluate all nine formulas for the given input vector.

    Args:
        inputs: The 7 input values in canonical order (D, S, B, L, A, T, W).

    Returns:
        Array of the 9 output values in canonical order.
    """
    x = np.asarray(inputs, dtype=np.float64)
    if x.shape != (N_INPUTS,):
        raise ValueError(f"Expected {N_INPUTS} input values, got shape {x.shape}")

    y = np.zeros(N_OUTPUTS, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for step in FORMULA_STEPS:
            y[step.index - 1] = step.fn(x, y)
    return y


def compute(model: ParameterModel) -> np.ndarray:
    """Compute outputs from the model's inputs and store them on the model."""
    y = compute_outputs(model.input_values())
    model.set_output_values(y)
    return y
