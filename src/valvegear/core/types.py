"""Result types returned by the calculate, load and save operations.

Every operation hands control back to the caller with one of these objects;
none of the failure states below is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np


class CalcStatus(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    INVALID_OUTPUT = "invalid_output"


class LoadStatus(str, Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"


class SaveStatus(str, Enum):
    SAVED = "saved"
    PARTIAL = "partial"
    FAILED = "failed"
    NO_DATA = "no_data"


@dataclass
class CalcResult:
    """Result of one calculation.

    Attributes:
        status: Outcome of the input gate and output sanity check.
        inputs: Input values used. Shape: (7,)
        outputs: Output values stored on the model. Shape: (9,)
            Left untouched (as they were before the call) on INVALID_INPUT.
        failed_index: 1-based index of the offending input or output, if any.
        failed_name: Canonical name of the offending field, if any.
        message: User-facing description of the failure ("" on success).
        diag: Diagnostics (timings in ms).
    """

    status: CalcStatus
    inputs: np.ndarray
    outputs: np.ndarray
    failed_index: int | None = None
    failed_name: str | None = None
    message: str = ""
    diag: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.inputs = np.asarray(self.inputs, dtype=np.float64)
        self.outputs = np.asarray(self.outputs, dtype=np.float64)

    @property
    def is_successful(self) -> bool:
        return self.status is CalcStatus.OK

    @property
    def computed(self) -> bool:
        """True if the formulas ran (even when an output came out negative)."""
        return self.status is not CalcStatus.INVALID_INPUT


@dataclass
class LoadResult:
    """Result of loading inputs from a text file.

    Attributes:
        status: LOADED if the source could be read, NOT_FOUND otherwise.
        path: Source that was read.
        matched: Names of inputs whose label was found.
        unmatched: Names of inputs left unchanged.
        fallbacks: Matched names whose value failed to parse and became 0.0.
    """

    status: LoadStatus
    path: Path | None = None
    matched: list[str] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)
    fallbacks: list[str] = field(default_factory=list)

    @property
    def loaded(self) -> bool:
        return self.status is LoadStatus.LOADED

    @property
    def message(self) -> str:
        if self.status is LoadStatus.NOT_FOUND:
            return "No file found."
        return f"Loaded {len(self.matched)} of {len(self.matched) + len(self.unmatched)} inputs."


@dataclass
class SaveResult:
    """Result of saving inputs and outputs.

    The two targets are written independently; a failure on one does not roll
    back the other.
    """

    status: SaveStatus
    written: list[Path] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.SAVED

    @property
    def message(self) -> str:
        if self.status is SaveStatus.NO_DATA:
            return "No valid data found; cannot save until calculations have been made."
        if self.status is SaveStatus.SAVED:
            return "Saved inputs and outputs."
        return "; ".join(f"Error saving {target} file: {err}" for target, err in self.errors.items())
