"""Core module: parameter model, formulas, validation, text persistence."""

from .evaluator import evaluate
from .formulas import FORMULA_STEPS, compute, compute_outputs
from .parameters import INPUT_NAMES, OUTPUT_NAMES, InputField, OutputField, ParameterModel
from .session import Session
from .text_io import load_inputs, parse_leading_float, save_inputs, save_outputs
from .types import CalcResult, CalcStatus, LoadResult, LoadStatus, SaveResult, SaveStatus
from .validation import can_export, check_inputs, check_outputs

__all__ = [
    "InputField",
    "OutputField",
    "ParameterModel",
    "INPUT_NAMES",
    "OUTPUT_NAMES",
    "FORMULA_STEPS",
    "compute",
    "compute_outputs",
    "check_inputs",
    "check_outputs",
    "can_export",
    "load_inputs",
    "save_inputs",
    "save_outputs",
    "parse_leading_float",
    "evaluate",
    "Session",
    "CalcResult",
    "CalcStatus",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    "SaveStatus",
]
