"""Calculation flow.

Interface:
    evaluate(model) -> CalcResult

Flow:
    1. check_inputs(model)   - abort before any formula if an input is <= 0
    2. compute(model)        - all nine formulas, stored on the model
    3. check_outputs(model)  - flag negative outputs; values stay stored
    4. Return CalcResult with diagnostics
"""

from __future__ import annotations

import time

from .formulas import compute
from .logging import get_logger
from .parameters import ParameterModel
from .types import CalcResult, CalcStatus
from .validation import check_inputs, check_outputs

logger = get_logger(__name__)


def evaluate(model: ParameterModel) -> CalcResult:
    """Validate, compute and sanity-check one set of inputs.

    Args:
        model: Parameter model with inputs populated. Outputs are overwritten
            unless the input gate fails.

    Returns:
        CalcResult describing the outcome.
    """
    t0 = time.perf_counter()
    timings: dict[str, float] = {}

    input_check = check_inputs(model)
    if not input_check.ok:
        logger.warn(
            "input validation failed",
            index=input_check.failed_index,
            name=input_check.failed_name,
            value=input_check.value,
        )
        return CalcResult(
            status=CalcStatus.INVALID_INPUT,
            inputs=model.input_values(),
            outputs=model.output_values(),
            failed_index=input_check.failed_index,
            failed_name=input_check.failed_name,
            message=input_check.message,
            diag={"timings": {"total_ms": (time.perf_counter() - t0) * 1000}},
        )

    with logger.timer("compute", timings):
        outputs = compute(model)

    output_check = check_outputs(model)
    timings["total_ms"] = (time.perf_counter() - t0) * 1000

    if not output_check.ok:
        logger.warn(
            "output sanity check failed",
            index=output_check.failed_index,
            name=output_check.failed_name,
            value=output_check.value,
        )
        return CalcResult(
            status=CalcStatus.INVALID_OUTPUT,
            inputs=model.input_values(),
            outputs=outputs,
            failed_index=output_check.failed_index,
            failed_name=output_check.failed_name,
            message=output_check.message,
            diag={"timings": timings},
        )

    logger.info("calculation completed", outputs=outputs.tolist())
    return CalcResult(
        status=CalcStatus.OK,
        inputs=model.input_values(),
        outputs=outputs,
        message="Calculations completed successfully.",
        diag={"timings": timings},
    )
