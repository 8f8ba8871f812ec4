"""Per-session calculator state.

A Session is created once at startup and handed to the presentation layer. It
owns the parameter model, the "a save has been loaded" flag and the result of
the last calculation, so none of that lives in module globals.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .config import ValveGearConfig, default_config
from .evaluator import evaluate
from .logging import get_logger
from .parameters import ParameterModel
from .text_io import load_inputs, save_inputs, save_outputs
from .types import CalcResult, LoadResult, LoadStatus, SaveResult, SaveStatus
from .validation import can_export

logger = get_logger(__name__)


@dataclass
class Session:
    """Calculator session.

    Attributes:
        model: Inputs and outputs being worked on.
        config: Storage and logging configuration.
        has_save: True once an inputs file has been loaded successfully.
        last_result: Result of the most recent ``calculate`` call.
    """

    model: ParameterModel = field(default_factory=ParameterModel)
    config: ValveGearConfig = field(default_factory=default_config)
    has_save: bool = False
    last_result: CalcResult | None = None

    def ensure_directories(self) -> None:
        """Create the inputs and outputs directories if missing."""
        storage = self.config.storage
        for directory in (storage.inputs_path.parent, storage.outputs_path.parent):
            directory.mkdir(parents=True, exist_ok=True)

    def enter_inputs(self, values: Mapping[str, float] | Sequence[float]) -> None:
        """Manual entry.

        Args:
            values: Either all 7 values in index order, or a mapping keyed by
                input letter or canonical name (only the given inputs change).
        """
        if isinstance(values, Mapping):
            for key, value in values.items():
                try:
                    item = self.model.input_by_letter(key)
                except KeyError:
                    item = self.model.input_by_name(key)
                item.value = float(value)
        else:
            self.model.set_input_values(values)

    def load(self) -> LoadResult:
        result = load_inputs(self.model, self.config.storage.inputs_path)
        self.has_save = result.status is LoadStatus.LOADED
        return result

    def calculate(self) -> CalcResult:
        self.last_result = evaluate(self.model)
        return self.last_result

    def save(self) -> SaveResult:
        """Write the inputs file, then the outputs file.

        Refused until a calculation has produced data. Each file is written
        independently; a failure on one is reported without undoing the other.
        """
        if not can_export(self.model):
            logger.warn("save refused, no computed data")
            return SaveResult(status=SaveStatus.NO_DATA)

        storage = self.config.storage
        result = SaveResult(status=SaveStatus.SAVED)
        targets = (
            ("inputs", save_inputs, storage.inputs_path),
            ("outputs", save_outputs, storage.outputs_path),
        )
        for target, writer, path in targets:
            try:
                result.written.append(writer(self.model, path, storage.precision))
            except OSError as exc:
                logger.error(f"Error saving {target} file.", path=str(path), error=str(exc))
                result.errors[target] = str(exc)

        if result.errors:
            result.status = SaveStatus.PARTIAL if result.written else SaveStatus.FAILED
        return result
