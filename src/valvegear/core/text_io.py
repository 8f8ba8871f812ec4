"""Label-based text persistence for parameter values.

File format, one record per line:

    <Canonical Name>: <value>

Writing overwrites the target file in place. Reading is tolerant: for each
input the first line that starts (at column 0) with ``"<name>:"`` wins, a
leading float literal is parsed from the rest of the line, and unmatched
inputs keep their current value.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from .constants import LABEL_SEPARATOR
from .logging import get_logger
from .parameters import ParameterModel
from .types import LoadResult, LoadStatus

logger = get_logger(__name__)

# Leading decimal float literal: sign, digits with optional fraction, optional exponent.
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def format_value(value: float, precision: int | None = None) -> str:
    """Render a value for the text file.

    ``precision=None`` gives Python's shortest exact repr; an integer gives
    that many significant digits (``%g`` style).
    """
    value = float(value)
    if precision is None:
        return repr(value)
    return f"{value:.{precision}g}"


def format_records(pairs: Iterable[tuple[str, float]], precision: int | None = None) -> list[str]:
    """Build ``"<name>: <value>"`` lines for ``(name, value)`` pairs."""
    return [f"{name}{LABEL_SEPARATOR} {format_value(value, precision)}" for name, value in pairs]


def write_records(
    path: Path | str,
    pairs: Iterable[tuple[str, float]],
    precision: int | None = None,
) -> Path:
    """Overwrite ``path`` with one line per record. OSError propagates."""
    path = Path(path)
    lines = format_records(pairs, precision)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    logger.debug("wrote records", path=str(path), n_records=len(lines))
    return path


def save_inputs(model: ParameterModel, path: Path | str, precision: int | None = None) -> Path:
    """Write the 7 inputs in index order."""
    return write_records(path, ((item.name, item.value) for _, item in model.iter_inputs()), precision)


def save_outputs(model: ParameterModel, path: Path | str, precision: int | None = None) -> Path:
    """Write the 9 outputs in index order."""
    return write_records(path, ((item.name, item.value) for _, item in model.iter_outputs()), precision)


def parse_leading_float(text: str) -> float | None:
    """Parse a float literal at the start of ``text`` (after leading whitespace).

    Trailing text is ignored: ``"20.5 extra text"`` gives 20.5.

    Returns:
        The parsed value, or None if no literal is present.
    """
    match = _FLOAT_RE.match(text.lstrip())
    if match is None:
        return None
    return float(match.group(0))


def apply_lines(model: ParameterModel, lines: Sequence[str], source: Path | None = None) -> LoadResult:
    """Update input values from already-read text lines.

    Matching is case-sensitive and exact: no whitespace is allowed between the
    name and the colon. A matched label whose value fails to parse sets the
    input to 0.0.
    """
    result = LoadResult(status=LoadStatus.LOADED, path=source)

    for _, item in model.iter_inputs():
        key = item.name + LABEL_SEPARATOR
        for line in lines:
            if not line.startswith(key):
                continue
            value = parse_leading_float(line.split(LABEL_SEPARATOR, 1)[1])
            if value is None:
                value = 0.0
                result.fallbacks.append(item.name)
                logger.debug("unparseable value, using 0.0", name=item.name, line=line)
            item.value = value
            result.matched.append(item.name)
            break
        else:
            result.unmatched.append(item.name)

    return result


def load_inputs(model: ParameterModel, path: Path | str) -> LoadResult:
    """Load input values from a text file.

    If the file cannot be opened the model is left untouched and the result
    status is NOT_FOUND.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError as exc:
        logger.warn("No file found.", path=str(path), error=str(exc))
        return LoadResult(status=LoadStatus.NOT_FOUND, path=path)

    result = apply_lines(model, lines, source=path)
    logger.info(
        "loaded inputs",
        path=str(path),
        matched=len(result.matched),
        unmatched=result.unmatched,
        fallbacks=result.fallbacks,
    )
    return result
