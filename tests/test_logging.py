"""Test structured logging."""

import io
import json

import pytest

from valvegear.core.logging import StructuredLogger, get_logger, set_log_level


def test_json_records():
    buf = io.StringIO()
    logger = StructuredLogger("test", output=buf, min_level="DEBUG")
    logger.info("hello", value=1.5)

    record = json.loads(buf.getvalue())
    assert record["level"] == "INFO"
    assert record["message"] == "hello"
    assert record["logger"] == "test"
    assert record["value"] == 1.5


def test_level_filter():
    buf = io.StringIO()
    logger = StructuredLogger("test", output=buf, min_level="WARN")
    logger.info("dropped")
    logger.error("kept")

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["level"] == "ERROR"


def test_timer_records_elapsed():
    logger = StructuredLogger("test", output=io.StringIO())
    timings = {}
    with logger.timer("work", timings):
        pass
    assert timings["work_ms"] >= 0


def test_set_log_level_applies_to_cached_loggers():
    logger = get_logger("valvegear.test_logging")
    try:
        set_log_level("DEBUG")
        assert logger._min_level == 0
        assert get_logger("valvegear.test_logging.other")._min_level == 0
    finally:
        set_log_level("WARN")


def test_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        set_log_level("LOUD")
