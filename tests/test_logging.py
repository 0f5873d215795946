"""Tests for logging and timing utilities."""

import io
import json
import logging

import pytest
from flatkeys.utils.logging_config import get_logger, setup_logging
from flatkeys.utils.timing import timed_operation


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_plain_format(self, restore_root_logger):
        """Test plain text output."""
        stream = io.StringIO()
        setup_logging(level="info", stream=stream)

        get_logger("test").info("hello")

        line = stream.getvalue().strip()
        assert "INFO" in line
        assert "flatkeys.test: hello" in line

    def test_json_format_includes_extra(self, restore_root_logger):
        """Test JSON output carries extra fields."""
        stream = io.StringIO()
        setup_logging(level="DEBUG", json_format=True, stream=stream)

        get_logger("test").debug("flattened", extra={"key_count": 3})

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "flattened"
        assert data["level"] == "DEBUG"
        assert data["logger"] == "flatkeys.test"
        assert data["key_count"] == 3
        assert "timestamp" in data

    def test_level_filters(self, restore_root_logger):
        """Test records below the level are dropped."""
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)

        get_logger("test").info("hidden")

        assert stream.getvalue() == ""

    def test_repeat_setup_replaces_handler(self, restore_root_logger):
        """Test calling setup twice does not duplicate output."""
        first = io.StringIO()
        second = io.StringIO()
        setup_logging(stream=first)
        logger = setup_logging(stream=second)

        get_logger("test").warning("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
        assert len([h for h in logger.handlers if getattr(h, "_flatkeys_handler", False)]) == 1


class TestGetLogger:
    """Tests for logger naming."""

    def test_namespaced(self):
        """Test names are placed under flatkeys."""
        assert get_logger("x").name == "flatkeys.x"
        assert get_logger("flatkeys.transform").name == "flatkeys.transform"
        assert get_logger().name == "flatkeys"


class TestTimedOperation:
    """Tests for operation timing."""

    def test_duration_recorded(self):
        """Test duration is set when the block exits."""
        with timed_operation("work") as timer:
            assert timer.end_time is None

        assert timer.end_time is not None
        assert timer.duration_ms >= 0

    def test_logs_completion(self, caplog):
        """Test completion is logged at DEBUG."""
        logger = get_logger("timing")

        with caplog.at_level(logging.DEBUG, logger="flatkeys"):
            with timed_operation("work", logger):
                pass

        record = caplog.records[-1]
        assert record.operation == "work"
        assert "work" in record.getMessage()

    def test_duration_recorded_on_error(self):
        """Test timing still completes when the block raises."""
        with pytest.raises(RuntimeError):
            with timed_operation("boom") as timer:
                raise RuntimeError("boom")

        assert timer.end_time is not None

    def test_logs_extra_fields(self, caplog):
        """Test fields set on the timer are logged with the duration."""
        logger = get_logger("timing")

        with caplog.at_level(logging.DEBUG, logger="flatkeys"):
            with timed_operation("work", logger) as timer:
                timer.extra["record_count"] = 5

        record = caplog.records[-1]
        assert record.record_count == 5
        assert record.duration_ms == timer.duration_ms
