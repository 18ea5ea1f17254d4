"""Tests for structured logging utilities."""

import json
import logging
from pathlib import Path

import pytest

from timelog_report.config.logging_config import LoggingConfig, configure_logging, reset_logging
from timelog_report.utils.logging_utils import LogContext, get_log_context, log_function_call


class TestLogContext:
    """Test LogContext context manager."""

    def teardown_method(self):
        """Reset logging after each test."""
        reset_logging()

    def test_context_adds_fields_to_logs(self, tmp_path):
        """Test context manager adds fields to log records."""
        log_file = Path(tmp_path) / "test.log"
        configure_logging(
            LoggingConfig(
                log_level="INFO",
                log_format="json",
                log_file=str(log_file),
                enable_console=False,
                enable_file=True,
            )
        )

        with LogContext(project="group/app", command="summarize"):
            logging.getLogger("timelog_report.test").info("Building report")
        logging.getLogger("timelog_report.test").info("Done")

        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[0]["project"] == "group/app"
        assert lines[0]["command"] == "summarize"
        assert "project" not in lines[1]

    def test_nested_contexts_merge_and_restore(self):
        with LogContext(project="group/app"):
            with LogContext(command="weekly"):
                assert get_log_context() == {"project": "group/app", "command": "weekly"}
            assert get_log_context() == {"project": "group/app"}
        assert get_log_context() == {}

    def test_context_restored_on_exception(self):
        with pytest.raises(RuntimeError):
            with LogContext(project="group/app"):
                raise RuntimeError("boom")

        assert get_log_context() == {}

    def test_get_log_context_returns_copy(self):
        with LogContext(project="group/app"):
            get_log_context()["project"] = "changed"
            assert get_log_context()["project"] == "group/app"


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_logs_entry_and_exit(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(1, 2) == 3

        messages = [r.getMessage() for r in caplog.records]
        assert "Entering add" in messages
        assert "Exiting add" in messages

    def test_include_args(self, caplog):
        @log_function_call(include_args=True, level="INFO")
        def greet(name, punctuation="!"):
            return f"Hello {name}{punctuation}"

        with caplog.at_level(logging.INFO):
            greet("Alice", punctuation="?")

        assert any(
            "Entering greet with args: 'Alice', punctuation='?'" in r.getMessage()
            for r in caplog.records
        )

    def test_exception_is_logged_and_reraised(self, caplog):
        @log_function_call
        def fail():
            raise ValueError("bad input")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError, match="bad input"):
                fail()

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert errors[0].getMessage() == "Exception in fail: ValueError: bad input"

    def test_preserves_metadata(self):
        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
