"""Tests for binit.logger.

Diagnostics must go to stderr so that print mode keeps stdout clean.
"""

import io
import json
import logging
import os
from unittest import mock

import pytest

from binit.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_logger_has_required_methods(self):
        for method in ("debug", "info", "warning", "error", "critical", "get_session_id"):
            assert hasattr(Logger, method)


class TestDefaultLogger:
    """Tests for the DefaultLogger implementation."""

    def test_creates_session_id(self):
        logger = DefaultLogger()
        assert len(logger.get_session_id()) == 36  # UUID format

    def test_writes_to_output(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output)
        logger.warning("error reading input")

        output_str = output.getvalue()
        assert "WARNING" in output_str
        assert "binit:" in output_str
        assert "error reading input" in output_str

    def test_can_disable_timestamp(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output, include_timestamp=False)
        logger.info("Test message")

        assert output.getvalue().startswith("[INFO]")

    def test_formats_kwargs(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output, include_timestamp=False)
        logger.error("bad file", path="x.ini", line=3)

        assert output.getvalue().strip() == "[ERROR] binit: bad file (path=x.ini line=3)"

    def test_respects_level(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output, level="WARNING")
        logger.debug("hidden")
        logger.info("hidden too")
        logger.warning("shown")

        output_str = output.getvalue()
        assert "hidden" not in output_str
        assert "shown" in output_str


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_writes_to_stderr_not_stdout(self, capsys):
        logger = StructuredLogger(name="binit-test-stream")
        logger.warning("diagnostic")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "binit-test-stream: [WARNING] diagnostic" in captured.err

    def test_default_level_is_warning(self, capsys):
        logger = StructuredLogger(name="binit-test-level")
        logger.info("not shown")
        logger.warning("shown")

        captured = capsys.readouterr()
        assert "not shown" not in captured.err
        assert "shown" in captured.err

    def test_text_appends_kwargs(self, capsys):
        logger = StructuredLogger(name="binit-test-kwargs")
        logger.error("error parsing INI", path="a.ini", line=4)

        captured = capsys.readouterr()
        assert "path=a.ini" in captured.err
        assert "line=4" in captured.err

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="binit-test-json", json_format=True)
        logger.error("bad pattern", pattern="A[*")

        entry = json.loads(capsys.readouterr().err.strip())
        assert entry["message"] == "bad pattern"
        assert entry["level"] == "ERROR"
        assert entry["pattern"] == "A[*"
        assert entry["session_id"] == logger.get_session_id()

    def test_reserved_kwargs_are_prefixed(self, capsys):
        logger = StructuredLogger(name="binit-test-reserved", json_format=True)
        logger.warning("reserved", name="clash")

        entry = json.loads(capsys.readouterr().err.strip())
        assert entry["_name"] == "clash"
        assert entry["logger"] == "binit-test-reserved"

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "binit.log"
        logger = StructuredLogger(name="binit-test-file", log_file=str(log_file))
        logger.warning("to file")

        for handler in logger._logger.handlers:
            handler.flush()
        assert "to file" in log_file.read_text()

    def test_reinit_does_not_duplicate_handlers(self):
        StructuredLogger(name="binit-test-dup")
        logger = StructuredLogger(name="binit-test-dup")
        assert len(logger._logger.handlers) == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger."""

    def test_create_logger_returns_logger(self):
        assert isinstance(create_logger(name="binit-factory"), Logger)

    def test_create_logger_respects_level(self, capsys):
        logger = create_logger(name="binit-factory-level", level=logging.DEBUG)
        logger.debug("debug shown")

        assert "debug shown" in capsys.readouterr().err

    def test_get_logger_reads_env_level(self, capsys):
        with mock.patch.dict(os.environ, {"BINIT_ENVTEST_LOG_LEVEL": "ERROR"}):
            logger = get_logger("binit-envtest")
            logger.warning("not shown")
            logger.error("shown")

        captured = capsys.readouterr()
        assert "not shown" not in captured.err
        assert "shown" in captured.err

    def test_get_logger_reads_env_json(self, capsys):
        with mock.patch.dict(os.environ, {"BINIT_JSONENV_LOG_FORMAT": "json"}):
            logger = get_logger("binit-jsonenv")
            logger.warning("json env")

        entry = json.loads(capsys.readouterr().err.strip())
        assert entry["message"] == "json env"

    def test_env_prefix_conversion(self):
        with mock.patch.dict(os.environ, {"BINIT_PREFIX_LOG_LEVEL": "DEBUG"}):
            logger = get_logger("binit-prefix")
            assert logger._logger.level == logging.DEBUG

    def test_get_logger_reuses_created_logger(self, capsys):
        created = create_logger(name="binit-shared", level=logging.DEBUG)

        reused = get_logger("binit-shared")
        reused.debug("still debug")

        assert reused is created
        assert get_logger("binit-shared") is created
        assert len(created._logger.handlers) == 1
        assert "still debug" in capsys.readouterr().err

    def test_create_logger_replaces_shared_logger(self):
        first = create_logger(name="binit-replaced")
        second = create_logger(name="binit-replaced", level=logging.ERROR)

        assert get_logger("binit-replaced") is second
        assert second is not first

