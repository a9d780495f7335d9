"""Tests for structured logging."""

import json
import logging
import sys

import pytest

from xpinstall.logging_config import (
    DetailedFormatter,
    LogContext,
    SimpleFormatter,
    StructuredFormatter,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg="hello", **attrs):
    record = logging.LogRecord("xpinstall.test", logging.INFO, __file__, 10, msg, (), None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test JSON log output."""

    def test_basic_fields(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "xpinstall.test"
        assert data["message"] == "hello"

    def test_extra_fields(self):
        data = json.loads(StructuredFormatter().format(_record(extra_fields={"addon_id": "a@b"})))
        assert data["addon_id"] == "a@b"

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        data = json.loads(StructuredFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"


class TestSetupLogging:
    """Test handler configuration."""

    @pytest.mark.parametrize(
        "fmt, formatter",
        [("json", StructuredFormatter), ("detailed", DetailedFormatter), ("simple", SimpleFormatter)],
    )
    def test_console_formatter(self, restore_root_logger, fmt, formatter):
        setup_logging(level="debug", format=fmt)

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, formatter)

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "xpinstall.log"
        setup_logging(log_file=log_file)

        logging.getLogger("xpinstall.test").warning("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert log_file.exists()
        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written"


class TestLogContext:
    """Test contextual fields."""

    def test_fields_added_and_removed(self):
        logger = logging.getLogger("xpinstall.test")
        factory = logging.getLogRecordFactory()

        with LogContext(logger, addon_id="a@b"):
            record = logging.getLogRecordFactory()("n", logging.INFO, "p", 1, "m", (), None)
            assert record.context_fields == {"addon_id": "a@b"}

        assert logging.getLogRecordFactory() is factory

    def test_combines_with_extra(self, caplog):
        """Per-call extra fields can be used inside a context."""
        logger = logging.getLogger("xpinstall.test")

        with caplog.at_level(logging.INFO, logger="xpinstall.test"):
            with LogContext(logger, install_dir="/ext"):
                logger.info("installed", extra={"extra_fields": {"addon_id": "a@b"}})

        record = caplog.records[-1]
        data = json.loads(StructuredFormatter().format(record))
        assert data["install_dir"] == "/ext"
        assert data["addon_id"] == "a@b"
