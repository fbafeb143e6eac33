"""Tests for phantommask.core.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from phantommask.core.logging import (
    REDACTED,
    JSONFormatter,
    OperationLogger,
    StandardFormatter,
    configure_logging,
    correlation_context,
    generate_correlation_id,
    get_correlation_id,
    redact,
    set_correlation_id,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(msg: str = "hello", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("phantommask.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# ============================================================================
# Correlation ID Tests
# ============================================================================


class TestCorrelationId:
    """Tests for correlation ID functionality."""

    def test_default_none(self):
        set_correlation_id(None)
        assert get_correlation_id() is None

    def test_generate_unique(self):
        id1 = generate_correlation_id()
        id2 = generate_correlation_id()
        assert id1 != id2
        assert len(id1) == 36

    def test_context_sets_and_resets(self):
        set_correlation_id(None)
        with correlation_context("abc") as cid:
            assert cid == "abc"
            assert get_correlation_id() == "abc"
        assert get_correlation_id() is None


# ============================================================================
# Redaction
# ============================================================================


class TestRedact:
    """Tests for key-material redaction."""

    def test_private_keys_redacted(self):
        data = {"masterPrivateKey": "abc", "derivedPrivateKey": "def", "appId": "app"}
        result = redact(data)
        assert result["masterPrivateKey"] == REDACTED
        assert result["derivedPrivateKey"] == REDACTED
        assert result["appId"] == "app"

    def test_public_key_kept(self):
        assert redact({"publicKey": "pub"}) == {"publicKey": "pub"}
        assert redact({"public_key": "pub"}) == {"public_key": "pub"}

    def test_signature_redacted(self):
        assert redact({"signature": "sig"}) == {"signature": REDACTED}

    def test_nested(self):
        result = redact({"outer": [{"secret": "s", "n": 1}]})
        assert result == {"outer": [{"secret": REDACTED, "n": 1}]}

    def test_long_strings_truncated(self):
        result = redact({"message": "x" * 500})
        assert result["message"].endswith("...")
        assert len(result["message"]) == 203

    def test_input_not_mutated(self):
        data = {"privateKey": "abc"}
        redact(data)
        assert data == {"privateKey": "abc"}


# ============================================================================
# Formatters
# ============================================================================


class TestJSONFormatter:
    def test_basic_fields(self):
        output = json.loads(JSONFormatter().format(_record()))
        assert output["level"] == "INFO"
        assert output["logger"] == "phantommask.test"
        assert output["message"] == "hello"
        assert "source" not in output

    def test_warning_has_source(self):
        output = json.loads(JSONFormatter().format(_record(level=logging.WARNING)))
        assert output["source"]["line"] == 1

    def test_extra_data_is_redacted(self):
        record = _record(extra_data={"arguments": {"masterPrivateKey": "k", "appIdLength": 3}})
        output = json.loads(JSONFormatter().format(record))
        assert output["extra"]["arguments"]["masterPrivateKey"] == REDACTED
        assert output["extra"]["arguments"]["appIdLength"] == 3

    def test_correlation_id_included(self):
        with correlation_context("cid-123"):
            output = json.loads(JSONFormatter().format(_record()))
        assert output["correlation_id"] == "cid-123"


class TestStandardFormatter:
    def test_plain_output(self):
        formatter = StandardFormatter(use_colors=False)
        output = formatter.format(_record())
        assert "phantommask.test - INFO - hello" in output

    def test_correlation_prefix(self):
        formatter = StandardFormatter(use_colors=False)
        with correlation_context("abcdef123456"):
            output = formatter.format(_record())
        assert "[abcdef12] hello" in output


# ============================================================================
# configure_logging
# ============================================================================


class TestConfigureLogging:
    def test_explicit_level_and_format(self, restore_root_logger):
        configure_logging(level="DEBUG", json_format=True)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_level_from_env(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("PHANTOMMASK_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PHANTOMMASK_LOG_FORMAT", "text")
        configure_logging()
        root = restore_root_logger
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, StandardFormatter)

    def test_log_file_uses_json(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "pm.log"
        configure_logging(level="INFO", json_format=False, log_file=str(log_file))
        root = restore_root_logger
        assert len(root.handlers) == 2
        assert isinstance(root.handlers[1].formatter, JSONFormatter)
        root.handlers[1].close()


# ============================================================================
# OperationLogger
# ============================================================================


class TestOperationLogger:
    def test_log_call_redacts_arguments(self):
        logger = logging.getLogger("phantommask.test.operations")
        records: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Collect()
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            OperationLogger(logger).log_call("derive", {"masterPrivateKey": "secret", "appIdLength": 4})
        finally:
            logger.removeHandler(handler)

        assert records[0].getMessage() == "Operation call: derive"
        assert records[0].extra_data["arguments"]["masterPrivateKey"] == REDACTED

    def test_log_result_message(self):
        logger = logging.getLogger("phantommask.test.results")
        records: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Collect()
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            OperationLogger(logger).log_result("sign", False, duration_ms=2.0)
        finally:
            logger.removeHandler(handler)

        assert records[0].getMessage() == "Operation result: sign -> failure (2.0ms)"
