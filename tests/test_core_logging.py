"""Tests for the logging helpers with correlation and session ids."""

import json
import logging
import sys
from typing import Any, cast

from pythonjsonlogger import jsonlogger

from wall_of_shame.core.logging import (
    LOG_SCHEMA_VERSION,
    CorrelationIdFilter,
    VersionedJsonFormatter,
    bind_correlation_id,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    get_session_id,
    get_skill_request_id,
    reset_correlation_id,
    skill_request_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="hello",
        args=None,
        exc_info=None,
    )


def test_correlation_filter_attaches_context():
    """Filter should attach the current ids onto log records."""
    cid_token = bind_correlation_id("abc123")
    try:
        with skill_request_context("SessionId.1", "EdwRequestId.1"):
            record = _record()
            assert CorrelationIdFilter().filter(record) is True
            record_any = cast(Any, record)
            assert record_any.correlation_id == "abc123"
            assert record_any.session_id == "SessionId.1"
            assert record_any.skill_request_id == "EdwRequestId.1"
    finally:
        reset_correlation_id(cid_token)


def test_filter_uses_placeholder_when_unbound():
    record = _record()
    CorrelationIdFilter().filter(record)

    assert cast(Any, record).correlation_id == "-"
    assert cast(Any, record).session_id == "-"


def test_context_managers_restore_state():
    """Nested contexts restore the previous values."""
    with correlation_id_context("outer"), correlation_id_context("inner"):
        with skill_request_context("s", "r"):
            assert get_correlation_id() == "inner"
            assert get_session_id() == "s"
            assert get_skill_request_id() == "r"
        assert get_session_id() is None
    assert get_correlation_id() is None


def test_get_logger_installs_json_stream_handler_once():
    first = get_logger("wall_of_shame.tests.logging")
    second = get_logger("wall_of_shame.tests.logging")

    assert first is second
    stream_handlers = [
        handler
        for handler in first.handlers
        if isinstance(handler, logging.StreamHandler)
        and getattr(handler, "stream", None) is sys.stdout
    ]
    assert len(stream_handlers) == 1
    handler = stream_handlers[0]
    assert any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters)
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)


def test_formatter_renames_fields_and_adds_schema_version():
    formatter = VersionedJsonFormatter(
        "%(levelname)s %(message)s %(correlation_id)s",
        rename_fields={"levelname": "level", "correlation_id": "cid"},
        schema_version=LOG_SCHEMA_VERSION,
    )
    record = _record()
    CorrelationIdFilter().filter(record)

    payload = json.loads(formatter.format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "hello"
    assert payload["cid"] == "-"
    assert payload["schema_version"] == LOG_SCHEMA_VERSION
