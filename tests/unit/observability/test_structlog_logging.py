"""Unit tests for structured logging helpers."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from dataselect.config.settings import SelectionSettings
from dataselect.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)
from dataselect.selection import (
    FilterQuery,
    QueryDescriptor,
    QueryExecutor,
    parse_query_params,
)
from dataselect.testing import SampleRecord, SampleRecordAdapter


class TestSensitiveFieldsFilter:
    def test_secret_payload_redacted_by_default(self) -> None:
        assert "data" in DEFAULT_SENSITIVE_FIELDS
        result = SensitiveFieldsFilter().redact({"data": {"k": "v"}, "name": "db"})
        assert result == {"data": SensitiveFieldsFilter.REDACTED, "name": "db"}

    def test_case_insensitive_keys(self) -> None:
        result = SensitiveFieldsFilter().redact({"Password": "x"})
        assert result["Password"] == SensitiveFieldsFilter.REDACTED

    def test_redact_deep(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"secret": {"name": "a", "token": "t"}})
        assert result == {"secret": SensitiveFieldsFilter.REDACTED}
        nested = SensitiveFieldsFilter().redact_deep({"meta": {"name": "a", "token": "t"}})
        assert nested == {"meta": {"name": "a", "token": SensitiveFieldsFilter.REDACTED}}

    def test_processor_interface(self) -> None:
        processor = SensitiveFieldsFilter(frozenset({"pin"}))
        assert processor(None, "info", {"event": "e", "pin": "1234"}) == {
            "event": "e",
            "pin": SensitiveFieldsFilter.REDACTED,
        }


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="selection").info("hello")
        assert logs[0]["event"] == "hello"
        assert logs[0]["component"] == "selection"


class TestPipelineLogging:
    def test_executor_emits_counts(self) -> None:
        records = [SampleRecord(id=0, status="ok"), SampleRecord(id=1, status="err")]
        query = QueryDescriptor(filters=(FilterQuery("status", "ok"),))
        with capture_logs() as logs:
            QueryExecutor(SampleRecordAdapter()).execute(records, query)
        event = next(e for e in logs if e["event"] == "dataselect.executed")
        assert event["kind"] == "sample"
        assert event["total_before_filter"] == 2
        assert event["total_after_filter"] == 1
        assert event["returned"] == 1

    def test_malformed_param_logged_as_warning(self) -> None:
        with capture_logs() as logs:
            parse_query_params({"page": "abc"})
        warning = next(e for e in logs if e["event"] == "query_params.invalid_integer")
        assert warning["log_level"] == "warning"
        assert warning["param"] == "page"


class TestJsonLoggerFactory:
    def test_configure_installs_single_root_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.configure(logging.DEBUG)
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()

    def test_from_settings(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.from_settings(SelectionSettings(log_level="warning", log_json=False))
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()
