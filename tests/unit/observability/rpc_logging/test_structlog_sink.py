"""Unit tests for StructlogSink and the in-memory test sink."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from rpc_observability.observability.rpc_logging import (
    EventLogger,
    EventType,
    LogLevel,
    LogRecord,
    Sink,
    StructlogSink,
    Timestamp,
)
from rpc_observability.testing.fakes import InMemorySink


def _record(level: LogLevel = LogLevel.DEBUG) -> LogRecord:
    return LogRecord(
        timestamp=Timestamp(1, 0),
        sequence_id=7,
        service_name="pkg.Service",
        method_name="Call",
        rpc_id="rpc-1",
        event_type=EventType.CANCEL,
        event_logger=EventLogger.SERVER,
        log_level=level,
    )


class TestStructlogSink:
    def test_is_a_sink(self) -> None:
        assert isinstance(StructlogSink(MagicMock()), Sink)

    def test_emits_record_under_event_name(self) -> None:
        log = MagicMock()
        record = _record()
        StructlogSink(log, event="rpc.logged").write(record)
        log.debug.assert_called_once_with("rpc.logged", record=record.to_dict())

    @pytest.mark.parametrize(
        ("level", "method"),
        [
            (LogLevel.TRACE, "debug"),
            (LogLevel.DEBUG, "debug"),
            (LogLevel.INFO, "info"),
            (LogLevel.WARN, "warning"),
            (LogLevel.ERROR, "error"),
            (LogLevel.CRITICAL, "critical"),
            (LogLevel.UNKNOWN, "info"),
        ],
    )
    def test_level_mapping(self, level: LogLevel, method: str) -> None:
        log = MagicMock()
        StructlogSink(log).write(_record(level))
        getattr(log, method).assert_called_once()

    def test_logger_failure_is_swallowed(self) -> None:
        log = MagicMock()
        log.debug.side_effect = RuntimeError("broken pipe")
        StructlogSink(log).write(_record())

    def test_write_after_close_is_dropped(self) -> None:
        log = MagicMock()
        sink = StructlogSink(log)
        sink.close()
        sink.close()
        sink.write(_record())
        log.debug.assert_not_called()


class TestInMemorySink:
    def test_collects_and_filters(self) -> None:
        sink = InMemorySink()
        sink.write(_record())
        assert sink.last.rpc_id == "rpc-1"
        assert sink.of_type(EventType.CANCEL) == sink.records
        assert sink.of_rpc("other") == []

    def test_close_counts_and_stops_collecting(self) -> None:
        sink = InMemorySink()
        sink.close()
        sink.close()
        sink.write(_record())
        assert sink.close_calls == 2
        assert sink.closed is True
        assert sink.records == []

    def test_clear(self) -> None:
        sink = InMemorySink()
        sink.write(_record())
        sink.clear()
        assert sink.records == []
