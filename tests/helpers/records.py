"""Logging helpers shared by unit tests."""

from __future__ import annotations

import sys
import logging
import itertools
from typing import Any

_logger_ids = itertools.count(1)


class RecordingHandler(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []
        self.flushed = 0
        self.closed = False

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def flush(self) -> None:
        self.flushed += 1

    def close(self) -> None:
        self.closed = True
        super().close()

    @property
    def last(self) -> logging.LogRecord:
        assert self.records, "no record was emitted"
        return self.records[-1]


class RecordingProvider:
    """Stand-in for an OpenTelemetry LoggerProvider."""

    def __init__(self) -> None:
        self.flushes = 0
        self.shutdowns = 0

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        self.flushes += 1
        return True

    def shutdown(self) -> None:
        self.shutdowns += 1


class CapturingLogExporter:
    """OpenTelemetry log exporter keeping exported records in memory."""

    def __init__(self) -> None:
        self.exported: list[Any] = []

    def export(self, batch: Any) -> Any:
        from opentelemetry.sdk._logs.export import LogExportResult  # noqa: PLC0415

        self.exported.extend(batch)
        return LogExportResult.SUCCESS

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True

    def shutdown(self) -> None:
        pass


def isolated_logger(handler: logging.Handler | None = None) -> logging.Logger:
    """Return a fresh non-propagating DEBUG logger with ``handler`` attached."""
    logger = logging.getLogger(f"tests.isolated.{next(_logger_ids)}")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    if handler is not None:
        logger.addHandler(handler)
    return logger


def make_record(msg: str = "message", *, exc: BaseException | None = None, **extra: Any) -> logging.LogRecord:
    """Build a LogRecord, optionally carrying ``exc`` as exc_info."""
    exc_info = None
    if exc is not None:
        try:
            raise exc
        except BaseException:  # noqa: BLE001
            exc_info = sys.exc_info()
    record = logging.LogRecord("tests", logging.ERROR, __file__, 1, msg, (), exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


__all__ = ["CapturingLogExporter", "RecordingHandler", "RecordingProvider", "isolated_logger", "make_record"]
