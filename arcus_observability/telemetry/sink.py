"""Application Insights sink.

``ApplicationInsightsSink`` is the ``logging.Handler`` applications attach
to their loggers. It prepares each record for Application Insights and
forwards it to the wrapped telemetry handler, the OpenTelemetry
``LoggingHandler`` in production, which owns batching and transmission.

Preparation works on a shallow copy so other handlers keep seeing the
record as it was logged:

1. exception properties are flattened into custom dimensions when
   ``options.exception.include_properties`` is set;
2. custom properties that are not primitive values are rendered with
   ``str`` (OpenTelemetry drops attributes of other types);
3. the explicit ``correlation_info`` carrier is removed.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Protocol

from ..errors import require_not_none
from ..config.properties import CORRELATION_INFO_ATTRIBUTE
from .options import ApplicationInsightsSinkOptions
from .exceptions import flatten_exception_properties
from ..enrichers.base import add_property_if_absent

logger = logging.getLogger(__name__)

_PRIMITIVE_TYPES = (str, bool, int, float)

# Attributes every LogRecord carries; everything else is a custom property.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


class ShutdownCapable(Protocol):
    def force_flush(self, timeout_millis: int = ...) -> bool: ...

    def shutdown(self) -> None: ...


def custom_properties(record: logging.LogRecord) -> dict[str, Any]:
    """Return the record's custom properties (``extra=`` and enrichers)."""
    return {key: value for key, value in vars(record).items() if key not in _STANDARD_RECORD_ATTRS}


class ApplicationInsightsSink(logging.Handler):
    """Forward enriched records to an Application Insights telemetry handler.

    Attributes:
        options: Sink options (exception and correlation settings).
        handler: Wrapped telemetry handler receiving prepared records.
    """

    def __init__(
        self,
        handler: logging.Handler,
        *,
        options: ApplicationInsightsSinkOptions | None = None,
        provider: ShutdownCapable | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level=level)
        self.handler = require_not_none(handler, "handler")
        self.options = options or ApplicationInsightsSinkOptions()
        self._provider = provider
        self._closed = False

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        """Return the copy of ``record`` that is sent to Application Insights."""
        prepared = copy.copy(record)
        prepared.__dict__.pop(CORRELATION_INFO_ATTRIBUTE, None)

        exception_options = self.options.exception
        if exception_options.include_properties and record.exc_info:
            exc = record.exc_info[1]
            if exc is not None:
                for name, value in flatten_exception_properties(exc, exception_options).items():
                    add_property_if_absent(prepared, name, value)

        for key, value in custom_properties(prepared).items():
            if value is not None and not isinstance(value, _PRIMITIVE_TYPES):
                setattr(prepared, key, str(value))
        return prepared

    def emit(self, record: logging.LogRecord) -> None:
        if self._closed:
            return
        try:
            prepared = self.prepare(record)
            self.handler.handle(prepared)
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def flush(self) -> None:
        if self._closed:
            return
        self.handler.flush()
        if self._provider is not None:
            self._provider.force_flush()

    def close(self) -> None:
        """Flush pending telemetry and shut down the owned provider. Idempotent."""
        if self._closed:
            return
        try:
            self.flush()
        finally:
            self._closed = True
            self.handler.close()
            if self._provider is not None:
                self._provider.shutdown()
            super().close()
        logger.info("Application Insights sink shut down")


__all__ = ["ApplicationInsightsSink", "custom_properties"]
