# ruff: noqa: PLR6301
"""Logging for sqlcall.

Every sqlcall logger lives under the ``sqlcall`` namespace. Each call runs inside a
correlation scope, so the call text, the bind summary and any release warning of one
invocation share a correlation ID. The structured formatter groups the call fields
(``procedure_name``, ``call_text``, ``slot_count``, ``slots``) under a ``call`` key.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Final
from uuid import uuid4

import msgspec

if TYPE_CHECKING:
    from collections.abc import Generator
    from logging import LogRecord

__all__ = (
    "CALL_FIELDS",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_context",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

CALL_FIELDS: Final = ("procedure_name", "call_text", "slot_count", "slots")

correlation_id_var: ContextVar[str | None] = ContextVar("sqlcall_correlation_id", default=None)

_json_encoder = msgspec.json.Encoder(enc_hook=str)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context, if any."""
    return correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: str | None = None) -> Generator[str, None, None]:
    """Run a block under a correlation ID.

    An explicit ``correlation_id`` wins. Otherwise an ID already set by the caller is
    kept, and a new one is generated only when none is active.

    Yields:
        The active correlation ID.
    """
    active = correlation_id or get_correlation_id() or uuid4().hex
    token = correlation_id_var.set(active)
    try:
        yield active
    finally:
        correlation_id_var.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter that groups call fields under ``call``."""

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            log_entry["correlation_id"] = correlation_id

        extra_fields: dict[str, Any] = dict(getattr(record, "extra_fields", None) or {})
        call = {field: extra_fields.pop(field) for field in CALL_FIELDS if field in extra_fields}
        if call:
            log_entry["call"] = call
        log_entry.update(extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return _json_encoder.encode(log_entry).decode("utf-8")


class CorrelationIDFilter(logging.Filter):
    """Copies the active correlation ID onto each record."""

    def filter(self, record: LogRecord) -> bool:
        if correlation_id := get_correlation_id():
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqlcall`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlcall logger.

    Returns:
        Logger with a :class:`CorrelationIDFilter` attached.
    """
    if name is None:
        return logging.getLogger("sqlcall")

    if not name.startswith("sqlcall"):
        name = f"sqlcall.{name}"

    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())

    return logger


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Install handlers on the ``sqlcall`` logger.

    Args:
        level: Logging level name. ``"DEBUG"`` also shows bind summaries and call text
            logged at the default ``CallConfig.statement_log_level``.
        format_style: ``"structured"`` for JSON, anything else for one text line per record.
        log_to_file: Optional file path; file output is always structured.
        extra_handlers: Additional handlers to add.
    """
    root_logger = logging.getLogger("sqlcall")
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    formatter: logging.Formatter
    if format_style == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    for handler in extra_handlers or ():
        root_logger.addHandler(handler)

    root_logger.propagate = False

    log_with_context(
        root_logger,
        logging.INFO,
        "sqlcall logging configured",
        level=level,
        format_style=format_style,
        handlers_count=len(root_logger.handlers),
    )


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with structured extra fields.

    Call fields such as ``procedure_name`` and ``call_text`` end up under ``call`` when
    rendered by :class:`StructuredFormatter`.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra_fields": extra_fields}, stacklevel=2)
