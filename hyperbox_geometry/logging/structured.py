"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per record)
- Thread-safe (uses standard logging module)
- Typed events (LogEvent enum)
- Payload built only when the level is enabled (the algebra logs on every call)

Example:
    >>> logger = StructuredLogger(component="algebra")
    >>> logger.warning(
    ...     event=LogEvent.DIMENSION_MISMATCH,
    ...     message="Cannot encapsulate Point2D with Point",
    ...     metadata={'expected': 2, 'actual': 3}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "WARNING",
        "component": "algebra",
        "event": "algebra.dimension_mismatch",
        "message": "Cannot encapsulate Point2D with Point",
        "metadata": {"expected": 2, "actual": 3}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent

ROOT_LOGGER_NAME = "hyperbox"

_loggers: Dict[str, "StructuredLogger"] = {}


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "algebra", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.WARNING,
        logger_name: Optional[str] = None
    ):
        """
        Args:
            component: Component identifier
            level: Logging level (default: WARNING)
            logger_name: Custom logger name (default: hyperbox.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"{ROOT_LOGGER_NAME}.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     parse_shape("cube:1")
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CLI_ERROR,
            ...         message="Invalid shape",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter; StructuredLogger already emits JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.WARNING
) -> StructuredLogger:
    """
    Return the StructuredLogger for ``component``, creating it on first use.

    Example:
        >>> logger = create_logger("algebra", level=logging.DEBUG)
    """
    if component not in _loggers:
        _loggers[component] = StructuredLogger(component=component, level=level)
    return _loggers[component]


def configure_logging(config) -> None:
    """
    Apply a LoggingConfig to every logger created so far.

    Args:
        config: LoggingConfig (only ``level`` is read)
    """
    level = getattr(logging, config.level)
    for structured in _loggers.values():
        structured.set_level(level)
