"""
Structured Logging for hyperbox
===============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function (one logger per component)
    configure_logging: Apply a LoggingConfig level to all loggers
"""

from .events import LogEvent
from .structured import StructuredLogger, configure_logging, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'configure_logging',
    'create_logger',
]
