"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>

    component: shape, algebra, config, cli, error
    action: created, normalized, encapsulated, dimension_mismatch, ...

Example Log Query:
    fields @timestamp, event, metadata.expected, metadata.actual
    | filter event = "algebra.dimension_mismatch"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape construction
    - algebra.*: Encapsulation dispatch
    - config.*: Configuration loading
    - cli.*: Command-line driver
    - error.*: Error conditions
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape constructed by the command-line driver."""

    SHAPE_NORMALIZED = "shape.normalized"
    """Box corners were reordered into lower/upper form."""

    # ========== Algebra Events ==========
    ENCAPSULATED = "algebra.encapsulated"
    """Two shapes combined into a bounding box."""

    DIMENSION_MISMATCH = "algebra.dimension_mismatch"
    """Encapsulation rejected because dimensionalities differ."""

    UNSUPPORTED_PAIR = "algebra.unsupported_pair"
    """No encapsulation rule for this pair of shape types."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """Command-line subcommand dispatched."""

    # ========== Error Events ==========
    CLI_ERROR = "error.cli"
    """Command-line subcommand failed."""


ALGEBRA_EVENTS = {
    LogEvent.ENCAPSULATED,
    LogEvent.DIMENSION_MISMATCH,
    LogEvent.UNSUPPORTED_PAIR,
}

ERROR_EVENTS = {
    LogEvent.CLI_ERROR,
}
