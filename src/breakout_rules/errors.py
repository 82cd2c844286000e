"""
breakout_rules.errors — Custom exception classes
=================================================

Defines the exception hierarchy for boundary errors: invalid
configuration and malformed event records. The state machine itself
never raises; these only surface where external input enters the package.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, List, Optional
import json


class BreakoutRulesError(Exception):
    """Base exception for all breakout_rules package errors."""
    pass


class ConfigurationError(BreakoutRulesError):
    """Raised when a config file or environment override fails validation."""

    def __init__(
        self,
        source: str,
        validation_errors: List[str],
        raw_config: Optional[Any] = None,
    ):
        self.source = source
        self.validation_errors = validation_errors
        self.raw_config = raw_config
        super().__init__(
            f"Invalid configuration from {source}: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_CONFIGURATION",
            source=self.source,
            payload=self.raw_config,
            errors=self.validation_errors,
        )


class EventRecordError(BreakoutRulesError):
    """Raised when an event record cannot be decoded."""

    def __init__(self, record: Any, reason: str, index: Optional[int] = None):
        self.record = record
        self.reason = reason
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Malformed event record{where}: {reason}")

    def format_error_log(self) -> str:
        source = "event script" if self.index is None else f"event script[{self.index}]"
        return _format_error_block(
            error_type="MALFORMED_EVENT_RECORD",
            source=source,
            payload=self.record,
            errors=[self.reason],
        )


def _format_error_block(
    error_type: str,
    source: str,
    payload: Optional[Any],
    errors: Optional[List[str]],
) -> str:
    """Format a structured, boxed error block."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " BREAKOUT RULES ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
    ]

    if payload is not None:
        lines.append("")
        lines.append(" ── INPUT " + "─" * 54)
        lines.append(_indent_json(payload))

    if errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Any, indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
    except (TypeError, ValueError):
        return f" {repr(data)}"
    return "\n".join(" " + line for line in formatted.split("\n"))
