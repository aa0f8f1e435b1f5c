"""Shared utilities for structured logging."""

from .logging import (
    JsonLogFormatter,
    configure_json_logger,
    flush_handlers,
    generate_trace_id,
    listing_summary,
    log_event,
    log_listing,
    resolve_level,
)

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "listing_summary",
    "log_event",
    "log_listing",
    "resolve_level",
]
