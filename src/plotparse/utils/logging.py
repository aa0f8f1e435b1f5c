"""JSON Lines event logging for extraction runs.

Every line is one JSON object with ``timestamp``, ``level``, ``logger``,
``event`` and ``message`` keys plus the structured fields attached to the
event. Batch runs share one ``trace_id`` across all of their events.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional
from uuid import uuid4

if TYPE_CHECKING:
    from ..extraction.record import ParsedRecord

__all__ = [
    "LOGGER_NAME",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "listing_summary",
    "log_event",
    "log_listing",
    "resolve_level",
]

LOGGER_NAME = "plotparse"

# Fields a complete listing carries; reported under "missing" when empty.
_LISTING_FIELDS = ("society", "phase_block", "plot_number", "size", "demand", "phone")


def _utc_timestamp(created: float) -> str:
    moment = datetime.fromtimestamp(created, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": getattr(record, "event", None) or message,
            "message": message,
        }
        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id
        fields = getattr(record, "fields", None)
        if isinstance(fields, Mapping):
            payload.update(fields)
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def resolve_level(level: int | str) -> int:
    """Accept ``logging`` constants or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _build_handler(log_path: Optional[Path], stream: bool) -> logging.Handler:
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    elif stream:
        handler = logging.StreamHandler(sys.stderr)
    else:
        return logging.NullHandler()
    handler.setFormatter(JsonLogFormatter())
    return handler


def configure_json_logger(
    log_path: Path | None = None,
    level: int | str = logging.INFO,
    *,
    stream: bool = False,
) -> logging.Logger:
    """Point the ``plotparse`` logger at a JSONL file (or stderr, or nowhere).

    Existing handlers are closed first, so repeated batch runs in one process
    never write to a stale file.
    """

    resolved = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = _build_handler(log_path, stream)
    handler.setLevel(resolved)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    **fields: Any,
) -> str:
    """Emit ``event`` with ``fields`` and return the trace id it was tagged with."""

    event_trace_id = trace_id or generate_trace_id()
    logger.log(level, event, extra={"event": event, "trace_id": event_trace_id, "fields": fields})
    return event_trace_id


def listing_summary(record: "ParsedRecord") -> Dict[str, Any]:
    """Compact view of a parsed listing for event logs."""

    present = {
        "society": bool(record.society),
        "phase_block": bool(record.phase_block),
        "plot_number": bool(record.plot_number),
        "size": record.size_value is not None or bool(record.size_unit),
        "demand": record.demand_amount is not None,
        "phone": bool(record.phone_e164),
    }
    missing: List[str] = [name for name in _LISTING_FIELDS if not present[name]]
    return {
        "society": record.society or None,
        "phase_block": record.phase_block or None,
        "demand_amount": record.demand_amount,
        "flags": [name for name, value in record.flags.as_dict().items() if value],
        "missing": missing,
    }


def log_listing(
    logger: logging.Logger,
    message_id: Any,
    record: "ParsedRecord",
    *,
    trace_id: str | None = None,
) -> str:
    """Log one parsed message as a ``listing.parsed`` DEBUG event."""

    return log_event(
        logger,
        "listing.parsed",
        trace_id=trace_id,
        level=logging.DEBUG,
        message_id=message_id,
        **listing_summary(record),
    )
