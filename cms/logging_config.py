"""
Logging for the CMS.

Every record carries the request id and the signed-in user (both set by
RequestIdMiddleware). Document and account events pass their details through
``extra``, using the field names in ``CONTEXT_FIELDS``:

    logger.info("Document duplicated", extra={"document": "a.txt", "copy": "a_1.txt"})

Production writes one JSON object per line; development writes a short line
with the same fields appended as ``key=value``.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
user_var: ContextVar[Optional[str]] = ContextVar("user", default=None)

# Structured fields, in the order the dev formatter prints them
CONTEXT_FIELDS = (
    "user",
    "username",
    "document",
    "copy",
    "size",
    "method",
    "path",
    "status",
    "duration_ms",
    "credentials",
)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """The known structured fields present on a record."""
    fields = {}
    for key in CONTEXT_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            fields[key] = value
    return fields


class RequestContextFilter(logging.Filter):
    """Stamp request_id and the signed-in user onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"  # type: ignore[attr-defined]
        if getattr(record, "user", None) is None:
            record.user = user_var.get()  # type: ignore[attr-defined]
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        req_id = getattr(record, "request_id", "-")
        if req_id != "-":
            log_obj["request_id"] = req_id
        log_obj.update(context_fields(record))
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


class DevFormatter(logging.Formatter):
    """``12:00:01 INFO  [cms.kernel.documents.store] req=ab12 Document created document=a.txt user=admin``"""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)-5s [%(name)s] req=%(request_id)s %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = context_fields(record)
        if not fields:
            return line
        first, sep, rest = line.partition("\n")
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{first} {pairs}{sep}{rest}"


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Install one stderr handler on the root logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'production' switches to JSON lines
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Reloads call this again
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(JsonFormatter() if environment == "production" else DevFormatter())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
