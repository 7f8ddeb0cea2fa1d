"""Structured Logging: one stdout handler, JSON or text, with request context.

Invariants:
    - Every JSON line carries timestamp, level, service, logger, message
    - Request fields (method, path, status, error_code) grouped under "request" when present
    - setup_logging() is idempotent: re-entering the lifespan replaces, never stacks, its handler
"""

import logging
import json
import sys
from datetime import datetime, timezone

HANDLER_NAME = "postboard"
REQUEST_FIELDS = ("method", "path", "status", "error_code")


def request_context(record: logging.LogRecord) -> dict:
    """Request fields the error handlers attach via extra=, minus unset ones."""
    return {
        key: record.__dict__[key]
        for key in REQUEST_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def __init__(self, service: str = "postboard"):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request = request_context(record)
        if request:
            log["request"] = request
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines, suffixed with [METHOD path status] for request logs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        request = request_context(record)
        if request:
            parts = [str(request[k]) for k in ("method", "path", "status") if k in request]
            line = f"{line} [{' '.join(parts)}]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's stdout handler on the root logger."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
            existing.close()
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
