"""Structured Logging - JSON formatter and setup for callers of content_rules.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (content_type, role, operation, content_id, version, error_code)
      surfaced when present
    - JSON format by default, human-readable on request

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for a library
    - setup_logging is opt-in; importing content_rules never configures logging
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS: tuple[str, ...] = (
    "content_type", "role", "operation", "content_id", "version", "error_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach one stream handler to the root logger and return it."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
