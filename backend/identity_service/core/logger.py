"""Structured logging configuration with request correlation.

Records are rendered as one JSON object per line on stdout. Every record
carries the correlation id of the request being served (``None`` outside a
request); identity events add ``user_id`` and ``outcome`` through ``extra``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

# ``extra=`` keys promoted to top-level JSON fields
STRUCTURED_KEYS = ("endpoint", "elapsed_ms", "user_id", "outcome", "event")

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - formatting logic
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Return the current request identifier, generating one when necessary.

    Inside a request the id is read from the first correlation header present
    and cached on :data:`flask.g`; outside a request a fresh UUID4 is returned.
    """
    if not has_request_context():
        return str(uuid4())
    cached = getattr(g, "request_id", None)
    if cached:
        return str(cached)
    incoming = next(
        (request.headers[h] for h in CORRELATION_HEADERS if request.headers.get(h)),
        None,
    )
    g.request_id = incoming or str(uuid4())
    return str(g.request_id)


def _resolve_level(level: str | int) -> int | str:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else level.upper()


def configure_logging(level: str | int = "INFO", *, fmt: str = "json") -> None:
    """Configure the root logger with a single stdout handler.

    :param level: Level name or number applied to the root logger.
    :type level: str | int
    :param fmt: ``"json"`` (default) or ``"text"`` for local development.
    :type fmt: str
    """
    handler = logging.StreamHandler(sys.stdout)
    if fmt == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def audit(logger: logging.Logger, event: str, *, outcome: str, user_id: str | None = None) -> None:
    """Emit an identity event at INFO with structured ``event``/``outcome`` fields.

    Only opaque identifiers are logged; emails and passwords never are.
    """
    logger.info(
        "%s %s",
        event,
        outcome,
        extra={"event": event, "outcome": outcome, "user_id": user_id},
    )


def init_app(app: Flask) -> None:
    """Seed request ids early and echo them back on every response."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _seed_request_id() -> None:  # pragma: no cover - integration glue
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response):  # pragma: no cover - integration glue
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["audit", "configure_logging", "ensure_request_id", "init_app"]
