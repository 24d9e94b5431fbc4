"""WSGI/CORS wiring applied around the API blueprints."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix


def parse_origins(raw: str | None) -> list[str] | str:
    """Split ``CORS_ORIGINS`` into a list, or ``"*"`` when blank or wildcard.

    :param raw: Comma-separated origins as read from configuration.
    :type raw: str | None
    :returns: Explicit origin list, or ``"*"``.
    :rtype: list[str] | str
    """
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    if not origins or origins == ["*"]:
        return "*"
    return origins


def init_app(app: Flask) -> None:
    """Apply ``ProxyFix`` (when ``USE_PROXYFIX``) and CORS on ``/api/*``.

    A wildcard origin policy disables credential support; the auth endpoints
    never rely on cookies, so only explicit origin lists enable it.
    """
    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    prefix = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")
    CORS(
        app,
        resources={rf"{prefix}/*": {"origins": origins}},
        supports_credentials=origins != "*",
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
