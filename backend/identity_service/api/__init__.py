"""API blueprint package."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask

from identity_service.services.auth import AuthenticationService


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, e.g. ``"/api"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs.
    """

    for bp, rel_prefix in entries:
        segments = [base_prefix.strip("/"), rel_prefix.strip("/")]
        app.register_blueprint(bp, url_prefix="/" + "/".join(s for s in segments if s))


def init_app(app: Flask, *, auth_service: AuthenticationService) -> None:
    """Mount the health and auth blueprints under ``API_BASE_PREFIX``."""

    from identity_service.api.auth import create_blueprint as create_auth_blueprint
    from identity_service.api.health import bp as health_bp

    register_blueprint_group(
        app,
        base_prefix=app.config.get("API_BASE_PREFIX", "/api"),
        entries=[
            (health_bp, ""),  # -> /api/health
            (create_auth_blueprint(auth_service), "/auth"),  # -> /api/auth
        ],
    )


__all__ = ["init_app", "register_blueprint_group"]
