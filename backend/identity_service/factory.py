"""Application factory wiring Flask extensions, adapters and blueprints."""

from __future__ import annotations

from datetime import timedelta

from flask import Flask

from identity_service.core.config import STORE_BACKENDS, BaseConfig, get_config
from identity_service.core.logger import configure_logging, init_app as init_logging
from identity_service.services._shared.ports import InMemoryUserStore, UserStore
from identity_service.services.auth import AuthenticationService


def build_user_store(app: Flask) -> UserStore:
    """Return the ``UserStore`` adapter selected by ``STORE_BACKEND``."""

    backend = str(app.config.get("STORE_BACKEND", "sql")).strip().lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown STORE_BACKEND {backend!r}; expected one of {sorted(STORE_BACKENDS)}"
        )
    if backend == "memory":
        return InMemoryUserStore()

    from identity_service.infra.sql import SQLAlchemyUserStore

    return SQLAlchemyUserStore()


def build_auth_service(app: Flask) -> AuthenticationService:
    """Assemble the authentication service from configured adapters."""

    from identity_service.infra.jwt import JWTTokenIssuer

    minutes = int(app.config.get("JWT_ACCESS_TOKEN_EXPIRES_MINUTES", 60))
    return AuthenticationService(
        store=build_user_store(app),
        token_issuer=JWTTokenIssuer(expires_delta=timedelta(minutes=minutes)),
    )


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    auth_service: AuthenticationService | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    ``auth_service`` replaces the service built from configuration, which lets
    tests drive the HTTP layer with their own store or token issuer.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"), fmt=app.config.get("LOG_FORMAT", "json"))

    from identity_service.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from identity_service.core import middleware

    middleware.init_app(app)

    service = auth_service if auth_service is not None else build_auth_service(app)
    app.extensions["auth_service"] = service

    from identity_service.api import init_app as init_api

    init_api(app, auth_service=service)

    from identity_service.core import errors

    errors.init_app(app)

    from identity_service import cli as app_cli

    app_cli.init_app(app)

    return app
