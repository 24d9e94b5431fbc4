"""Register and login endpoints.

The blueprint is built around an :class:`AuthenticationService` handed in by
the application factory; handlers never construct their own collaborators.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint

from identity_service.api.deps import json_body, json_response, timing
from identity_service.schemas import (
    AuthenticationResponseSchema,
    LoginSchema,
    RegisterSchema,
    load_request,
)
from identity_service.services.auth import AuthenticationOut, AuthenticationService

register_schema = RegisterSchema()
login_schema = LoginSchema()
response_schema = AuthenticationResponseSchema()


def _respond(result: AuthenticationOut | None, *, failure_status: HTTPStatus):
    if result is None:
        return json_response(response_schema.dump(AuthenticationOut.failure()), status=failure_status)
    return json_response(response_schema.dump(result))


def create_blueprint(service: AuthenticationService) -> Blueprint:
    """Return the ``auth`` blueprint bound to ``service``."""

    bp = Blueprint("auth", __name__)

    @bp.post("/register")
    @timing
    def register():
        """Create an account and return it with an access token."""

        dto = load_request(register_schema, json_body())
        return _respond(service.register(dto), failure_status=HTTPStatus.BAD_REQUEST)

    @bp.post("/login")
    @timing
    def login():
        """Check credentials and return the account with an access token."""

        dto = load_request(login_schema, json_body())
        return _respond(service.login(dto), failure_status=HTTPStatus.UNAUTHORIZED)

    return bp
