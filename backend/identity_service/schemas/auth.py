"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate

from identity_service.models.enums import Gender
from identity_service.models.user import DISPLAY_NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from identity_service.schemas.validation import Chain, NonBlank
from identity_service.services.auth.dto import LoginIn, RegisterIn


def _required(label: str) -> dict[str, str]:
    message = f"{label} is required."
    return {"required": message, "null": message}


def _email_field() -> fields.String:
    return fields.String(
        required=True,
        error_messages=_required("Email"),
        validate=Chain(
            NonBlank(error="Email is required."),
            validate.Length(max=EMAIL_MAX_LENGTH, error="Email is not a valid address."),
            validate.Email(error="Email is not a valid address."),
        ),
    )


def _password_field() -> fields.String:
    return fields.String(
        required=True,
        load_only=True,
        error_messages=_required("Password"),
        validate=validate.Length(min=1, error="Password is required."),
    )


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    email = _email_field()
    password = _password_field()

    @post_load
    def make_dto(self, data: dict[str, Any], **kwargs: Any) -> LoginIn:
        return LoginIn(**data)


class RegisterSchema(Schema):
    """Input payload for account registration.

    ``name`` must hold at least one non-whitespace character; a whitespace-only
    display name is reported as missing.
    """

    email = _email_field()
    password = _password_field()
    display_name = fields.String(
        data_key="name",
        required=True,
        error_messages=_required("Name"),
        validate=Chain(
            NonBlank(error="Name is required."),
            validate.Length(
                max=DISPLAY_NAME_MAX_LENGTH,
                error="Name must be at most {max} characters.",
            ),
        ),
    )
    gender = fields.Enum(
        Gender,
        by_value=True,
        required=True,
        error_messages={
            **_required("Gender"),
            "unknown": "Gender must be one of: {choices}.",
        },
    )

    @post_load
    def make_dto(self, data: dict[str, Any], **kwargs: Any) -> RegisterIn:
        return RegisterIn(**data)


class AuthenticationResponseSchema(Schema):
    """Response payload for register and login."""

    id = fields.String(allow_none=True)
    email = fields.String(allow_none=True)
    display_name = fields.String(data_key="name", allow_none=True)
    gender = fields.Enum(Gender, by_value=True, allow_none=True)
    token = fields.String(allow_none=True)
    success = fields.Boolean(required=True)
