"""Convenience exports for request and response schemas."""

from __future__ import annotations

from .auth import AuthenticationResponseSchema, LoginSchema, RegisterSchema
from .validation import Chain, FieldError, NonBlank, flatten_messages, load_request, validate_request

__all__ = [
    "AuthenticationResponseSchema",
    "LoginSchema",
    "RegisterSchema",
    "Chain",
    "FieldError",
    "NonBlank",
    "flatten_messages",
    "load_request",
    "validate_request",
]
