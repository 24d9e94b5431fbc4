"""Request validation helpers built on Marshmallow.

Marshmallow reports every failing field; within a field the :class:`Chain`
validator stops at the first failing rule, so an empty email is reported as
missing and never also as malformed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from marshmallow import Schema, ValidationError, validate


@dataclass(frozen=True, slots=True)
class FieldError:
    """
    One validation failure.

    :param field: Public (JSON) field name, or ``_schema`` for payload-level errors.
    :type field: str
    :param message: Human-readable message.
    :type message: str
    """

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class NonBlank(validate.Validator):
    """Reject empty or whitespace-only strings."""

    default_message = "Field may not be blank."

    def __init__(self, *, error: str | None = None) -> None:
        self.error = error or self.default_message

    def __call__(self, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(self.error)
        return value


class Chain(validate.Validator):
    """Run validators in order and stop at the first failure."""

    def __init__(self, *validators: validate.Validator) -> None:
        self.validators = validators

    def _repr_args(self) -> str:
        return f"validators={self.validators!r}"

    def __call__(self, value: Any) -> Any:
        for validator in self.validators:
            # Marshmallow validators may signal failure by returning False.
            if validator(value) is False:
                raise ValidationError("Invalid value.")
        return value


def _walk(field: str, messages: Any) -> Iterable[FieldError]:
    if isinstance(messages, Mapping):
        for key, nested in messages.items():
            yield from _walk(f"{field}.{key}", nested)
    elif isinstance(messages, (list, tuple)):
        for message in messages:
            yield from _walk(field, message)
    else:
        yield FieldError(field=field, message=str(messages))


def flatten_messages(
    messages: Mapping[str, Any] | list[Any] | str,
    order: Iterable[str] | None = None,
) -> list[FieldError]:
    """Flatten Marshmallow's ``messages`` into an ordered list of :class:`FieldError`.

    Fields named in ``order`` come first, in that order; any remaining keys
    (unknown fields, ``_schema``) follow in the order Marshmallow produced them.
    """
    if not isinstance(messages, Mapping):
        return list(_walk("_schema", messages))

    ordered_keys = [key for key in (order or ()) if key in messages]
    ordered_keys += [key for key in messages if key not in ordered_keys]
    errors: list[FieldError] = []
    for key in ordered_keys:
        errors.extend(_walk(key, messages[key]))
    return errors


def public_field_order(schema: Schema) -> list[str]:
    """Return the schema's JSON field names in declaration order."""
    return [field.data_key or name for name, field in schema.fields.items()]


def validate_request(schema: Schema, payload: Any) -> list[FieldError]:
    """Check ``payload`` against ``schema`` without loading it.

    :returns: Ordered failures; empty when the payload is valid.
    """
    messages = schema.validate(payload)
    return flatten_messages(messages, order=public_field_order(schema))


def load_request(schema: Schema, payload: Any) -> Any:
    """Validate and load ``payload`` into the schema's DTO.

    :raises marshmallow.ValidationError: When any field fails.
    """
    return schema.load(payload)
