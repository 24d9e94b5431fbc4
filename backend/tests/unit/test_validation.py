"""Unit tests for the request schemas and validation helpers."""

from __future__ import annotations

import pytest
from identity_service.models.enums import Gender
from identity_service.models.user import EMAIL_MAX_LENGTH
from identity_service.schemas import (
    LoginSchema,
    RegisterSchema,
    flatten_messages,
    load_request,
    validate_request,
)
from identity_service.services.auth.dto import LoginIn, RegisterIn
from marshmallow import ValidationError


def _register_payload(**overrides):
    payload = {"email": "a@b.com", "password": "p1", "name": "Alice", "gender": "Female"}
    payload.update(overrides)
    return payload


def _email_of_length(total: int) -> str:
    # Domain: three labels of at most 63 characters plus ".com".
    domain = ".".join(["b" * 62, "c" * 61, "d" * 61]) + ".com"
    local = "a" * (total - len(domain) - 1)
    email = f"{local}@{domain}"
    assert len(email) == total
    return email


def _fields(errors):
    return [e.field for e in errors]


class TestLoginSchema:
    def test_valid_payload_has_no_errors(self):
        assert validate_request(LoginSchema(), {"email": "a@b.com", "password": "p1"}) == []

    def test_load_returns_dto(self):
        dto = load_request(LoginSchema(), {"email": "a@b.com", "password": "p1"})
        assert dto == LoginIn(email="a@b.com", password="p1")

    def test_empty_email_reports_required_only(self):
        errors = validate_request(LoginSchema(), {"email": "", "password": "p1"})
        assert [e.as_dict() for e in errors] == [{"field": "email", "message": "Email is required."}]

    def test_malformed_email(self):
        errors = validate_request(LoginSchema(), {"email": "not-an-email", "password": "p1"})
        assert [e.as_dict() for e in errors] == [
            {"field": "email", "message": "Email is not a valid address."}
        ]

    def test_empty_password(self):
        errors = validate_request(LoginSchema(), {"email": "a@b.com", "password": ""})
        assert _fields(errors) == ["password"]

    def test_missing_fields_report_each_once(self):
        errors = validate_request(LoginSchema(), {})
        assert [e.as_dict() for e in errors] == [
            {"field": "email", "message": "Email is required."},
            {"field": "password", "message": "Password is required."},
        ]

    def test_null_email_is_required(self):
        errors = validate_request(LoginSchema(), {"email": None, "password": "p1"})
        assert [e.message for e in errors] == ["Email is required."]

    def test_email_longer_than_column_is_rejected(self):
        email = _email_of_length(EMAIL_MAX_LENGTH + 1)
        errors = validate_request(LoginSchema(), {"email": email, "password": "p1"})
        assert [e.as_dict() for e in errors] == [
            {"field": "email", "message": "Email is not a valid address."}
        ]

    def test_email_at_column_length_is_accepted(self):
        email = _email_of_length(EMAIL_MAX_LENGTH)
        assert validate_request(LoginSchema(), {"email": email, "password": "p1"}) == []


class TestRegisterSchema:
    def test_load_returns_dto_with_enum(self):
        dto = load_request(RegisterSchema(), _register_payload())
        assert dto == RegisterIn(
            email="a@b.com", password="p1", display_name="Alice", gender=Gender.FEMALE
        )

    @pytest.mark.parametrize("label", ["Male", "Female", "Other"])
    def test_every_gender_label_is_accepted(self, label):
        assert validate_request(RegisterSchema(), _register_payload(gender=label)) == []

    @pytest.mark.parametrize("gender", ["Robot", "male", "", 3])
    def test_unknown_gender_is_rejected(self, gender):
        errors = validate_request(RegisterSchema(), _register_payload(gender=gender))
        assert _fields(errors) == ["gender"]

    def test_gender_message_lists_choices(self):
        errors = validate_request(RegisterSchema(), _register_payload(gender="Robot"))
        assert errors[0].message == "Gender must be one of: Male, Female, Other."

    def test_name_bounds(self):
        assert validate_request(RegisterSchema(), _register_payload(name="x" * 50)) == []
        too_long = validate_request(RegisterSchema(), _register_payload(name="x" * 51))
        assert [e.as_dict() for e in too_long] == [
            {"field": "name", "message": "Name must be at most 50 characters."}
        ]
        empty = validate_request(RegisterSchema(), _register_payload(name=""))
        assert [e.message for e in empty] == ["Name is required."]

    @pytest.mark.parametrize("name", [" ", "   "])
    def test_whitespace_name_is_blank(self, name):
        errors = validate_request(RegisterSchema(), _register_payload(name=name))
        assert [e.as_dict() for e in errors] == [{"field": "name", "message": "Name is required."}]

    def test_all_failing_fields_in_declaration_order(self):
        payload = {"gender": "Robot", "name": "", "password": "", "email": "bad"}
        errors = validate_request(RegisterSchema(), payload)
        assert _fields(errors) == ["email", "password", "name", "gender"]

    def test_unknown_keys_come_last(self):
        errors = validate_request(RegisterSchema(), _register_payload(email="", admin=True))
        assert _fields(errors) == ["email", "admin"]

    def test_load_raises_validation_error(self):
        with pytest.raises(ValidationError) as excinfo:
            load_request(RegisterSchema(), _register_payload(email="bad"))
        assert "email" in excinfo.value.messages

    def test_non_object_payload(self):
        errors = validate_request(RegisterSchema(), ["not", "an", "object"])
        assert _fields(errors) == ["_schema"]


class TestFlattenMessages:
    def test_nested_messages_use_dotted_fields(self):
        errors = flatten_messages({"address": {"city": ["Missing."]}})
        assert [e.as_dict() for e in errors] == [{"field": "address.city", "message": "Missing."}]

    def test_order_argument_wins_over_dict_order(self):
        errors = flatten_messages({"b": ["B."], "a": ["A."]}, order=["a", "b"])
        assert _fields(errors) == ["a", "b"]

    def test_plain_string_is_schema_level(self):
        assert [e.as_dict() for e in flatten_messages("Broken.")] == [
            {"field": "_schema", "message": "Broken."}
        ]
