"""Unit tests for :class:`AuthenticationService` with in-memory doubles."""

from __future__ import annotations

import logging

import pytest
from identity_service.models.enums import Gender
from identity_service.services.auth import AuthenticationService
from identity_service.services.auth.dto import LoginIn, RegisterIn

from tests.factories.user import RegisterInFactory


class _BrokenStore:
    """Store whose every call fails like an unreachable database."""

    def add_user(self, user):
        raise ConnectionError("store unreachable")

    def get_user_by_credentials(self, email, password):
        raise ConnectionError("store unreachable")


class _RejectingStore:
    def __init__(self):
        self.calls = 0

    def add_user(self, user):
        self.calls += 1
        return None

    def get_user_by_credentials(self, email, password):
        self.calls += 1
        return None


# -------------------------------- Register -------------------------------- #
def test_register_returns_successful_response(service, tokens):
    out = service.register(
        RegisterIn(email="a@b.com", password="p1", display_name="Alice", gender=Gender.FEMALE)
    )
    assert out is not None
    assert out.success is True
    assert out.id
    assert out.email == "a@b.com"
    assert out.display_name == "Alice"
    assert out.gender is Gender.FEMALE
    assert tokens.issued[out.token] == out.id


def test_register_assigns_distinct_ids(service):
    first = service.register(RegisterInFactory())
    second = service.register(RegisterInFactory())
    assert first.id != second.id


def test_register_duplicate_email_returns_none(service, store):
    dto = RegisterInFactory(email="dup@example.com")
    assert service.register(dto) is not None
    assert service.register(dto) is None
    assert len(store) == 1


def test_register_rejected_by_store_returns_none(tokens):
    rejecting = _RejectingStore()
    service = AuthenticationService(store=rejecting, token_issuer=tokens)
    assert service.register(RegisterInFactory()) is None
    assert rejecting.calls == 1
    assert tokens.issued == {}


def test_register_never_stores_plaintext(service, store):
    out = service.register(RegisterInFactory(password="s3cret"))
    stored = store.get_user_by_credentials(out.email, "s3cret")
    assert stored.password_hash != "s3cret"
    assert "s3cret" not in stored.password_hash


# --------------------------------- Login ---------------------------------- #
def test_scenario_register_then_login(service):
    registered = service.register(
        RegisterIn(email="a@b.com", password="p1", display_name="Alice", gender=Gender.FEMALE)
    )
    assert registered.success

    assert service.login(LoginIn(email="a@b.com", password="wrong")) is None

    out = service.login(LoginIn(email="a@b.com", password="p1"))
    assert out.success is True
    assert out.id == registered.id
    assert out.email == "a@b.com"
    assert out.display_name == "Alice"
    assert out.gender is Gender.FEMALE
    assert out.token and out.token != registered.token


def test_login_unknown_email_returns_none(service):
    assert service.login(LoginIn(email="missing@example.com", password="x")) is None


def test_login_email_match_is_exact(service):
    service.register(RegisterInFactory(email="case@example.com", password="p1"))
    assert service.login(LoginIn(email="CASE@example.com", password="p1")) is None


# ------------------------------ Store faults ------------------------------ #
def test_store_faults_propagate(tokens):
    service = AuthenticationService(store=_BrokenStore(), token_issuer=tokens)
    with pytest.raises(ConnectionError):
        service.register(RegisterInFactory())
    with pytest.raises(ConnectionError):
        service.login(LoginIn(email="a@b.com", password="p1"))


# -------------------------------- Logging --------------------------------- #
def test_outcomes_are_logged_without_credentials(service, caplog):
    caplog.set_level(logging.INFO, logger="identity_service.services.auth.service")
    out = service.register(RegisterInFactory(email="log@example.com", password="hunter2"))
    service.login(LoginIn(email="log@example.com", password="nope"))

    outcomes = [(r.event, r.outcome) for r in caplog.records]
    assert outcomes == [("register", "created"), ("login", "denied")]
    assert caplog.records[0].user_id == out.id
    for record in caplog.records:
        assert "log@example.com" not in record.getMessage()
        assert "hunter2" not in record.getMessage()
