"""Unit tests for the SQLAlchemy-backed ``UserStore`` adapter."""

from __future__ import annotations

import uuid

import pytest
from identity_service.infra.sql import SQLAlchemyUserStore
from identity_service.models.enums import Gender
from identity_service.models.user import User
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError


def _user(email="a@b.com", password="p1"):
    user = User(email=email, display_name="Alice", gender=Gender.FEMALE)
    user.password = password
    return user


@pytest.fixture()
def sql_store(app) -> SQLAlchemyUserStore:
    return SQLAlchemyUserStore()


def _count(session) -> int:
    return session.execute(select(func.count()).select_from(User)).scalar_one()


def test_add_user_commits_with_uuid_id(sql_store, session):
    added = sql_store.add_user(_user())
    assert uuid.UUID(added.id).version == 4
    session.expunge_all()
    stored = session.get(User, added.id)
    assert stored.email == "a@b.com"
    assert stored.gender == "Female"
    assert stored.password_hash != "p1"


def test_duplicate_email_returns_none_and_rolls_back(sql_store, session, caplog):
    sql_store.add_user(_user())
    assert sql_store.add_user(_user(password="other")) is None
    assert _count(session) == 1
    assert "uq_users_email" in caplog.text


def test_store_is_usable_after_a_rejected_write(sql_store, session):
    sql_store.add_user(_user())
    sql_store.add_user(_user())
    assert sql_store.add_user(_user(email="next@b.com")) is not None
    assert _count(session) == 2


def test_get_user_by_credentials(sql_store):
    added = sql_store.add_user(_user())
    found = sql_store.get_user_by_credentials("a@b.com", "p1")
    assert found is not None
    assert found.id == added.id
    assert found.display_name == "Alice"
    assert sql_store.get_user_by_credentials("a@b.com", "nope") is None
    assert sql_store.get_user_by_credentials("x@b.com", "p1") is None


def test_connectivity_faults_propagate(app):
    class _DownUoW:
        def __enter__(self):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        def __exit__(self, *exc):
            return False

    store = SQLAlchemyUserStore(rw_uow=_DownUoW, ro_uow=_DownUoW)
    with pytest.raises(OperationalError):
        store.add_user(_user())
    with pytest.raises(OperationalError):
        store.get_user_by_credentials("a@b.com", "p1")
