"""Pytest fixtures for the identity service.

Each test that asks for ``app`` gets a fresh application bound to its own
in-memory SQLite database, so committed rows never leak between cases.
"""

from __future__ import annotations

import os

import pytest
from identity_service.core.config import TestingConfig
from identity_service.core.extensions import db as _db
from identity_service.factory import create_app
from identity_service.services._shared.ports import InMemoryUserStore, StubTokenIssuer
from identity_service.services.auth import AuthenticationService


@pytest.fixture()
def app():
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestingConfig` applied, an active app
        context and the schema created.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = create_app(TestingConfig)
    with application.app_context():
        _db.create_all()
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def db(app):
    """Database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """Provide the scoped session and wire Factory Boy to it."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(db.session)
    yield db.session
    SQLAlchemySession.set(None)


@pytest.fixture()
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture()
def tokens() -> StubTokenIssuer:
    return StubTokenIssuer()


@pytest.fixture()
def service(store, tokens) -> AuthenticationService:
    """Build an AuthenticationService wired to in-memory doubles."""
    return AuthenticationService(store=store, token_issuer=tokens)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
