"""
identity_service.services._shared.ports
=======================================

*Ports* (hexagonal interfaces) the authentication service depends on.

Modules
-------
- :mod:`user_store`:
    Defines :class:`~.UserStore` (add a user, fetch a user by credentials)
    plus :class:`~.InMemoryUserStore`.

- :mod:`token_issuer`:
    Defines :class:`~.TokenIssuer` (``issue(user_id) -> str``) plus
    :class:`~.StubTokenIssuer`.

Design Notes
------------
The service layer never imports a concrete adapter. SQL and JWT adapters
live under ``identity_service.infra`` and are wired by the application
factory.
"""

from __future__ import annotations

from .token_issuer import StubTokenIssuer, TokenIssuer
from .user_store import InMemoryUserStore, UserStore, new_user_id

__all__ = [
    "UserStore",
    "InMemoryUserStore",
    "new_user_id",
    "TokenIssuer",
    "StubTokenIssuer",
]
