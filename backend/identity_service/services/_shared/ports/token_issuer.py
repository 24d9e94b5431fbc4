from __future__ import annotations

import itertools
from typing import Protocol


class TokenIssuer(Protocol):
    """Port for issuing the opaque credential returned on successful auth."""

    def issue(self, user_id: str) -> str: ...


class StubTokenIssuer(TokenIssuer):
    """Deterministic token issuer used in unit tests."""

    def __init__(self) -> None:
        self._seq = itertools.count(1)
        self.issued: dict[str, str] = {}

    def issue(self, user_id: str) -> str:
        token = f"token.{user_id}.{next(self._seq)}"
        self.issued[token] = user_id
        return token
