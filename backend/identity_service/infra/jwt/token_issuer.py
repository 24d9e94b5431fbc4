# identity_service/infra/jwt/token_issuer.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from identity_service.services._shared.ports import TokenIssuer


@dataclass(slots=True)
class JWTTokenIssuer(TokenIssuer):
    """
    Adapter for Flask-JWT-Extended.

    The user id becomes the ``sub`` claim; ``fresh`` is set because tokens are
    only issued right after a credential check.

    .. note::
       Requires an active Flask app context with ``JWT_SECRET_KEY`` set.
    """

    expires_delta: timedelta | None = None
    additional_claims: dict[str, Any] | None = None

    def issue(self, user_id: str) -> str:
        from flask_jwt_extended import create_access_token

        return cast(
            str,
            create_access_token(
                identity=user_id,
                additional_claims=dict(self.additional_claims or {}),
                expires_delta=self.expires_delta,
                fresh=True,
            ),
        )
