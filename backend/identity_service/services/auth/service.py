# identity_service/services/auth/service.py
from __future__ import annotations

import logging
from dataclasses import replace

from identity_service.core.logger import audit
from identity_service.models.user import User
from identity_service.services._shared.ports import TokenIssuer, UserStore
from identity_service.services.auth.dto import AuthenticationOut, LoginIn, RegisterIn
from identity_service.services.auth.mapping import to_response, to_user

log = logging.getLogger(__name__)


class AuthenticationService:
    """
    Registration and login use cases.

    The service is stateless: it holds only its two collaborators and issues
    at most one store call per use case. Business failures (write rejected,
    credentials unknown) come back as ``None``; store faults propagate.
    """

    def __init__(self, *, store: UserStore, token_issuer: TokenIssuer) -> None:
        """
        Initialize the service with its dependencies.

        :param store: Persistence contract for users.
        :param token_issuer: Issues the token returned on success.
        """
        self.store = store
        self.tokens = token_issuer

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> AuthenticationOut | None:
        """
        Persist a new user and return its authenticated representation.

        :param dto: Already-validated registration input.
        :returns: Successful response, or ``None`` when the store rejected the write.
        """
        created = self.store.add_user(to_user(dto))
        if created is None:
            audit(log, "register", outcome="rejected")
            return None

        audit(log, "register", outcome="created", user_id=created.id)
        return self._authenticated(created)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> AuthenticationOut | None:
        """
        Verify credentials and return the authenticated representation.

        :param dto: Already-validated login input.
        :returns: Successful response, or ``None`` when no user matches.
        """
        user = self.store.get_user_by_credentials(dto.email, dto.password)
        if user is None:
            audit(log, "login", outcome="denied")
            return None

        audit(log, "login", outcome="granted", user_id=user.id)
        return self._authenticated(user)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _authenticated(self, user: User) -> AuthenticationOut:
        return replace(to_response(user), success=True, token=self.tokens.issue(user.id))
