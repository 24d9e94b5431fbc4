"""SQLAlchemy-backed implementation of the ``UserStore`` port."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.exc import IntegrityError

from identity_service.models.user import User
from identity_service.services._shared.ports import UserStore, new_user_id
from identity_service.uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

log = logging.getLogger(__name__)


class SQLAlchemyUserStore(UserStore):
    """
    Persist users through :class:`~identity_service.repositories.UserRepository`.

    Each call runs in its own unit of work: ``add_user`` in a read-write one
    (commit on success), lookups in a read-only one. Only integrity violations
    (duplicate email) are turned into an absent result; connectivity and other
    database errors propagate to the caller.
    """

    def __init__(
        self,
        *,
        rw_uow: Callable[[], SQLAlchemyUnitOfWork] = SQLAlchemyUnitOfWork,
        ro_uow: Callable[[], SQLAlchemyReadOnlyUnitOfWork] = SQLAlchemyReadOnlyUnitOfWork,
    ) -> None:
        self._rw_uow = rw_uow
        self._ro_uow = ro_uow

    def add_user(self, user: User) -> User | None:
        """
        Assign a fresh id and insert ``user``.

        :param user: Candidate user with ``id`` unset.
        :returns: The persisted user, or ``None`` if the insert was rejected.
        """
        user.id = new_user_id()
        try:
            with self._rw_uow() as uow:
                uow.users.add(user)
        except IntegrityError as exc:
            # The unit of work already rolled back.
            log.warning("users.insert_rejected constraint=%s", _constraint_hint(exc))
            return None
        return user

    def get_user_by_credentials(self, email: str, password: str) -> User | None:
        """
        Return the user with ``email`` whose stored hash verifies ``password``.

        :param email: Exact email to look up.
        :param password: Raw password candidate.
        :returns: Matching user or ``None``.
        """
        # The instance stays attached; attributes reload after the scope rolls back.
        with self._ro_uow() as uow:
            return uow.users.authenticate(email, password)


def _constraint_hint(exc: IntegrityError) -> str:
    message = str(exc.orig).lower() if exc.orig else ""
    return "uq_users_email" if "uq_users_email" in message or "users.email" in message else "unknown"
