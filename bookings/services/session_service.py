"""Login and role routing for the three session types."""

import dataclasses
import hmac
import logging
from collections.abc import Mapping

from bookings.domain import AppView, EventId, Operation, Role, SignatureImage, UserSession
from bookings.domain.access import OPERATION_ACCESS, VIEW_ACCESS, can_perform, can_view
from bookings.domain.errors import (
    AccessDeniedError,
    InvalidCredentialsError,
    NotLoggedInError,
)

logger = logging.getLogger(__name__)

_ROLE_LABELS = {
    Role.DJ: "Artist",
    Role.CLIENT: "Client",
    Role.PROMOTER: "Promoter",
}


def _describe(roles: frozenset[Role]) -> str:
    return " or ".join(_ROLE_LABELS[r] for r in Role if r in roles)


class SessionService:
    """Checks credentials and gates views and operations by role.

    ``credentials`` maps username to ``(password, role name)``.
    """

    def __init__(self, credentials: Mapping[str, tuple[str, str]]) -> None:
        self._credentials = credentials

    def login(self, username: str, password: str) -> UserSession:
        entry = self._credentials.get(username)
        if entry is None or not hmac.compare_digest(entry[0], password):
            logger.info("Rejected login for %r", username)
            raise InvalidCredentialsError()
        session = UserSession(role=Role(entry[1]), username=username)
        logger.info("%s logged in as %s", username, session.role.value)
        return session

    @staticmethod
    def require_view(session: UserSession | None, view: AppView) -> UserSession:
        if session is None:
            raise NotLoggedInError()
        if not can_view(session.role, view):
            raise AccessDeniedError(_describe(VIEW_ACCESS[view]))
        return session

    @staticmethod
    def require_operation(session: UserSession | None, operation: Operation) -> UserSession:
        if session is None:
            raise NotLoggedInError()
        if not can_perform(session.role, operation):
            raise AccessDeniedError(_describe(OPERATION_ACCESS[operation]))
        return session

    @staticmethod
    def with_client_signature(session: UserSession, image: SignatureImage) -> UserSession:
        return dataclasses.replace(session, client_signature=image)

    @staticmethod
    def with_active_event(session: UserSession, event_id: EventId | None) -> UserSession:
        return dataclasses.replace(session, active_event_id=event_id)
