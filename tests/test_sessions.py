"""Unit tests for login and role routing.

Run with: pytest tests/test_sessions.py -v
"""

import pytest
from django.conf import settings

from bookings.domain import AppView, Operation, Role
from bookings.domain.errors import (
    AccessDeniedError,
    InvalidCredentialsError,
    NotLoggedInError,
)
from bookings.services import SessionService


@pytest.fixture
def sessions() -> SessionService:
    return SessionService(settings.GIGFLOW_CREDENTIALS)


class TestLogin:
    @pytest.mark.parametrize(
        "username, role",
        [("artist", Role.DJ), ("client", Role.CLIENT), ("promoter", Role.PROMOTER)],
    )
    def test_known_credentials(self, sessions, username, role):
        session = sessions.login(username, username)
        assert session.role is role
        assert session.client_signature is None
        assert session.active_event_id is None

    @pytest.mark.parametrize("username, password", [("artist", "client"), ("dj", "dj"), ("", "")])
    def test_wrong_credentials(self, sessions, username, password):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            sessions.login(username, password)
        assert exc_info.value.message == "Invalid credentials. Please try again."


class TestRouting:
    def test_anonymous_rejected(self):
        with pytest.raises(NotLoggedInError):
            SessionService.require_view(None, AppView.INBOX)

    def test_client_denied_profile_editor(self, sessions):
        client = sessions.login("client", "client")
        with pytest.raises(AccessDeniedError) as exc_info:
            SessionService.require_view(client, AppView.PROFILE_EDITOR)
        assert "Artist" in exc_info.value.message

    def test_dj_denied_offer_submission(self, sessions):
        dj = sessions.login("artist", "artist")
        with pytest.raises(AccessDeniedError) as exc_info:
            SessionService.require_operation(dj, Operation.SUBMIT_OFFER)
        assert "Client or Promoter" in exc_info.value.message

    def test_promoter_manages_events(self, sessions):
        promoter = sessions.login("promoter", "promoter")
        assert SessionService.require_operation(promoter, Operation.MANAGE_EVENTS) is promoter
