"""Session roles and the views/operations each role may use.

This is presentation routing for a single-process app, not a trust boundary.
"""

from dataclasses import dataclass
from enum import Enum

from bookings.domain.value_objects import EventId, SignatureImage


class Role(Enum):
    DJ = "DJ"
    CLIENT = "CLIENT"
    PROMOTER = "PROMOTER"


class AppView(Enum):
    PROFILE_EDITOR = "PROFILE_EDITOR"
    OFFER_BOOKER = "OFFER_BOOKER"
    INBOX = "INBOX"
    CONTRACT_VIEWER = "CONTRACT_VIEWER"
    EVENT_LEDGER = "EVENT_LEDGER"


class Operation(Enum):
    SAVE_PROFILE = "SAVE_PROFILE"
    SUBMIT_OFFER = "SUBMIT_OFFER"
    RESPOND_TO_OFFER = "RESPOND_TO_OFFER"
    SIGN_AS_ARTIST = "SIGN_AS_ARTIST"
    SIGN_AS_CLIENT = "SIGN_AS_CLIENT"
    MANAGE_EVENTS = "MANAGE_EVENTS"


_ALL_ROLES = frozenset(Role)

VIEW_ACCESS: dict[AppView, frozenset[Role]] = {
    AppView.PROFILE_EDITOR: frozenset({Role.DJ}),
    AppView.OFFER_BOOKER: frozenset({Role.CLIENT, Role.PROMOTER}),
    AppView.INBOX: _ALL_ROLES,
    AppView.CONTRACT_VIEWER: _ALL_ROLES,
    AppView.EVENT_LEDGER: frozenset({Role.PROMOTER}),
}

OPERATION_ACCESS: dict[Operation, frozenset[Role]] = {
    Operation.SAVE_PROFILE: frozenset({Role.DJ}),
    Operation.SUBMIT_OFFER: frozenset({Role.CLIENT, Role.PROMOTER}),
    Operation.RESPOND_TO_OFFER: frozenset({Role.DJ}),
    Operation.SIGN_AS_ARTIST: frozenset({Role.DJ}),
    Operation.SIGN_AS_CLIENT: frozenset({Role.CLIENT, Role.PROMOTER}),
    Operation.MANAGE_EVENTS: frozenset({Role.PROMOTER}),
}


def can_view(role: Role, view: AppView) -> bool:
    return role in VIEW_ACCESS[view]


def can_perform(role: Role, operation: Operation) -> bool:
    return role in OPERATION_ACCESS[operation]


@dataclass(frozen=True)
class UserSession:
    """State held for one logged-in user until logout."""

    role: Role
    username: str
    client_signature: SignatureImage | None = None
    active_event_id: EventId | None = None
