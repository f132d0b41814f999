"""Booking status state machine.

Status changes go through this table. SIGNED is only reachable once both
parties have signed, which the booking service checks before asking for it.
"""

from bookings.domain.models import BookingStatus

TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.ACCEPTED, BookingStatus.DECLINED, BookingStatus.SIGNED}
    ),
    BookingStatus.ACCEPTED: frozenset({BookingStatus.SIGNED}),
    BookingStatus.DECLINED: frozenset(),
    BookingStatus.SIGNED: frozenset(),
}

# Targets a participant may request directly; SIGNED only follows signatures.
RESPONSE_STATUSES = frozenset({BookingStatus.ACCEPTED, BookingStatus.DECLINED})


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in TRANSITIONS[current]


def is_terminal(status: BookingStatus) -> bool:
    return not TRANSITIONS[status]
