"""Booking lifecycle - offers, status responses and signatures.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import dataclasses
import logging
from dataclasses import dataclass

from django.utils import timezone

from bookings.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Money,
    Offer,
    Role,
    SignatureImage,
    SigningParty,
)
from bookings.domain.errors import (
    AlreadySignedError,
    BookingDeclinedError,
    BookingNotFoundError,
    InvalidBookingIdError,
    InvalidOfferError,
    InvalidTransitionError,
    MissingSignatureError,
)
from bookings.domain.lifecycle import RESPONSE_STATUSES, can_transition
from bookings.domain.value_objects import EventId
from bookings.services.ledger_service import LedgerService
from bookings.services.pricing import calculate_total
from bookings.stores.interfaces import GigStore

logger = logging.getLogger(__name__)

GENERIC_INBOX_TITLE = "Booking Request"


@dataclass(frozen=True)
class InboxEntry:
    booking: Booking
    title: str


@dataclass(frozen=True)
class Inbox:
    entries: tuple[InboxEntry, ...]
    pending_count: int = 0


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (ValueError, AttributeError, TypeError):
        raise InvalidBookingIdError() from None


def transition(booking: Booking, target: BookingStatus) -> Booking:
    """Move a booking to ``target`` if the transition table allows it."""
    if not can_transition(booking.status, target):
        raise InvalidTransitionError(booking.status.value, target.value)
    return dataclasses.replace(booking, status=target)


class BookingService:
    """Service for the booking lifecycle."""

    def __init__(self, store: GigStore, ledger: LedgerService | None = None) -> None:
        self._store = store
        self._ledger = ledger or LedgerService(store)

    def list_bookings(self) -> list[Booking]:
        """Return all bookings, newest first."""
        return self._store.list_bookings()

    def get_booking(self, booking_id: str | BookingId) -> Booking:
        """Return a booking by ID.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        bid = booking_id if isinstance(booking_id, BookingId) else parse_booking_id(booking_id)
        booking = self._store.get_booking(bid)
        if booking is None:
            raise BookingNotFoundError(str(bid))
        return booking

    def inbox(self, role: Role) -> Inbox:
        """Bookings as the given role sees them in its inbox.

        Only the DJ sees who sent each request and how many are pending.
        """
        bookings = self._store.list_bookings()
        if role is Role.DJ:
            entries = tuple(InboxEntry(b, b.offer.promoter_name) for b in bookings)
            pending = sum(1 for b in bookings if b.status is BookingStatus.PENDING)
            return Inbox(entries=entries, pending_count=pending)
        return Inbox(entries=tuple(InboxEntry(b, GENERIC_INBOX_TITLE) for b in bookings))

    def submit_offer(self, offer: Offer, event_id: str | EventId | None = None) -> Booking:
        """Create a PENDING booking from an offer.

        The total is computed here once and frozen into the booking. When the
        offer was made for a promoter event, the event also gets an ARTIST
        line item at that cost.

        Raises:
            InvalidOfferError: If the offer has no promoter name or date.
            InvalidEventIdError: If event_id is not a valid UUID.
            EventNotFoundError: If the linked event does not exist.
        """
        if not offer.promoter_name.strip():
            raise InvalidOfferError("Promoter name is required")
        if offer.event_date is None:
            raise InvalidOfferError("Event date is required")

        event = self._ledger.get_event(event_id) if event_id is not None else None
        profile = self._store.get_profile()
        total = calculate_total(
            profile.hourly_rate.amount,
            offer.duration_hours,
            offer.use_standard_rate,
            offer.counter_offer_amount,
            offer.selected_extras,
            profile.extras,
        )
        booking = Booking(
            id=BookingId.new(),
            offer=offer,
            created_at=timezone.now(),
            status=BookingStatus.PENDING,
            total=Money(total),
            currency=profile.currency,
            event_id=event.id if event else None,
        )
        self._store.add_booking(booking)
        logger.info(
            "Booking %s submitted by %s for %s %s",
            booking.id,
            offer.promoter_name,
            booking.currency,
            booking.total,
        )

        if event is not None:
            self._ledger.add_artist_asset(event.id, booking, profile.name, total)
        return booking

    def update_status(self, booking_id: str | BookingId, status: BookingStatus) -> Booking:
        """Accept or decline a pending booking.

        Raises:
            InvalidTransitionError: For any target other than ACCEPTED or
                DECLINED, or when the booking is no longer PENDING.
        """
        booking = self.get_booking(booking_id)
        if status not in RESPONSE_STATUSES:
            raise InvalidTransitionError(booking.status.value, status.value)

        updated = self._store.update_booking(booking.id, lambda b: transition(b, status))
        logger.info("Booking %s moved to %s", updated.id, updated.status.value)
        return updated

    def sign(
        self,
        booking_id: str | BookingId,
        party: SigningParty,
        client_signature: SignatureImage | None = None,
    ) -> Booking:
        """Record one party's signature and re-derive the booking status.

        The artist signs with the profile signature; the client with the
        signature held in their session. Status becomes SIGNED as soon as both
        flags are set.

        Raises:
            MissingSignatureError: If the signing party has no signature image.
            BookingDeclinedError: If the booking was declined.
            AlreadySignedError: If this party already signed.
        """
        booking = self.get_booking(booking_id)
        if party is SigningParty.ARTIST:
            signature = self._store.get_profile().signature
        else:
            signature = client_signature
        if signature is None:
            raise MissingSignatureError()

        def apply(current: Booking) -> Booking:
            if current.status is BookingStatus.DECLINED:
                raise BookingDeclinedError()
            if current.signed_by(party):
                raise AlreadySignedError(party.value)
            if party is SigningParty.ARTIST:
                signed = dataclasses.replace(current, artist_signed=True)
            else:
                signed = dataclasses.replace(
                    current, client_signed=True, client_signature=signature
                )
            if signed.fully_signed:
                return transition(signed, BookingStatus.SIGNED)
            return signed

        updated = self._store.update_booking(booking.id, apply)
        logger.info(
            "Booking %s signed by %s (status %s)",
            updated.id,
            party.value.lower(),
            updated.status.value,
        )
        return updated
