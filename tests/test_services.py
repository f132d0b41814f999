"""Unit tests for BookingService.

These test the lifecycle rules and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import dataclasses
from decimal import Decimal

import pytest

from bookings.domain import BookingStatus, Money, Role, SigningParty
from bookings.domain.errors import (
    AlreadySignedError,
    BookingDeclinedError,
    BookingNotFoundError,
    EventNotFoundError,
    InvalidBookingIdError,
    InvalidOfferError,
    InvalidTransitionError,
    MissingSignatureError,
)
from bookings.services import BookingService, LedgerService


@pytest.fixture
def service(store) -> BookingService:
    return BookingService(store)


@pytest.fixture
def signed_profile(store, signature):
    store.save_profile(dataclasses.replace(store.get_profile(), signature=signature))


class TestSubmitOffer:
    def test_creates_pending_booking_with_frozen_total(self, service, make_offer):
        booking = service.submit_offer(make_offer(selected_extras=("1",)))
        assert booking.status is BookingStatus.PENDING
        assert booking.total.amount == Decimal("650.00")
        assert booking.currency == "NZD"
        assert not booking.artist_signed and not booking.client_signed
        assert booking.event_id is None
        assert service.get_booking(str(booking.id)) == booking

    def test_counter_offer_total(self, service, make_offer):
        booking = service.submit_offer(
            make_offer(use_standard_rate=False, counter_offer_amount=Decimal("500"))
        )
        assert booking.total.amount == Decimal("500.00")

    def test_total_not_recomputed_after_rate_change(self, service, store, make_offer):
        booking = service.submit_offer(make_offer())
        profile = store.get_profile()
        store.save_profile(dataclasses.replace(profile, hourly_rate=Money(Decimal("999"))))
        assert service.get_booking(booking.id).total.amount == Decimal("500.00")

    def test_requires_promoter_name(self, service, make_offer):
        with pytest.raises(InvalidOfferError):
            service.submit_offer(make_offer(promoter_name="   "))

    def test_promoter_offer_adds_artist_asset(self, service, store, make_offer):
        ledger = LedgerService(store)
        event = ledger.create_event("Warehouse Rave", make_offer().event_date, Decimal("10000"))

        booking = service.submit_offer(make_offer(selected_extras=("1",)), event_id=str(event.id))

        assets = ledger.get_event(event.id).assets
        assert booking.event_id == event.id
        assert len(assets) == 1
        assert assets[0].name == "DJ Booking: DJ Nexus"
        assert assets[0].booking_id == booking.id
        assert assets[0].cost.amount == booking.total.amount
        assert assets[0].quantity.value == 1

    def test_unknown_event_creates_nothing(self, service, make_offer):
        with pytest.raises(EventNotFoundError):
            service.submit_offer(make_offer(), event_id="8d0c7e0e-0000-4000-8000-000000000000")
        assert service.list_bookings() == []


class TestGetBooking:
    def test_get_booking_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidBookingIdError):
            service.get_booking("not-a-uuid")

    def test_get_booking_not_found_raises_error(self, service):
        with pytest.raises(BookingNotFoundError):
            service.get_booking("8d0c7e0e-0000-4000-8000-000000000000")

    def test_list_is_newest_first(self, service, make_offer):
        first = service.submit_offer(make_offer(promoter_name="First"))
        second = service.submit_offer(make_offer(promoter_name="Second"))
        assert [b.id for b in service.list_bookings()] == [second.id, first.id]


class TestUpdateStatus:
    def test_accept_pending(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        assert service.update_status(booking.id, BookingStatus.ACCEPTED).status is BookingStatus.ACCEPTED

    def test_decline_pending(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        assert service.update_status(booking.id, BookingStatus.DECLINED).status is BookingStatus.DECLINED

    def test_declined_is_terminal(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        service.update_status(booking.id, BookingStatus.DECLINED)
        with pytest.raises(InvalidTransitionError):
            service.update_status(booking.id, BookingStatus.ACCEPTED)
        assert service.get_booking(booking.id).status is BookingStatus.DECLINED

    @pytest.mark.parametrize("target", [BookingStatus.SIGNED, BookingStatus.PENDING])
    def test_signed_and_pending_cannot_be_requested(self, service, make_offer, target):
        booking = service.submit_offer(make_offer())
        with pytest.raises(InvalidTransitionError):
            service.update_status(booking.id, target)

    def test_accepted_cannot_be_declined(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        service.update_status(booking.id, BookingStatus.ACCEPTED)
        with pytest.raises(InvalidTransitionError):
            service.update_status(booking.id, BookingStatus.DECLINED)


@pytest.mark.usefixtures("signed_profile")
class TestSign:
    def test_artist_only_keeps_status(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        service.update_status(booking.id, BookingStatus.ACCEPTED)

        signed = service.sign(booking.id, SigningParty.ARTIST)

        assert signed.artist_signed is True
        assert signed.client_signed is False
        assert signed.status is BookingStatus.ACCEPTED

    def test_both_parties_sign_in_either_order(self, service, make_offer, signature):
        first = service.submit_offer(make_offer())
        second = service.submit_offer(make_offer())

        service.sign(first.id, SigningParty.ARTIST)
        assert service.sign(first.id, SigningParty.CLIENT, signature).status is BookingStatus.SIGNED

        after_client = service.sign(second.id, SigningParty.CLIENT, signature)
        assert after_client.status is BookingStatus.PENDING
        assert after_client.client_signature == signature
        assert service.sign(second.id, SigningParty.ARTIST).status is BookingStatus.SIGNED

    def test_client_without_signature_rejected(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        with pytest.raises(MissingSignatureError):
            service.sign(booking.id, SigningParty.CLIENT, None)
        assert service.get_booking(booking.id).client_signed is False

    def test_declined_booking_rejects_signatures(self, service, make_offer, signature):
        booking = service.submit_offer(make_offer())
        service.sign(booking.id, SigningParty.ARTIST)
        service.update_status(booking.id, BookingStatus.DECLINED)

        with pytest.raises(BookingDeclinedError):
            service.sign(booking.id, SigningParty.CLIENT, signature)

        current = service.get_booking(booking.id)
        assert current.status is BookingStatus.DECLINED
        assert current.client_signed is False

    def test_same_party_cannot_sign_twice(self, service, make_offer):
        booking = service.submit_offer(make_offer())
        service.sign(booking.id, SigningParty.ARTIST)
        with pytest.raises(AlreadySignedError):
            service.sign(booking.id, SigningParty.ARTIST)


def test_artist_without_profile_signature_rejected(service, make_offer):
    booking = service.submit_offer(make_offer())
    with pytest.raises(MissingSignatureError):
        service.sign(booking.id, SigningParty.ARTIST)


class TestInbox:
    def test_dj_sees_promoter_and_pending_count(self, service, make_offer):
        pending = service.submit_offer(make_offer(promoter_name="Club Nine"))
        accepted = service.submit_offer(make_offer(promoter_name="Sky Bar"))
        service.update_status(accepted.id, BookingStatus.ACCEPTED)

        inbox = service.inbox(Role.DJ)

        assert [e.title for e in inbox.entries] == ["Sky Bar", "Club Nine"]
        assert inbox.entries[1].booking.id == pending.id
        assert inbox.pending_count == 1

    @pytest.mark.parametrize("role", [Role.CLIENT, Role.PROMOTER])
    def test_others_see_generic_titles(self, service, make_offer, role):
        service.submit_offer(make_offer(promoter_name="Club Nine"))
        inbox = service.inbox(role)
        assert [e.title for e in inbox.entries] == ["Booking Request"]
        assert inbox.pending_count == 0
