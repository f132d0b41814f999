"""Unit tests for domain primitives and the status table.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from bookings.domain import BookingId, BookingStatus, Money, Quantity, SignatureImage
from bookings.domain.access import AppView, Operation, Role, can_perform, can_view
from bookings.domain.lifecycle import can_transition, is_terminal

from tests.conftest import PNG_DATA_URL


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("650")).amount == Decimal("650")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("650"))) == "650.00"


class TestQuantity:
    def test_quantity_accepts_zero(self):
        assert Quantity(0).value == 0

    def test_quantity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Quantity(-1)


class TestBookingId:
    def test_from_string_valid_uuid(self):
        raw = uuid4()
        assert BookingId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            BookingId.from_string("1699999999999")

    def test_str_is_the_uuid(self):
        raw = uuid4()
        assert str(BookingId(raw)) == str(raw)


class TestSignatureImage:
    def test_accepts_inline_png(self):
        image = SignatureImage(PNG_DATA_URL)
        assert image.mime_type == "image/png"
        assert image.to_bytes().startswith(b"\x89PNG")

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "https://example.com/signature.png",
            "data:text/plain;base64,aGVsbG8=",
            "data:image/png,not-base64",
            "data:image/png;base64,***",
        ],
    )
    def test_rejects_anything_else(self, value):
        with pytest.raises(ValueError):
            SignatureImage(value)


class TestStatusTable:
    def test_pending_can_be_accepted_or_declined(self):
        assert can_transition(BookingStatus.PENDING, BookingStatus.ACCEPTED)
        assert can_transition(BookingStatus.PENDING, BookingStatus.DECLINED)

    def test_declined_and_signed_are_terminal(self):
        assert is_terminal(BookingStatus.DECLINED)
        assert is_terminal(BookingStatus.SIGNED)
        assert not can_transition(BookingStatus.DECLINED, BookingStatus.ACCEPTED)
        assert not can_transition(BookingStatus.DECLINED, BookingStatus.SIGNED)

    def test_accepted_only_moves_to_signed(self):
        assert can_transition(BookingStatus.ACCEPTED, BookingStatus.SIGNED)
        assert not can_transition(BookingStatus.ACCEPTED, BookingStatus.DECLINED)

    def test_no_negotiating_state(self):
        assert "NEGOTIATING" not in BookingStatus.__members__


class TestAccessTables:
    def test_profile_editor_is_dj_only(self):
        assert can_view(Role.DJ, AppView.PROFILE_EDITOR)
        assert not can_view(Role.CLIENT, AppView.PROFILE_EDITOR)
        assert not can_view(Role.PROMOTER, AppView.PROFILE_EDITOR)

    def test_offer_booker_excludes_dj(self):
        assert can_view(Role.CLIENT, AppView.OFFER_BOOKER)
        assert can_view(Role.PROMOTER, AppView.OFFER_BOOKER)
        assert not can_view(Role.DJ, AppView.OFFER_BOOKER)

    @pytest.mark.parametrize("role", list(Role))
    def test_inbox_and_contract_open_to_all(self, role):
        assert can_view(role, AppView.INBOX)
        assert can_view(role, AppView.CONTRACT_VIEWER)

    def test_only_dj_responds_to_offers(self):
        assert can_perform(Role.DJ, Operation.RESPOND_TO_OFFER)
        assert not can_perform(Role.CLIENT, Operation.RESPOND_TO_OFFER)
