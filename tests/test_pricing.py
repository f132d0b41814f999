"""Unit tests for booking price calculation.

Run with: pytest tests/test_pricing.py -v
"""

from decimal import Decimal

import pytest

from bookings.domain import CounterOfferType, ExtraItem, ExtraType, Money
from bookings.domain.catalog import DEFAULT_PROFILE
from bookings.services.pricing import calculate_total, quote, to_amount

EXTRAS = (
    ExtraItem(id="1", name="Additional PA System (Small)", price=Money(Decimal("150")), type=ExtraType.EQUIPMENT),
    ExtraItem(id="2", name="Lighting Package", price=Money(Decimal("100")), type=ExtraType.EQUIPMENT),
)


class TestToAmount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("500", Decimal("500")),
            (500, Decimal("500")),
            (Decimal("12.5"), Decimal("12.5")),
            (" 75.25 ", Decimal("75.25")),
        ],
    )
    def test_parses_numbers(self, raw, expected):
        assert to_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", None, "NaN", "Infinity", True, [], "-20", -5])
    def test_junk_and_negatives_become_zero(self, raw):
        assert to_amount(raw) == Decimal("0")


class TestCalculateTotal:
    def test_standard_rate_multiplies_by_duration(self):
        total = calculate_total(250, 2, True, 999, ["1"], EXTRAS)
        assert total == Decimal("650.00")

    def test_counter_offer_is_a_flat_fee(self):
        total = calculate_total(250, 2, False, 500, [], EXTRAS)
        assert total == Decimal("500.00")

    def test_counter_offer_plus_extras(self):
        total = calculate_total(250, 3, False, "400", ["1", "2"], EXTRAS)
        assert total == Decimal("650.00")

    def test_unknown_extra_ids_contribute_nothing(self):
        with_unknown = calculate_total(250, 2, True, 0, ["1", "missing", "42"], EXTRAS)
        without = calculate_total(250, 2, True, 0, ["1"], EXTRAS)
        assert with_unknown == without == Decimal("650.00")

    def test_duplicate_selection_counts_once(self):
        assert calculate_total(250, 2, True, 0, ["1", "1"], EXTRAS) == Decimal("650.00")

    def test_malformed_counter_offer_treated_as_zero(self):
        assert calculate_total(250, 2, False, "lots", ["2"], EXTRAS) == Decimal("100.00")

    def test_is_deterministic(self):
        args = (Decimal("199.99"), Decimal("2"), True, 0, ["1", "2"], EXTRAS)
        assert calculate_total(*args) == calculate_total(*args) == Decimal("649.98")


class TestQuote:
    def test_breakdown_for_standard_rate(self, make_offer):
        offer = make_offer(selected_extras=("1",))
        price = quote(DEFAULT_PROFILE, offer)
        assert price.base_fee == Decimal("500.00")
        assert [e.id for e in price.extras] == ["1"]
        assert price.extras_total == Decimal("150.00")
        assert price.total == Decimal("650.00")
        assert price.currency == "NZD"

    def test_hourly_counter_offer_is_not_multiplied(self, make_offer):
        offer = make_offer(
            use_standard_rate=False,
            counter_offer_amount=Decimal("500"),
            counter_offer_type=CounterOfferType.HOURLY,
            duration_hours=Decimal("4"),
        )
        assert quote(DEFAULT_PROFILE, offer).total == Decimal("500.00")
