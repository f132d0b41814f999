"""Booking price calculation.

Pure functions: the same inputs always give the same total, so the figure
shown while drafting an offer matches the one frozen into the booking and any
promoter budget line.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from bookings.domain import DJProfile, ExtraItem, Offer, PriceQuote

_CENT = Decimal("0.01")
_ZERO = Decimal("0")


def to_amount(value: Any) -> Decimal:
    """Coerce user input to a non-negative Decimal, treating junk as 0."""
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return _ZERO
    if not amount.is_finite() or amount < 0:
        return _ZERO
    return amount


def selected_extras(
    selected_extra_ids: Iterable[str], extras: Iterable[ExtraItem]
) -> tuple[ExtraItem, ...]:
    """Catalog extras picked by id, in catalog order. Unknown ids are ignored."""
    wanted = set(selected_extra_ids)
    return tuple(extra for extra in extras if extra.id in wanted)


def base_fee(
    hourly_rate: Any,
    duration_hours: Any,
    use_standard_rate: bool,
    counter_offer_amount: Any,
) -> Decimal:
    # Counter-offers are a flat total whatever their declared type.
    if use_standard_rate:
        return to_amount(hourly_rate) * to_amount(duration_hours)
    return to_amount(counter_offer_amount)


def calculate_total(
    hourly_rate: Any,
    duration_hours: Any,
    use_standard_rate: bool,
    counter_offer_amount: Any,
    selected_extra_ids: Iterable[str],
    extras: Iterable[ExtraItem],
) -> Decimal:
    """Return base fee plus selected extras, rounded to cents."""
    fee = base_fee(hourly_rate, duration_hours, use_standard_rate, counter_offer_amount)
    extras_total = sum(
        (extra.price.amount for extra in selected_extras(selected_extra_ids, extras)),
        _ZERO,
    )
    return (fee + extras_total).quantize(_CENT, rounding=ROUND_HALF_UP)


def quote(profile: DJProfile, offer: Offer) -> PriceQuote:
    """Invoice breakdown of an offer against the profile's rate and extras."""
    items = selected_extras(offer.selected_extras, profile.extras)
    extras_total = sum((item.price.amount for item in items), _ZERO).quantize(_CENT)
    total = calculate_total(
        profile.hourly_rate.amount,
        offer.duration_hours,
        offer.use_standard_rate,
        offer.counter_offer_amount,
        offer.selected_extras,
        profile.extras,
    )
    return PriceQuote(
        base_fee=total - extras_total,
        extras=items,
        extras_total=extras_total,
        total=total,
        currency=profile.currency,
    )
