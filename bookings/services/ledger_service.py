"""Promoter event budgets.

Budget figures are derived on every read and never stored. Going over budget
is logged as a warning but never blocks adding more line items.
"""

import dataclasses
import logging
from datetime import date
from decimal import Decimal

from bookings.domain import (
    Asset,
    AssetId,
    AssetTemplate,
    AssetType,
    Booking,
    BudgetSummary,
    Event,
    EventId,
    Money,
    Quantity,
)
from bookings.domain.errors import EventNotFoundError, InvalidEventIdError
from bookings.services.pricing import to_amount
from bookings.stores.interfaces import GigStore

logger = logging.getLogger(__name__)

_HUNDRED = Decimal("100")


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, AttributeError, TypeError):
        raise InvalidEventIdError() from None


def summarize(event: Event) -> BudgetSummary:
    """Spend, remaining budget and progress for an event."""
    total_budget = event.total_budget.amount
    total_spend = sum((asset.line_total for asset in event.assets), Decimal("0"))
    divisor = total_budget or Decimal("1")
    progress = min(_HUNDRED, total_spend / divisor * _HUNDRED)

    by_type: dict[AssetType, Decimal] = {}
    for asset in event.assets:
        by_type[asset.type] = by_type.get(asset.type, Decimal("0")) + asset.line_total

    return BudgetSummary(
        total_budget=total_budget,
        total_spend=total_spend,
        remaining_budget=total_budget - total_spend,
        progress_percent=progress,
        spend_by_type=tuple(by_type.items()),
    )


class LedgerService:
    """Service for promoter events and their budget line items."""

    def __init__(self, store: GigStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def get_event(self, event_id: str | EventId) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = event_id if isinstance(event_id, EventId) else parse_event_id(event_id)
        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid))
        return event

    def create_event(
        self, name: str, event_date: date, budget: Decimal | str, location: str = "TBD"
    ) -> Event:
        event = Event(
            id=EventId.new(),
            name=name,
            date=event_date,
            location=location or "TBD",
            total_budget=Money(to_amount(budget)),
        )
        self._store.add_event(event)
        logger.info("Created event %s (%s) with budget %s", event.id, name, event.total_budget)
        return event

    def add_catalog_asset(self, event_id: str | EventId, template: AssetTemplate) -> Event:
        asset = Asset(
            id=AssetId.new(),
            name=template.name,
            type=template.type,
            cost=template.cost,
            quantity=template.quantity,
        )
        return self._append(event_id, asset)

    def add_artist_asset(
        self,
        event_id: str | EventId,
        booking: Booking,
        dj_name: str,
        computed_cost: Decimal,
    ) -> Event:
        asset = Asset(
            id=AssetId.new(),
            name=f"DJ Booking: {dj_name}",
            type=AssetType.ARTIST,
            cost=Money(computed_cost),
            quantity=Quantity(1),
            booking_id=booking.id,
        )
        return self._append(event_id, asset)

    def remove_asset(self, event_id: str | EventId, asset_id: str | AssetId) -> Event:
        """Remove a line item. Unknown or malformed asset ids leave the event unchanged."""
        event = self.get_event(event_id)
        if isinstance(asset_id, str):
            try:
                asset_id = AssetId.from_string(asset_id)
            except ValueError:
                return event
        if not any(a.id == asset_id for a in event.assets):
            return event

        def drop(e: Event) -> Event:
            return dataclasses.replace(e, assets=tuple(a for a in e.assets if a.id != asset_id))

        updated = self._store.update_event(event.id, drop)
        logger.info("Removed asset %s from event %s", asset_id, event.id)
        return updated

    def _append(self, event_id: str | EventId, asset: Asset) -> Event:
        event = self.get_event(event_id)
        updated = self._store.update_event(
            event.id, lambda e: dataclasses.replace(e, assets=(*e.assets, asset))
        )
        summary = summarize(updated)
        logger.info("Added %s asset %r to event %s", asset.type.value, asset.name, event.id)
        if summary.over_budget:
            logger.warning(
                "Event %s is over budget by %s", event.id, -summary.remaining_budget
            )
        return updated
