"""Process-memory implementation of the GigStore.

Collections are replaced wholesale on every write, so a reader holding a
previous snapshot never sees a partially-updated collection. Nothing survives
a restart.
"""

import threading
from collections.abc import Callable

from bookings.domain import Booking, BookingId, DJProfile, Event, EventId
from bookings.domain.catalog import DEFAULT_PROFILE
from bookings.stores.interfaces import GigStore


class InMemoryGigStore(GigStore):
    """Single-process store seeded with the default DJ profile."""

    def __init__(self, profile: DJProfile = DEFAULT_PROFILE) -> None:
        self._lock = threading.RLock()
        self._profile = profile
        self._bookings: tuple[Booking, ...] = ()
        self._events: tuple[Event, ...] = ()

    def get_profile(self) -> DJProfile:
        return self._profile

    def save_profile(self, profile: DJProfile) -> DJProfile:
        with self._lock:
            self._profile = profile
        return profile

    def list_bookings(self) -> list[Booking]:
        return sorted(self._bookings, key=lambda b: b.created_at, reverse=True)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def add_booking(self, booking: Booking) -> Booking:
        with self._lock:
            self._bookings = (booking, *self._bookings)
        return booking

    def update_booking(
        self, booking_id: BookingId, change: Callable[[Booking], Booking]
    ) -> Booking | None:
        with self._lock:
            current = self.get_booking(booking_id)
            if current is None:
                return None
            updated = change(current)
            self._bookings = tuple(
                updated if b.id == booking_id else b for b in self._bookings
            )
        return updated

    def list_events(self) -> list[Event]:
        return list(self._events)

    def get_event(self, event_id: EventId) -> Event | None:
        return next((e for e in self._events if e.id == event_id), None)

    def add_event(self, event: Event) -> Event:
        with self._lock:
            self._events = (*self._events, event)
        return event

    def update_event(
        self, event_id: EventId, change: Callable[[Event], Event]
    ) -> Event | None:
        with self._lock:
            current = self.get_event(event_id)
            if current is None:
                return None
            updated = change(current)
            self._events = tuple(
                updated if e.id == event_id else e for e in self._events
            )
        return updated
