"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from bookings.domain import Booking, BookingId, DJProfile, Event, EventId


class GigStore(ABC):
    """Interface for profile, booking and event state."""

    @abstractmethod
    def get_profile(self) -> DJProfile:
        """Return the DJ profile."""
        ...

    @abstractmethod
    def save_profile(self, profile: DJProfile) -> DJProfile:
        """Replace the DJ profile."""
        ...

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return all bookings ordered by created_at descending."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def add_booking(self, booking: Booking) -> Booking:
        ...

    @abstractmethod
    def update_booking(
        self, booking_id: BookingId, change: Callable[[Booking], Booking]
    ) -> Booking | None:
        """Atomically replace a booking with ``change(booking)``.

        Returns the new booking, or None if the booking does not exist.
        Exceptions raised by ``change`` leave the store untouched.
        """
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> Event:
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, change: Callable[[Event], Event]
    ) -> Event | None:
        """Atomically replace an event with ``change(event)``."""
        ...
