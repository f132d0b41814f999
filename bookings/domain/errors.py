"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_OFFER = "INVALID_OFFER"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    BOOKING_DECLINED = "BOOKING_DECLINED"
    ALREADY_SIGNED = "ALREADY_SIGNED"
    MISSING_SIGNATURE = "MISSING_SIGNATURE"
    CONTRACT_NOT_READY = "CONTRACT_NOT_READY"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_LOGGED_IN = "NOT_LOGGED_IN"
    ACCESS_DENIED = "ACCESS_DENIED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BookingNotFoundError(DomainError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        self.booking_id = booking_id


class EventNotFoundError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class InvalidBookingIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class InvalidEventIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidOfferError(DomainError):
    """Raised when an offer is missing the fields needed to submit it."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_OFFER, message=message)


class InvalidTransitionError(DomainError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot move booking from {current} to {target}",
        )
        self.current = current
        self.target = target


class BookingDeclinedError(DomainError):
    """Raised when a declined booking receives a signature."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_DECLINED,
            message="Declined bookings cannot be signed",
        )


class AlreadySignedError(DomainError):
    def __init__(self, party: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_SIGNED,
            message=f"Contract already signed by {party.lower()}",
        )
        self.party = party


class MissingSignatureError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_SIGNATURE,
            message="Please upload a signature first",
        )


class ContractNotReadyError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CONTRACT_NOT_READY,
            message="Contract text is not available yet",
        )


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials. Please try again.",
        )


class NotLoggedInError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NOT_LOGGED_IN, message="Please log in first")


class AccessDeniedError(DomainError):
    """Raised when the session's role may not use a view or operation."""

    def __init__(self, allowed: str) -> None:
        super().__init__(
            code=ErrorCode.ACCESS_DENIED,
            message=f"You must be logged in as a {allowed} to view this page.",
        )
