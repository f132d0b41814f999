from bookings.services.booking_service import BookingService
from bookings.services.contract_service import ContractDraftService
from bookings.services.ledger_service import LedgerService
from bookings.services.profile_service import ProfileService
from bookings.services.session_service import SessionService

__all__ = [
    "BookingService",
    "ContractDraftService",
    "LedgerService",
    "ProfileService",
    "SessionService",
]
