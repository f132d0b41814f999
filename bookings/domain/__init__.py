from bookings.domain.access import AppView, Operation, Role, UserSession
from bookings.domain.models import (
    AdvancedTechRequirements,
    Asset,
    AssetTemplate,
    AssetType,
    BankDetails,
    Booking,
    BookingStatus,
    BudgetSummary,
    CounterOfferType,
    DJProfile,
    Event,
    ExtraItem,
    ExtraType,
    GenreItem,
    GigItem,
    GigType,
    Offer,
    PriceQuote,
    SigningParty,
    TechItem,
    TechRequirement,
)
from bookings.domain.value_objects import (
    AssetId,
    BookingId,
    EventId,
    Money,
    Quantity,
    SignatureImage,
)

__all__ = [
    "AdvancedTechRequirements",
    "AppView",
    "Asset",
    "AssetId",
    "AssetTemplate",
    "AssetType",
    "BankDetails",
    "Booking",
    "BookingId",
    "BookingStatus",
    "BudgetSummary",
    "CounterOfferType",
    "DJProfile",
    "Event",
    "EventId",
    "ExtraItem",
    "ExtraType",
    "GenreItem",
    "GigItem",
    "GigType",
    "Money",
    "Offer",
    "Operation",
    "PriceQuote",
    "Quantity",
    "Role",
    "SignatureImage",
    "SigningParty",
    "TechItem",
    "TechRequirement",
    "UserSession",
]
