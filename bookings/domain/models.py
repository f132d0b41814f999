"""Domain models representing in-memory state.

These are pure domain objects with no API input rules. Collections are tuples
so every update produces a new object instead of mutating a shared one.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from bookings.domain.value_objects import (
    AssetId,
    BookingId,
    EventId,
    Money,
    Quantity,
    SignatureImage,
)


class BookingStatus(Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    SIGNED = "SIGNED"


class CounterOfferType(Enum):
    """Declared on offers but not used by pricing: counter-offers are flat fees."""

    FLAT = "FLAT"
    HOURLY = "HOURLY"


class ExtraType(Enum):
    EQUIPMENT = "EQUIPMENT"
    SERVICE = "SERVICE"


class GigType(Enum):
    PAST = "PAST"
    FUTURE = "FUTURE"
    AVAILABLE = "AVAILABLE"


class AssetType(Enum):
    ARTIST = "ARTIST"
    EQUIPMENT = "EQUIPMENT"
    STAFF = "STAFF"
    VENUE = "VENUE"
    OTHER = "OTHER"


class SigningParty(Enum):
    ARTIST = "ARTIST"
    CLIENT = "CLIENT"


@dataclass(frozen=True)
class TechItem:
    id: str
    name: str
    essential: bool


@dataclass(frozen=True)
class TechRequirement:
    enabled: bool = False
    comment: str = ""


@dataclass(frozen=True)
class AdvancedTechRequirements:
    """The fixed set of advanced technical requirements a DJ can flag."""

    serato: TechRequirement = TechRequirement()
    rekordbox: TechRequirement = TechRequirement()
    laptop_input: TechRequirement = TechRequirement()
    four_channels: TechRequirement = TechRequirement()


@dataclass(frozen=True)
class GenreItem:
    id: str
    name: str
    links: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExtraItem:
    """A priced add-on the DJ offers on top of the performance fee."""

    id: str
    name: str
    price: Money
    type: ExtraType


@dataclass(frozen=True)
class GigItem:
    id: str
    date: date
    event_name: str
    type: GigType
    link: str | None = None


@dataclass(frozen=True)
class BankDetails:
    bank_name: str = ""
    account_name: str = ""
    account_number: str = ""
    reference: str = ""


@dataclass(frozen=True)
class DJProfile:
    """Domain representation of the DJ's public and private profile."""

    name: str
    bio: str
    email: str
    soundcloud_url: str
    hourly_rate: Money
    currency: str
    tech_rider: tuple[TechItem, ...] = ()
    tech_requirements: AdvancedTechRequirements = AdvancedTechRequirements()
    genres: tuple[GenreItem, ...] = ()
    extras: tuple[ExtraItem, ...] = ()
    schedule: tuple[GigItem, ...] = ()
    bank_details: BankDetails = BankDetails()
    signature: SignatureImage | None = None


@dataclass(frozen=True)
class Offer:
    """Terms proposed by a client or promoter before acceptance."""

    promoter_name: str
    promoter_email: str
    event_date: date
    start_time: str
    duration_hours: Decimal
    location: str
    use_standard_rate: bool = True
    counter_offer_amount: Decimal = Decimal("0")
    counter_offer_type: CounterOfferType = CounterOfferType.FLAT
    provides_transport: bool = False
    provides_accommodation: bool = False
    provides_food: bool = False
    provides_drinks: bool = False
    additional_notes: str = ""
    selected_extras: tuple[str, ...] = ()

    def hospitality(self) -> list[str]:
        """Labels for the hospitality the promoter provides."""
        provided = [
            (self.provides_transport, "Transport"),
            (self.provides_accommodation, "Accommodation"),
            (self.provides_food, "Food/Dinner"),
            (self.provides_drinks, "Drinks/Rider"),
        ]
        return [label for flag, label in provided if flag]


@dataclass(frozen=True)
class Booking:
    """An Offer plus lifecycle status and signature state.

    ``total`` is computed once when the offer is submitted and never
    recomputed, even if the profile's rate or extras change afterwards.
    """

    id: BookingId
    offer: Offer
    created_at: datetime
    status: BookingStatus
    total: Money
    currency: str
    artist_signed: bool = False
    client_signed: bool = False
    client_signature: SignatureImage | None = None
    event_id: EventId | None = None

    @property
    def fully_signed(self) -> bool:
        return self.artist_signed and self.client_signed

    def signed_by(self, party: SigningParty) -> bool:
        if party is SigningParty.ARTIST:
            return self.artist_signed
        return self.client_signed


@dataclass(frozen=True)
class AssetTemplate:
    """Catalog entry a promoter can add to an event as-is."""

    name: str
    type: AssetType
    cost: Money
    quantity: Quantity


@dataclass(frozen=True)
class Asset:
    """Budget line item within an Event.

    Only ARTIST assets carry ``booking_id``; their cost is frozen at booking
    time and not re-synced with the booking.
    """

    id: AssetId
    name: str
    type: AssetType
    cost: Money
    quantity: Quantity
    booking_id: BookingId | None = None

    @property
    def line_total(self) -> Decimal:
        return self.cost.amount * self.quantity.value


@dataclass(frozen=True)
class Event:
    """Promoter-owned event with its budget line items."""

    id: EventId
    name: str
    date: date
    location: str
    total_budget: Money
    assets: tuple[Asset, ...] = ()


@dataclass(frozen=True)
class BudgetSummary:
    total_budget: Decimal
    total_spend: Decimal
    remaining_budget: Decimal
    progress_percent: Decimal
    spend_by_type: tuple[tuple[AssetType, Decimal], ...] = ()

    @property
    def over_budget(self) -> bool:
        return self.remaining_budget < 0


@dataclass(frozen=True)
class PriceQuote:
    """Invoice breakdown of a booking's total."""

    base_fee: Decimal
    extras: tuple[ExtraItem, ...]
    extras_total: Decimal
    total: Decimal
    currency: str
