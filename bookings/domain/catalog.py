"""Seed data: the default DJ profile and the promoter's asset catalog."""

from datetime import date
from decimal import Decimal

from bookings.domain.models import (
    AdvancedTechRequirements,
    AssetTemplate,
    AssetType,
    BankDetails,
    DJProfile,
    ExtraItem,
    ExtraType,
    GenreItem,
    GigItem,
    GigType,
    TechItem,
)
from bookings.domain.value_objects import Money, Quantity

DEFAULT_TECH_RIDER = (
    TechItem(id="1", name="2x Pioneer CDJ-3000", essential=True),
    TechItem(id="2", name="1x Pioneer DJM-900NXS2 Mixer", essential=True),
    TechItem(id="3", name="High-quality Booth Monitors", essential=True),
)

DEFAULT_PROFILE = DJProfile(
    name="DJ Nexus",
    bio=(
        "Electronic music producer and DJ specializing in deep house and techno. "
        "Over 10 years of experience playing at major clubs and festivals."
    ),
    email="booking@djnexus.com",
    soundcloud_url="https://soundcloud.com/example",
    hourly_rate=Money(Decimal("250")),
    currency="NZD",
    tech_rider=DEFAULT_TECH_RIDER,
    tech_requirements=AdvancedTechRequirements(),
    genres=(
        GenreItem(id="1", name="Deep House", links=("https://soundcloud.com/mix1",)),
        GenreItem(id="2", name="Techno"),
    ),
    extras=(
        ExtraItem(id="1", name="Additional PA System (Small)", price=Money(Decimal("150")), type=ExtraType.EQUIPMENT),
        ExtraItem(id="2", name="Lighting Package", price=Money(Decimal("100")), type=ExtraType.EQUIPMENT),
        ExtraItem(id="3", name="Sound Technician (Per Hour)", price=Money(Decimal("50")), type=ExtraType.SERVICE),
    ),
    schedule=(
        GigItem(id="1", date=date(2023, 11, 15), event_name="Warehouse Project, Manchester", type=GigType.PAST, link="https://soundcloud.com/mix1"),
        GigItem(id="2", date=date(2023, 12, 31), event_name="Printworks NYE", type=GigType.PAST),
        GigItem(id="3", date=date(2025, 6, 15), event_name="Sonar Festival", type=GigType.FUTURE),
        GigItem(id="4", date=date(2025, 7, 1), event_name="Available for Booking", type=GigType.AVAILABLE),
        GigItem(id="5", date=date(2025, 7, 2), event_name="Available for Booking", type=GigType.AVAILABLE),
    ),
    bank_details=BankDetails(),
)


def _template(name: str, type_: AssetType, cost: str) -> AssetTemplate:
    return AssetTemplate(name=name, type=type_, cost=Money(Decimal(cost)), quantity=Quantity(1))


PROMOTER_CATALOG: tuple[AssetTemplate, ...] = (
    _template("Funktion-One Sound System", AssetType.EQUIPMENT, "1500"),
    _template("Lighting Rig (Basic)", AssetType.EQUIPMENT, "600"),
    _template("Lighting Rig (Pro)", AssetType.EQUIPMENT, "1200"),
    _template("Smoke Machine", AssetType.EQUIPMENT, "50"),
    _template("Security Guard (per head)", AssetType.STAFF, "200"),
    _template("Bar Staff (per head)", AssetType.STAFF, "150"),
    _template("Sound Engineer", AssetType.STAFF, "400"),
    _template("Venue Hire (Small Club)", AssetType.VENUE, "2000"),
    _template("Venue Hire (Warehouse)", AssetType.VENUE, "5000"),
    _template("Marketing & Social Ads", AssetType.OTHER, "500"),
)
