"""Serializers between API payloads and domain models.

Output serializers read straight off the frozen domain dataclasses; input
serializers expose ``to_domain`` helpers that build them.
"""

from decimal import Decimal

from rest_framework import serializers

from bookings.domain import (
    AdvancedTechRequirements,
    AssetType,
    BankDetails,
    BookingStatus,
    CounterOfferType,
    DJProfile,
    ExtraItem,
    ExtraType,
    GenreItem,
    GigItem,
    GigType,
    Money,
    Offer,
    Role,
    SignatureImage,
    TechItem,
    TechRequirement,
)
from bookings.domain.catalog import PROMOTER_CATALOG
from bookings.services.ledger_service import summarize
from bookings.services.pricing import to_amount


class EnumField(serializers.ChoiceField):
    """ChoiceField that reads and writes Enum members by value."""

    def __init__(self, enum, **kwargs):
        self.enum = enum
        super().__init__(choices=[m.value for m in enum], **kwargs)

    def to_internal_value(self, data):
        return self.enum(super().to_internal_value(data))

    def to_representation(self, value):
        return value.value


class MoneyField(serializers.DecimalField):
    def __init__(self, **kwargs):
        kwargs.setdefault("max_digits", 12)
        kwargs.setdefault("decimal_places", 2)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        amount = super().to_internal_value(data)
        try:
            return Money(amount)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from None

    def to_representation(self, value):
        return super().to_representation(value.amount)


class AmountField(serializers.Field):
    """Lenient numeric input: anything that is not a non-negative number is 0."""

    def to_internal_value(self, data):
        return to_amount(data)

    def to_representation(self, value):
        return f"{value:.2f}"


class SignatureField(serializers.CharField):
    def to_internal_value(self, data):
        try:
            return SignatureImage(super().to_internal_value(data))
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from None

    def to_representation(self, value):
        return value.data_url


def _money(max_digits: int = 12, **kwargs) -> serializers.DecimalField:
    return serializers.DecimalField(max_digits=max_digits, decimal_places=2, **kwargs)


# Profile


class TechItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    essential = serializers.BooleanField(default=False)


class TechRequirementSerializer(serializers.Serializer):
    enabled = serializers.BooleanField(default=False)
    comment = serializers.CharField(allow_blank=True, default="")


class AdvancedTechRequirementsSerializer(serializers.Serializer):
    serato = TechRequirementSerializer(required=False)
    rekordbox = TechRequirementSerializer(required=False)
    laptop_input = TechRequirementSerializer(required=False)
    four_channels = TechRequirementSerializer(required=False)


class GenreSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    links = serializers.ListField(child=serializers.URLField(), default=list)


class ExtraSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = MoneyField()
    type = EnumField(ExtraType)


class GigSerializer(serializers.Serializer):
    id = serializers.CharField()
    date = serializers.DateField()
    event_name = serializers.CharField()
    type = EnumField(GigType)
    link = serializers.URLField(allow_null=True, required=False, default=None)


class BankDetailsSerializer(serializers.Serializer):
    bank_name = serializers.CharField(allow_blank=True, default="")
    account_name = serializers.CharField(allow_blank=True, default="")
    account_number = serializers.CharField(allow_blank=True, default="")
    reference = serializers.CharField(allow_blank=True, default="")


class ProfileSerializer(serializers.Serializer):
    name = serializers.CharField()
    bio = serializers.CharField(allow_blank=True, default="")
    email = serializers.EmailField()
    soundcloud_url = serializers.CharField(allow_blank=True, default="")
    hourly_rate = MoneyField()
    currency = serializers.CharField(max_length=3)
    tech_rider = TechItemSerializer(many=True, default=list)
    tech_requirements = AdvancedTechRequirementsSerializer(required=False)
    genres = GenreSerializer(many=True, default=list)
    extras = ExtraSerializer(many=True, default=list)
    schedule = GigSerializer(many=True, default=list)
    bank_details = BankDetailsSerializer(required=False)
    signature = SignatureField(allow_null=True, required=False, default=None)

    def validate_extras(self, value):
        ids = [item["id"] for item in value]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError("Extra ids must be unique")
        return value

    def to_domain(self) -> DJProfile:
        data = self.validated_data
        reqs = data.get("tech_requirements") or {}
        return DJProfile(
            name=data["name"],
            bio=data["bio"],
            email=data["email"],
            soundcloud_url=data["soundcloud_url"],
            hourly_rate=data["hourly_rate"],
            currency=data["currency"].upper(),
            tech_rider=tuple(TechItem(**item) for item in data["tech_rider"]),
            tech_requirements=AdvancedTechRequirements(
                **{key: TechRequirement(**value) for key, value in reqs.items()}
            ),
            genres=tuple(
                GenreItem(id=g["id"], name=g["name"], links=tuple(g["links"]))
                for g in data["genres"]
            ),
            extras=tuple(ExtraItem(**item) for item in data["extras"]),
            schedule=tuple(GigItem(**gig) for gig in data["schedule"]),
            bank_details=BankDetails(**(data.get("bank_details") or {})),
            signature=data["signature"],
        )


class BioSerializer(serializers.Serializer):
    bio = serializers.CharField(allow_blank=True)


# Offers and bookings


class OfferSerializer(serializers.Serializer):
    promoter_name = serializers.CharField(allow_blank=True)
    promoter_email = serializers.CharField(allow_blank=True, default="")
    event_date = serializers.DateField()
    start_time = serializers.CharField(default="22:00")
    duration_hours = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), default=Decimal("2")
    )
    location = serializers.CharField(allow_blank=True, default="")
    use_standard_rate = serializers.BooleanField(default=True)
    counter_offer_amount = AmountField(required=False, default=Decimal("0"))
    counter_offer_type = EnumField(CounterOfferType, default=CounterOfferType.FLAT)
    provides_transport = serializers.BooleanField(default=False)
    provides_accommodation = serializers.BooleanField(default=False)
    provides_food = serializers.BooleanField(default=False)
    provides_drinks = serializers.BooleanField(default=False)
    additional_notes = serializers.CharField(allow_blank=True, default="")
    selected_extras = serializers.ListField(child=serializers.CharField(), default=list)

    def to_domain(self) -> Offer:
        data = dict(self.validated_data)
        data["selected_extras"] = tuple(dict.fromkeys(data["selected_extras"]))
        return Offer(**data)


class BookingSerializer(serializers.Serializer):
    id = serializers.CharField()
    created_at = serializers.DateTimeField()
    status = EnumField(BookingStatus)
    total = MoneyField()
    currency = serializers.CharField()
    artist_signed = serializers.BooleanField()
    client_signed = serializers.BooleanField()
    client_signature = SignatureField(allow_null=True)
    event_id = serializers.CharField(allow_null=True)
    offer = OfferSerializer()


class StatusUpdateSerializer(serializers.Serializer):
    status = EnumField(BookingStatus)


class InboxEntrySerializer(serializers.Serializer):
    title = serializers.CharField()
    booking = BookingSerializer()


class InboxSerializer(serializers.Serializer):
    entries = InboxEntrySerializer(many=True)
    pending_count = serializers.IntegerField()


class PriceQuoteSerializer(serializers.Serializer):
    base_fee = _money()
    extras = ExtraSerializer(many=True)
    extras_total = _money()
    total = _money()
    currency = serializers.CharField()


class ContractDraftSerializer(serializers.Serializer):
    booking_id = serializers.CharField()
    state = serializers.CharField(source="state.value")
    total = _money()
    created_at = serializers.DateTimeField()
    content = serializers.CharField()


# Events


class AssetSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    type = EnumField(AssetType)
    cost = MoneyField()
    quantity = serializers.IntegerField(source="quantity.value")
    booking_id = serializers.CharField(allow_null=True)
    line_total = _money()


class BudgetSummarySerializer(serializers.Serializer):
    total_budget = _money()
    total_spend = _money()
    remaining_budget = _money()
    progress_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
    over_budget = serializers.BooleanField()
    spend_by_type = serializers.SerializerMethodField()

    def get_spend_by_type(self, summary):
        return [
            {"type": asset_type.value, "value": f"{value:.2f}"}
            for asset_type, value in summary.spend_by_type
        ]


class EventSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    date = serializers.DateField()
    location = serializers.CharField()
    total_budget = MoneyField()
    assets = AssetSerializer(many=True)
    budget = serializers.SerializerMethodField()

    def get_budget(self, event):
        return BudgetSummarySerializer(summarize(event)).data


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField()
    date = serializers.DateField()
    budget = _money(min_value=Decimal("0"), default=Decimal("10000"))
    location = serializers.CharField(allow_blank=True, default="TBD")


class CatalogAssetSerializer(serializers.Serializer):
    catalog_index = serializers.IntegerField(min_value=0)

    def validate_catalog_index(self, value):
        if value >= len(PROMOTER_CATALOG):
            raise serializers.ValidationError("Unknown catalog item")
        return value

    def to_domain(self):
        return PROMOTER_CATALOG[self.validated_data["catalog_index"]]


class AssetTemplateSerializer(serializers.Serializer):
    name = serializers.CharField()
    type = EnumField(AssetType)
    cost = MoneyField()
    quantity = serializers.IntegerField(source="quantity.value")


# Sessions


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class SignatureUploadSerializer(serializers.Serializer):
    signature = SignatureField()


class SessionSerializer(serializers.Serializer):
    role = EnumField(Role)
    username = serializers.CharField()
    has_signature = serializers.SerializerMethodField()
    active_event_id = serializers.CharField(allow_null=True)

    def get_has_signature(self, session):
        return session.client_signature is not None
