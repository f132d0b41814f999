"""AI-drafted performance contracts.

A draft is a request task with three observable states. Model failures never
propagate: they resolve the task to FAILED with a fixed fallback text, so the
booking lifecycle keeps working without the model.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone

from bookings.domain import Booking, BookingId, DJProfile
from bookings.services.booking_service import BookingService
from bookings.services.genai_client import generate_text
from bookings.services.pricing import selected_extras
from bookings.stores.interfaces import GigStore

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "Error generating contract. Please try again."
API_FAILURE_TEXT = (
    "Failed to generate contract due to an API error. "
    "Please check your connection or API key."
)

CLAUSES = (
    "Performance Duties",
    "Payment Schedule (Include the bank details for transfer)",
    "Cancellation Policy (Standard 30-day notice)",
    "Technical Requirements (Promoter guarantees equipment functioning and "
    "specific compatibility listed above)",
    "Equipment/Service Provision: Artist agrees to provide listed extra "
    "equipment/services. Promoter agrees to pay as part of total fee.",
    "Force Majeure",
    "Indemnification",
)


class DraftState(Enum):
    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class ContractDraft:
    booking_id: str
    state: DraftState
    total: Decimal
    created_at: datetime
    content: str = ""


def contract_cache_key(booking_id: BookingId | str) -> str:
    return f"contracts:{booking_id}"


def _requirement_lines(profile: DJProfile) -> list[str]:
    reqs = profile.tech_requirements
    labelled = [
        (reqs.serato, "Requires Serato Compatibility"),
        (reqs.rekordbox, "Requires Rekordbox Compatibility"),
        (reqs.laptop_input, "Requires Laptop Input"),
        (reqs.four_channels, "Requires 4 Channels Mixer"),
    ]
    return [
        f"- **{label}**: {req.comment or 'Yes'}" for req, label in labelled if req.enabled
    ]


def build_contract_prompt(profile: DJProfile, booking: Booking) -> str:
    """Render the drafting prompt for a booking's frozen terms."""
    offer = booking.offer
    bank = profile.bank_details
    extras = selected_extras(offer.selected_extras, profile.extras)
    rider = ", ".join(
        item.name + (" (Essential)" if item.essential else "") for item in profile.tech_rider
    )
    requirements = _requirement_lines(profile)

    lines = [
        "You are a legal assistant specializing in entertainment contracts.",
        "Draft a comprehensive, professional DJ Performance Contract based on the following terms.",
        "Output ONLY the contract text in Markdown format. Do not include conversational filler.",
        "",
        "**Parties:**",
        f"- Artist (DJ): {profile.name} ({profile.email})",
        f"- Promoter (Client): {offer.promoter_name} ({offer.promoter_email})",
        "",
        "**Event Details:**",
        f"- Date: {offer.event_date.isoformat()}",
        f"- Start Time: {offer.start_time}",
        f"- Duration: {offer.duration_hours} hours",
        f"- Location: {offer.location}",
        "",
        "**Financial Terms:**",
        f"- Total Fee: {booking.currency} {booking.total}",
        "- Payment Terms: 50% deposit upon signing, 50% immediately following performance.",
        "",
    ]
    if extras:
        lines.append("**Additional Equipment & Services Provided by Artist:**")
        lines.extend(
            f"- {e.name} ({e.type.value}): {booking.currency} {e.price}" for e in extras
        )
        lines.append("")
    lines += [
        "**Payment Account Information:**",
        f"- Bank: {bank.bank_name or 'N/A'}",
        f"- Account Name: {bank.account_name or 'N/A'}",
        f"- Account Number/IBAN: {bank.account_number or 'N/A'}",
        f"- Payment Reference: {bank.reference or 'N/A'}",
        "",
        "**Rider & Requirements:**",
        f"- Standard Tech Rider: {rider}",
        "",
    ]
    if requirements:
        lines.append("**Specific Technical Requirements (Mandatory):**")
        lines.extend(requirements)
        lines.append("")
    lines += [
        "- Hospitality provided by Promoter: "
        + (", ".join(offer.hospitality()) or "None specified"),
        "",
        "**Additional Notes:**",
        offer.additional_notes or "N/A",
        "",
        "**Clauses to Include:**",
        *(f"{n}. {clause}" for n, clause in enumerate(CLAUSES, start=1)),
        "",
        "Format nicely with headers.",
    ]
    return "\n".join(lines)


class ContractDraftService:
    """Drafts and caches contract text per booking."""

    def __init__(
        self,
        store: GigStore,
        generate: Callable[[str], str] = generate_text,
    ) -> None:
        self._store = store
        self._generate = generate
        self._bookings = BookingService(store)

    def cached_draft(self, booking_id: BookingId | str) -> ContractDraft | None:
        return cache.get(contract_cache_key(booking_id))

    def begin(self, booking: Booking) -> ContractDraft:
        """Record a PENDING draft for the booking."""
        draft = ContractDraft(
            booking_id=str(booking.id),
            state=DraftState.PENDING,
            total=booking.total.amount,
            created_at=timezone.now(),
        )
        self._save(draft)
        return draft

    def complete(self, draft: ContractDraft, booking: Booking) -> ContractDraft:
        """Call the model once and resolve the draft to SUCCEEDED or FAILED."""
        try:
            text = self._generate(build_contract_prompt(self._store.get_profile(), booking))
        except Exception as exc:  # noqa: BLE001 - any model failure falls back
            logger.warning("Contract drafting failed for booking %s: %s", booking.id, exc)
            resolved = replace(draft, state=DraftState.FAILED, content=API_FAILURE_TEXT)
        else:
            if text:
                resolved = replace(draft, state=DraftState.SUCCEEDED, content=text)
            else:
                logger.warning("Empty contract draft for booking %s", booking.id)
                resolved = replace(draft, state=DraftState.FAILED, content=EMPTY_RESPONSE_TEXT)
        self._save(resolved)
        return resolved

    def request_draft(self, booking_id: BookingId | str) -> ContractDraft:
        """Return the booking's draft, generating it if none is cached.

        An in-flight (PENDING) or SUCCEEDED draft is returned as-is. A FAILED
        draft counts as a miss, so the next request starts a fresh call.
        """
        booking = self._bookings.get_booking(booking_id)
        existing = self.cached_draft(booking.id)
        if existing is not None and existing.state is not DraftState.FAILED:
            return existing
        return self.complete(self.begin(booking), booking)

    def invalidate_all(self) -> None:
        keys = [contract_cache_key(b.id) for b in self._store.list_bookings()]
        if keys:
            cache.delete_many(keys)
            logger.info("Invalidated %d cached contract drafts", len(keys))

    def _save(self, draft: ContractDraft) -> None:
        cache.set(
            contract_cache_key(draft.booking_id),
            draft,
            timeout=settings.GIGFLOW_CONTRACT_CACHE_TIMEOUT,
        )
