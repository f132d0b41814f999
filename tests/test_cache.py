"""Tests for contract draft cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import dataclasses

from django.core.cache import cache

from bookings.services import BookingService, ContractDraftService, ProfileService
from bookings.services.contract_service import contract_cache_key


def _drafted_booking(store, make_offer):
    booking = BookingService(store).submit_offer(make_offer())
    ContractDraftService(store, generate=lambda prompt: "Contract").request_draft(booking.id)
    return booking


class TestCacheInvalidation:
    """Tests for draft invalidation when the profile changes."""

    def test_draft_cached_under_booking_key(self, store, make_offer):
        booking = _drafted_booking(store, make_offer)
        assert cache.get(contract_cache_key(booking.id)).content == "Contract"

    def test_profile_save_invalidates_drafts(self, store, make_offer):
        first = _drafted_booking(store, make_offer)
        second = _drafted_booking(store, make_offer)

        profiles = ProfileService(store)
        profiles.save_profile(dataclasses.replace(profiles.get_profile(), bio="New bio"))

        assert cache.get(contract_cache_key(first.id)) is None
        assert cache.get(contract_cache_key(second.id)) is None

    def test_redraft_after_invalidation_uses_new_profile(self, store, make_offer):
        booking = _drafted_booking(store, make_offer)
        profiles = ProfileService(store)
        profiles.save_profile(dataclasses.replace(profiles.get_profile(), name="DJ Aurora"))

        prompts = []
        ContractDraftService(store, generate=lambda p: prompts.append(p) or "v2").request_draft(
            booking.id
        )

        assert "DJ Aurora" in prompts[0]
