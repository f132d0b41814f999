"""DJ profile editing and the public view of it."""

import dataclasses
import logging
from collections.abc import Callable

from bookings import signals
from bookings.domain import BankDetails, DJProfile, GigItem, GigType, Role
from bookings.services.genai_client import generate_text
from bookings.stores.interfaces import GigStore

logger = logging.getLogger(__name__)

BIO_PROMPT = (
    "Reword the following DJ biography to make it sound more professional, "
    "engaging, and suitable for a press kit. Keep it under 150 words.\n\n"
    'Current Bio: "{bio}"'
)


def schedule_overview(profile: DJProfile) -> tuple[list[GigItem], list[GigItem]]:
    """Split the schedule into past gigs (newest first) and upcoming ones."""
    past = sorted(
        (g for g in profile.schedule if g.type is GigType.PAST),
        key=lambda g: g.date,
        reverse=True,
    )
    upcoming = sorted(
        (g for g in profile.schedule if g.type is not GigType.PAST),
        key=lambda g: g.date,
    )
    return past, upcoming


class ProfileService:
    """Service for the DJ profile."""

    def __init__(
        self,
        store: GigStore,
        generate: Callable[[str], str] = generate_text,
    ) -> None:
        self._store = store
        self._generate = generate

    def get_profile(self) -> DJProfile:
        return self._store.get_profile()

    def public_profile(self, role: Role) -> DJProfile:
        """The profile as ``role`` may see it.

        Bank details and the signature image are only shown to the DJ.
        """
        profile = self._store.get_profile()
        if role is Role.DJ:
            return profile
        return dataclasses.replace(profile, bank_details=BankDetails(), signature=None)

    def save_profile(self, profile: DJProfile) -> DJProfile:
        saved = self._store.save_profile(profile)
        logger.info("Profile saved for %s", saved.name)
        signals.profile_saved.send(sender=self.__class__, profile=saved, store=self._store)
        return saved

    def enhance_bio(self, bio: str) -> str:
        """Ask the model to reword a bio; fall back to the original text."""
        try:
            enhanced = self._generate(BIO_PROMPT.format(bio=bio))
        except Exception as exc:  # noqa: BLE001 - keep the original bio on any failure
            logger.warning("Bio enhancement failed: %s", exc)
            return bio
        return enhanced or bio
