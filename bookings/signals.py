"""Signals for contract draft cache invalidation."""

from django.dispatch import Signal, receiver

from bookings.services.contract_service import ContractDraftService

# Sent with ``profile`` and ``store`` after the DJ profile is replaced.
profile_saved = Signal()


@receiver(profile_saved)
def invalidate_contract_drafts(sender, profile, store, **kwargs):
    """Drop cached drafts: they quote the old rider and bank details."""
    ContractDraftService(store).invalidate_all()
