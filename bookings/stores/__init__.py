from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from bookings.stores.interfaces import GigStore
from bookings.stores.memory_store import InMemoryGigStore


@lru_cache(maxsize=1)
def get_store() -> GigStore:
    """Return the process-wide store configured by ``GIGFLOW_STORE_CLASS``."""
    store_class = import_string(settings.GIGFLOW_STORE_CLASS)
    return store_class()


__all__ = ["GigStore", "InMemoryGigStore", "get_store"]
