"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from bookings.domain import Offer, SignatureImage
from bookings.stores import get_store

PNG_DATA_URL = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def store():
    get_store.cache_clear()
    yield get_store()
    get_store.cache_clear()


@pytest.fixture
def signature() -> SignatureImage:
    return SignatureImage(PNG_DATA_URL)


@pytest.fixture
def make_offer():
    def factory(**overrides) -> Offer:
        fields = dict(
            promoter_name="Premier Events Agency",
            promoter_email="bookings@premierevents.com",
            event_date=date(2025, 7, 1),
            start_time="22:00",
            duration_hours=Decimal("2"),
            location="Auckland",
        )
        fields.update(overrides)
        return Offer(**fields)

    return factory


@pytest.fixture
def login():
    """Return a fresh APIClient logged in as ``username``."""

    def do_login(username: str) -> APIClient:
        client = APIClient()
        response = client.post(
            "/api/auth/login", {"username": username, "password": username}
        )
        assert response.status_code == 200
        return client

    return do_login
