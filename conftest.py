import json
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.core import redis as redis_module
from app.core.config import settings
from app.schemas.tier import RateCard
from app.services.catalog import TierCatalog, get_catalog


CATALOG_DATA = {
    "tiers": [
        {
            "id": "eco",
            "name": "Economy",
            "reference": "ECO",
            "rate_card": {
                "base_fare": "5.00",
                "per_km": "1.50",
                "per_minute": "0.30",
                "per_stop": "2.00",
                "minimum_price": "10.00"
            },
            "capacity": {"passengers": 3, "suitcases": 2, "backpacks": 2}
        },
        {
            "id": "business",
            "name": "Business",
            "reference": "BUS",
            "rate_card": {
                "base_fare": "8.00",
                "per_km": "2.00",
                "per_minute": "0.50",
                "per_stop": "3.00",
                "minimum_price": "20.00"
            },
            "capacity": {"passengers": 4, "suitcases": 3}
        },
        {
            "id": "van",
            "name": "Van",
            "reference": "VAN",
            "rate_card": {
                "base_fare": "10.00",
                "per_km": "2.50",
                "per_minute": "0.50",
                "per_stop": "3.00",
                "minimum_price": "30.00"
            },
            "capacity": {"passengers": 7, "suitcases": 7, "backpacks": 7}
        }
    ],
    "options": {
        "child_seat": "5.00",
        "booster_seat": "3.00",
        "pet": "8.00"
    }
}


class FakeRedis:
    """In-memory stand-in for the handful of redis.asyncio calls the app makes."""

    def __init__(self):
        self.store = {}
        self.expiries = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value.encode() if isinstance(value, str) else value
        self.expiries[key] = ex

    async def ping(self):
        return True


class BrokenRedis:
    async def get(self, key):
        raise ConnectionError("redis down")

    async def set(self, key, value, ex=None):
        raise ConnectionError("redis down")


@pytest.fixture
def rate_card():
    return RateCard(
        base_fare=Decimal("5.00"),
        per_km=Decimal("1.50"),
        per_minute=Decimal("0.30"),
        per_stop=Decimal("2.00"),
        minimum_price=Decimal("10.00"),
    )


@pytest.fixture
def catalog_data():
    return json.loads(json.dumps(CATALOG_DATA))


@pytest.fixture
def catalog_path(tmp_path, catalog_data):
    path = tmp_path / "tiers.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


@pytest.fixture
def catalog(catalog_path):
    return TierCatalog(catalog_path)


@pytest.fixture
def use_catalog(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield catalog
    app.dependency_overrides.pop(get_catalog, None)


@pytest.fixture
def fake_redis(monkeypatch):
    client = FakeRedis()
    monkeypatch.setattr(redis_module, "redis", client)
    return client


@pytest.fixture
def broken_redis(monkeypatch):
    client = BrokenRedis()
    monkeypatch.setattr(redis_module, "redis", client)
    return client


@pytest.fixture
async def test_client(use_catalog):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def valid_quote_data():
    return {
        "distance": "10 km",
        "duration": "15 min",
        "stops": 0,
        "options": [],
        "passengers": 1
    }


@pytest.fixture
def valid_checkout_data():
    return {
        "tier_id": "eco",
        "distance": "10 km",
        "duration": "15 min",
        "stops": 0,
        "options": [],
        "passengers": 1,
        "payment_method": "card"
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "parsing: marks tests related to route summary parsing"
    )
    config.addinivalue_line(
        "markers", "catalog: marks tests related to the tier catalog"
    )
    config.addinivalue_line(
        "markers", "checkout: marks tests related to checkout amounts"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )
