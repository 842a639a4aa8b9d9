"""Pytest fixtures for seeder tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from supplydb.shared.seeder.config import SeederConfig
from supplydb.shared.seeder.sources import SeedSource


class FakeTransaction:
    """Stand-in for the async context manager returned by conn.begin()."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


@pytest.fixture
def seeder_config():
    """Create a small seeder config for testing."""
    return SeederConfig(product_sample_size=3, batch_size=2)


@pytest.fixture
def small_source():
    """Create a small seed source (3 countries, 10 suppliers)."""
    return SeedSource(
        countries=["Austria", "Belgium", "Canada"],
        suppliers=[f"Supplier {i}" for i in range(10)],
        clients=["Client A", "Client B"],
        emails=[f"contact{i}@example.test" for i in range(10)],
        product_categories={"Grocery": ["Meat", "Bakery"], "Office": ["Stationery"]},
        products=["Brisket", "Sourdough", "Notebook", "Milk", "Pens"],
        addresses=["1 First St", "2 Second St", "3 Third St"],
        managers=[("Helmer", "array"), ("Macey", "capacitor")],
        admin=("root", "change-me"),
    )


@pytest.fixture
def mock_conn():
    """Create a mock async connection with a working begin()."""
    conn = AsyncMock()
    conn.begin = MagicMock(side_effect=lambda: FakeTransaction())
    result = MagicMock()
    result.scalar.return_value = 0
    conn.execute = AsyncMock(return_value=result)
    return conn
