"""Shared fixtures for the warehouse-registry test suite."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from warehouse.catalog.warehouse import Warehouse
from warehouse.core.category import Category
from warehouse.core.clock import SimClock
from warehouse.core.config import set_settings
from warehouse.core.ids import new_product_id
from warehouse.core.models import ElectronicsProduct, FoodProduct


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _fresh_registry():
    """Drop named warehouses and cached settings around every test."""
    Warehouse.reset_instances()
    set_settings(None)
    yield
    Warehouse.reset_instances()
    set_settings(None)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock starting at 2024-06-01 00:00 UTC."""
    return SimClock(start=datetime(2024, 6, 1, tzinfo=timezone.utc))


# ---------------------------------------------------------------------------
# Warehouse
# ---------------------------------------------------------------------------

@pytest.fixture
def warehouse() -> Warehouse:
    """Return the default warehouse, empty."""
    return Warehouse.get_instance()


# ---------------------------------------------------------------------------
# Product helpers
# ---------------------------------------------------------------------------

def make_laptop(
    name: str = "Laptop",
    category: str = "electronics",
    price: str = "12999.00",
    weight: str = "2.1",
    warranty_months: int = 24,
) -> ElectronicsProduct:
    return ElectronicsProduct(
        product_id=new_product_id(),
        name=name,
        category=Category.of(category),
        price=Decimal(price),
        warranty_months=warranty_months,
        weight=Decimal(weight),
    )


def make_milk(
    name: str = "Milk",
    category: str = "dairy",
    price: str = "15.90",
    weight: str = "1.0",
    expiration_date: date | None = None,
) -> FoodProduct:
    return FoodProduct(
        product_id=new_product_id(),
        name=name,
        category=Category.of(category),
        price=Decimal(price),
        expiration_date=expiration_date or date.today() + timedelta(days=7),
        weight=Decimal(weight),
    )


@pytest.fixture(name="make_laptop")
def _make_laptop_fixture():
    """Factory for electronics products with overridable fields."""
    return make_laptop


@pytest.fixture(name="make_milk")
def _make_milk_fixture():
    """Factory for food products with overridable fields."""
    return make_milk


@pytest.fixture
def laptop() -> ElectronicsProduct:
    """Return a 2.1 kg laptop in the Electronics category."""
    return make_laptop()


@pytest.fixture
def milk() -> FoodProduct:
    """Return a 1 kg carton of milk expiring in a week."""
    return make_milk()
