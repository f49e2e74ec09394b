"""Protocol interfaces for product capabilities.

A product variant may satisfy neither, one, or both protocols.  The registry
checks them at runtime with ``isinstance`` instead of relying on a shared
base class.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable

from .clock import IClock


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------

@runtime_checkable
class Shippable(Protocol):
    """Something with a weight that can be shipped for a computed cost."""

    @property
    def weight(self) -> Decimal:
        """Weight in kilograms."""
        ...

    def calculate_shipping_cost(self) -> Decimal: ...


# ---------------------------------------------------------------------------
# Perishability
# ---------------------------------------------------------------------------

@runtime_checkable
class Perishable(Protocol):
    """Something that stops being sellable after a calendar date."""

    @property
    def expiration_date(self) -> date: ...

    def is_expired(self, clock: IClock | None = None) -> bool:
        """True iff ``expiration_date`` is strictly before today."""
        ...
