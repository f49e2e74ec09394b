"""Custom exception hierarchy for the warehouse registry."""

from __future__ import annotations

from typing import Any


class WarehouseError(Exception):
    """Base exception for all warehouse errors."""


# --- Configuration ---
class ConfigError(WarehouseError):
    """Invalid or missing configuration."""


# --- Input validation ---
class InvalidArgumentError(WarehouseError, ValueError):
    """Null, blank or negative input at construction or normalization."""


# --- Registry ---
class RegistryError(WarehouseError):
    """Product registry lookup or mutation error."""


class DuplicateProductError(RegistryError, KeyError):
    """A product with the same id is already registered."""

    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(
            f"Product with id {product_id} already exists, "
            "use update_product_price for updates."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class ProductNotFoundError(RegistryError, KeyError):
    """No product registered under the requested id."""

    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")

    def __str__(self) -> str:
        return str(self.args[0])
