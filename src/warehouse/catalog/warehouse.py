"""Warehouse — named, process-wide product registry.

One ``Warehouse`` exists per name for the lifetime of the process.  It owns
an insertion-ordered map of product id → :class:`Product` and an
insertion-ordered changed-set of ids whose price was updated.

Thread-safe: every public operation holds the instance lock for its full
duration, so callers always observe a consistent point-in-time state.
"""

from __future__ import annotations

import threading
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar
from uuid import UUID

from warehouse.core.category import Category
from warehouse.core.clock import IClock
from warehouse.core.config import get_settings
from warehouse.core.errors import (
    DuplicateProductError,
    InvalidArgumentError,
    ProductNotFoundError,
)
from warehouse.core.interfaces import Perishable, Shippable
from warehouse.core.models import Product
from warehouse.observability.logger import get_logger

logger = get_logger(__name__)

# Only get_instance() holds this token, so only it can build warehouses.
_CREATE_TOKEN = object()


def _to_decimal(value: Decimal | int | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(f"Price must be a decimal value, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidArgumentError(
            f"Price must be a decimal value, got {value!r}"
        ) from exc


class Warehouse:
    """Named singleton registry of products.

    Obtain instances with :meth:`get_instance`; the constructor is private.

    Parameters
    ----------
    name:
        Registry name, also bound to every log entry it emits.
    """

    _instances: ClassVar[dict[str, Warehouse]] = {}
    _instances_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str, *, _token: object = None) -> None:
        if _token is not _CREATE_TOKEN:
            raise TypeError("Use Warehouse.get_instance() to obtain a warehouse")
        self._name = name
        self._lock = threading.Lock()
        self._products: dict[UUID, Product] = {}  # insertion ordered
        self._changed: dict[UUID, None] = {}  # ordered set of changed ids
        self._log = logger.bind(warehouse=name)

    # ------------------------------------------------------------------
    # Instance management
    # ------------------------------------------------------------------

    @classmethod
    def get_instance(cls, name: str | None = None) -> Warehouse:
        """Return the warehouse registered under *name*, creating it once.

        ``None`` or an empty name selects the configured default name.
        """
        key = name or get_settings().default_warehouse_name

        with cls._instances_lock:
            instance = cls._instances.get(key)
            if instance is None:
                instance = cls(key, _token=_CREATE_TOKEN)
                cls._instances[key] = instance
                created = True
            else:
                created = False

        if created:
            logger.info("warehouse_created", warehouse=key)
        return instance

    @classmethod
    def reset_instances(cls) -> None:
        """Forget every named instance.  Intended for test isolation."""
        with cls._instances_lock:
            cls._instances.clear()

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Register *product*.

        Raises
        ------
        InvalidArgumentError
            If *product* is ``None``.
        DuplicateProductError
            If a product with the same id is already registered.
        """
        if product is None:
            raise InvalidArgumentError("Product cannot be null.")

        product_id = product.product_id
        with self._lock:
            if product_id in self._products:
                self._log.warning("product_add_rejected", product_id=str(product_id))
                raise DuplicateProductError(product_id)
            self._products[product_id] = product

        self._log.debug(
            "product_added",
            product_id=str(product_id),
            kind=product.kind.value,
            category=product.category.name,
        )

    def update_product_price(
        self, product_id: UUID, new_price: Decimal | int | str
    ) -> None:
        """Replace the price of a registered product and mark it changed."""
        price = _to_decimal(new_price)

        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                self._log.warning(
                    "product_price_update_rejected", product_id=str(product_id)
                )
                raise ProductNotFoundError(product_id)
            old_price = product.price
            product.price = price
            self._changed[product_id] = None

        self._log.info(
            "product_price_updated",
            product_id=str(product_id),
            old_price=str(old_price),
            new_price=str(price),
        )

    def remove(self, product_id: UUID) -> None:
        """Remove a product and its change marker.  No-op if absent."""
        with self._lock:
            removed = self._products.pop(product_id, None)
            self._changed.pop(product_id, None)

        if removed is not None:
            self._log.debug("product_removed", product_id=str(product_id))

    def clear_products(self) -> None:
        """Remove every product and change marker."""
        with self._lock:
            count = len(self._products)
            self._products.clear()
            self._changed.clear()

        self._log.info("products_cleared", count=count)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_products(self) -> list[Product]:
        """Snapshot of all products in insertion order."""
        with self._lock:
            return list(self._products.values())

    def get_product_by_id(self, product_id: UUID) -> Product | None:
        with self._lock:
            return self._products.get(product_id)

    def get_changed_products(self) -> list[Product]:
        """Products whose price changed, in the order they first changed."""
        with self._lock:
            return self._resolve_changed()

    def drain_changed_products(self) -> list[Product]:
        """Return the changed products and reset the changed-set."""
        with self._lock:
            changed = self._resolve_changed()
            self._changed.clear()
        return changed

    def is_empty(self) -> bool:
        with self._lock:
            return not self._products

    def get_products_grouped_by_category(self) -> dict[Category, list[Product]]:
        """Partition products by category handle, keeping insertion order."""
        with self._lock:
            grouped: dict[Category, list[Product]] = {}
            for product in self._products.values():
                grouped.setdefault(product.category, []).append(product)
            return grouped

    def shippable_products(self) -> list[Shippable]:
        with self._lock:
            return [p for p in self._products.values() if isinstance(p, Shippable)]

    def expired_products(self, clock: IClock | None = None) -> list[Perishable]:
        """Perishable products whose expiration date is before today."""
        with self._lock:
            return [
                p
                for p in self._products.values()
                if isinstance(p, Perishable) and p.is_expired(clock)
            ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_changed(self) -> list[Product]:
        # Caller holds self._lock.
        return [
            self._products[pid] for pid in self._changed if pid in self._products
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: Any) -> bool:
        with self._lock:
            return product_id in self._products

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r})"
