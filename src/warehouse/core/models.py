"""Product domain models.

``Product`` holds the fields every sellable item shares; the concrete
variants add their own immutable fields and satisfy the capability
protocols in :mod:`warehouse.core.interfaces`.

Only ``price`` is mutable after construction.  Prices and weights are
``Decimal`` throughout, never float.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import date
from decimal import Decimal
from typing import Any, ClassVar
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .category import Category, normalize_category_name
from .clock import IClock, default_clock
from .enums import ProductKind
from .errors import InvalidArgumentError

# Shipping rules
ELECTRONICS_BASE_SHIPPING = Decimal("79")
ELECTRONICS_HEAVY_SURCHARGE = Decimal("49")
ELECTRONICS_HEAVY_THRESHOLD_KG = Decimal("5.0")
FOOD_SHIPPING_RATE_PER_KG = Decimal("50")


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "product"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# Base product
# ---------------------------------------------------------------------------

class Product(BaseModel):
    """A sellable item registered in a warehouse.

    Fields
    ------
    product_id : UUID
        Caller-assigned identity, unique per product.
    name : str
        Display name.  Must not be blank.
    category : Category
        Shared category handle.  A raw string is resolved through the
        default category cache once the other fields have validated.
    price : Decimal
        Current price.  Non-negative at construction; later assignments
        are not re-validated.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: ClassVar[ProductKind]

    product_id: UUID = Field(frozen=True)
    name: str = Field(frozen=True)
    category: Category = Field(frozen=True)
    price: Decimal = Field(ge=0)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid {type(self).__name__}: {_describe(exc)}"
            ) from exc

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name can't be blank")
        return v

    @field_validator("category", mode="plain")
    @classmethod
    def _check_category(cls, v: Any) -> Any:
        if isinstance(v, Category):
            return v
        if isinstance(v, str):
            return normalize_category_name(v)
        raise ValueError("Product category must be a Category or a category name")

    @model_validator(mode="after")
    def _resolve_category(self) -> Product:
        # Runs only once every field has validated, so a rejected product
        # never adds a name to the category cache.
        if isinstance(self.category, str):
            self.__dict__["category"] = Category.of(self.category)
        return self

    @abstractmethod
    def product_details(self) -> str:
        """Human-readable one-line summary."""


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class ElectronicsProduct(Product):
    """Electronics: shippable, carries a warranty."""

    kind: ClassVar[ProductKind] = ProductKind.ELECTRONICS

    warranty_months: int = Field(ge=0, frozen=True)
    weight: Decimal = Field(ge=0, frozen=True)  # kg

    def calculate_shipping_cost(self) -> Decimal:
        # base 79, add 49 if weight > 5.0 kg
        cost = ELECTRONICS_BASE_SHIPPING
        if self.weight > ELECTRONICS_HEAVY_THRESHOLD_KG:
            cost += ELECTRONICS_HEAVY_SURCHARGE
        return cost

    def product_details(self) -> str:
        return f"Electronics: {self.name}, Warranty: {self.warranty_months} months"


class FoodProduct(Product):
    """Food: perishable and shippable."""

    kind: ClassVar[ProductKind] = ProductKind.FOOD

    expiration_date: date = Field(frozen=True)
    weight: Decimal = Field(ge=0, frozen=True)  # kg

    def calculate_shipping_cost(self) -> Decimal:
        return self.weight * FOOD_SHIPPING_RATE_PER_KG

    def is_expired(self, clock: IClock | None = None) -> bool:
        today = (clock or default_clock()).today()
        return self.expiration_date < today

    def product_details(self) -> str:
        return f"Food: {self.name}, Expires: {self.expiration_date.isoformat()}"
