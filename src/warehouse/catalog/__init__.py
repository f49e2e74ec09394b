"""Product catalog: the named warehouse registry and its product model."""

from warehouse.catalog.warehouse import Warehouse
from warehouse.core.category import Category, CategoryCache
from warehouse.core.interfaces import Perishable, Shippable
from warehouse.core.models import ElectronicsProduct, FoodProduct, Product

__all__ = [
    "Category",
    "CategoryCache",
    "ElectronicsProduct",
    "FoodProduct",
    "Perishable",
    "Product",
    "Shippable",
    "Warehouse",
]
