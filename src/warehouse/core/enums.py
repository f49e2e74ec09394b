"""Enumerations used across the warehouse registry."""

from enum import Enum


class ProductKind(str, Enum):
    ELECTRONICS = "electronics"
    FOOD = "food"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
