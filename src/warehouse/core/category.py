"""Category value object with flyweight caching.

A category is a single normalized label ("Electronics", "Dairy").  Every
normalized label maps to exactly one shared :class:`Category` handle for the
lifetime of the process, so handles compare and hash by identity.

Handles are only created through :meth:`CategoryCache.of` (or the
:meth:`Category.of` shortcut backed by the default cache).
"""

from __future__ import annotations

import threading
from typing import Any

from warehouse.core.errors import InvalidArgumentError
from warehouse.observability.logger import get_logger

logger = get_logger(__name__)

# Only CategoryCache holds this token, so only it can build handles.
_CREATE_TOKEN = object()


def normalize_category_name(raw: Any) -> str:
    """Strip *raw* and return it with an initial capital, rest lower-cased.

    Raises :class:`InvalidArgumentError` for ``None``, non-strings and blank
    input.
    """
    if raw is None:
        raise InvalidArgumentError("Category name can't be null")
    if not isinstance(raw, str):
        raise InvalidArgumentError(
            f"Category name must be a string, got {type(raw).__name__}"
        )
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidArgumentError("Category name can't be blank")
    return trimmed[:1].upper() + trimmed[1:].lower()


class Category:
    """Immutable, shared category handle."""

    __slots__ = ("_name",)

    def __init__(self, name: str, *, _token: object = None) -> None:
        if _token is not _CREATE_TOKEN:
            raise TypeError(
                "Category handles are created via Category.of() or CategoryCache.of()"
            )
        object.__setattr__(self, "_name", name)

    @classmethod
    def of(cls, raw: str) -> Category:
        """Return the shared handle for *raw* from the default cache."""
        return default_cache().of(raw)

    @property
    def name(self) -> str:
        return self._name

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError("Category is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError("Category is immutable")

    # Copies must not break the one-handle-per-name invariant.
    def __copy__(self) -> Category:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Category:
        return self

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (Category.of, (self._name,))

    def __repr__(self) -> str:
        return "Category{" + self._name + "}"

    def __str__(self) -> str:
        return self._name


class CategoryCache:
    """Thread-safe get-or-create cache of :class:`Category` handles.

    Check-and-insert runs under one lock, so concurrent callers asking for
    the same normalized name always receive the same handle.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache: dict[str, Category] = {}

    def of(self, raw: str) -> Category:
        """Return the existing handle for *raw*, creating it on first use."""
        normalized = normalize_category_name(raw)

        with self._lock:
            category = self._cache.get(normalized)
            if category is None:
                category = Category(normalized, _token=_CREATE_TOKEN)
                self._cache[normalized] = category
                created = True
            else:
                created = False

        if created:
            logger.debug("category_created", category=normalized)
        return category

    def names(self) -> list[str]:
        """Sorted normalized names currently cached."""
        with self._lock:
            return sorted(self._cache)

    def __contains__(self, raw: object) -> bool:
        try:
            normalized = normalize_category_name(raw)
        except InvalidArgumentError:
            return False
        with self._lock:
            return normalized in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


_default_cache = CategoryCache()


def default_cache() -> CategoryCache:
    """Return the process-wide category cache."""
    return _default_cache
