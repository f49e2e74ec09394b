"""Canonical ID factories.

Product ids are UUID v4 values supplied by the caller; the registry never
generates them. ``new_product_id()`` is the helper callers (and tests) use.
"""

from __future__ import annotations

import uuid


def new_product_id() -> uuid.UUID:
    """Generate a new random UUID v4 for a product."""
    return uuid.uuid4()
