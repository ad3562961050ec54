"""Service area classification helpers."""

from __future__ import annotations

from ...config import settings
from ...data.tables import load_postal_index, load_region_registry
from .codec import ServiceAreaCodec


def get_codec() -> ServiceAreaCodec:
    """Codec over the process-wide tables.

    Only the tables are cached, so ``clear_table_cache()`` is enough to make
    the next codec see reloaded tables.
    """

    registry = load_region_registry()
    return ServiceAreaCodec(
        registry,
        load_postal_index(registry=registry),
        city_placeholder=settings.city_placeholder,
    )


__all__ = ["ServiceAreaCodec", "get_codec"]
