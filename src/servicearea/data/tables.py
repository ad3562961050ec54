"""Loaders for the canton registry and postal range index."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..config import settings
from ..models.domain import Region
from .cantons import RegionRegistry
from .postal_ranges import PostalRangeIndex

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")
    try:
        with path.open(mode="r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Table file '{path}' is not valid JSON: {exc}") from exc


def _regions_from_file(path: Path) -> RegionRegistry:
    payload = _read_json(path)
    if not isinstance(payload, list) or not payload:
        raise ValueError(f"Region table '{path}' must be a non-empty JSON list.")

    regions: list[Region] = []
    for row in payload:
        try:
            code = str(row["code"]).strip()
            label = str(row.get("label") or code).strip()
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Invalid region row in '{path}': {row!r}") from exc
        if len(code) != 2:
            raise ValueError(f"Region code must be two characters in '{path}': {row!r}")
        regions.append(Region(code=code, label=label))
    logger.info("Loaded %d regions from %s", len(regions), path)
    return RegionRegistry(regions)


def _ranges_from_file(path: Path, registry: RegionRegistry) -> PostalRangeIndex:
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Postal range table '{path}' must be a JSON object.")

    table: dict[str, list[str]] = {}
    for code, ranges in payload.items():
        if isinstance(ranges, str):
            ranges = [ranges]
        if not isinstance(ranges, list):
            raise ValueError(f"Ranges for '{code}' in '{path}' must be a list of strings.")
        if code not in registry:
            logger.warning("Postal range table %s declares unknown region '%s'", path, code)
        table[str(code)] = [str(item) for item in ranges]
    index = PostalRangeIndex.from_strings(table, registry)
    logger.info("Loaded postal ranges for %d regions from %s", len(table), path)
    return index


@functools.lru_cache(maxsize=1)
def load_region_registry(source: Optional[Path] = None) -> RegionRegistry:
    """Build the registry from ``source``, the configured file, or the built-in cantons."""

    path = source or settings.region_table_file
    if path is None:
        return RegionRegistry.default()
    return _regions_from_file(path)


@functools.lru_cache(maxsize=1)
def load_postal_index(
    source: Optional[Path] = None, registry: Optional[RegionRegistry] = None
) -> PostalRangeIndex:
    """Build the postal range index on top of ``registry`` (default: the loaded registry)."""

    registry = registry or load_region_registry()
    path = source or settings.postal_range_file
    if path is None:
        return PostalRangeIndex.default(registry)
    return _ranges_from_file(path, registry)


def clear_table_cache() -> None:
    load_region_registry.cache_clear()
    load_postal_index.cache_clear()
