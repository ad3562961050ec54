"""Conversion between stored service area lists and radius configurations."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ...data.cantons import RegionRegistry
from ...data.postal_ranges import PostalRangeIndex, parse_postal_code
from ...models.domain import ServiceAreaConfig

logger = logging.getLogger(__name__)

DEFAULT_CITY_PLACEHOLDER = "Ihre Stadt"


class ServiceAreaCodec:
    """Classifies stored area lists and rebuilds them from a radius choice.

    Stateless apart from the read-only tables it is constructed with. No
    method raises on malformed input: unknown tokens are ignored and missing
    data falls back to empty fields.
    """

    def __init__(
        self,
        registry: RegionRegistry,
        postal_index: PostalRangeIndex,
        *,
        city_placeholder: str = DEFAULT_CITY_PLACEHOLDER,
    ):
        self.registry = registry
        self.postal_index = postal_index
        self.city_placeholder = city_placeholder

    def _partition(self, stored: Iterable[object]) -> tuple[list[str], Optional[str]]:
        regions: list[str] = []
        postal: Optional[str] = None
        for entry in stored:
            if isinstance(entry, str) and len(entry) == 2 and entry in self.registry:
                if entry not in regions:
                    regions.append(entry)
            elif isinstance(entry, str) and postal is None and parse_postal_code(entry) is not None:
                postal = entry
            else:
                logger.debug("Ignoring stored service area token %r", entry)
        return regions, postal

    def decode(self, stored: Optional[Iterable[object]]) -> ServiceAreaConfig:
        regions, postal = self._partition(stored or ())
        config = ServiceAreaConfig(radius="canton", business_plz=postal or "")

        if regions and len(regions) == len(self.registry):
            # the home canton is not recoverable from a full list
            config.radius = "nationwide"
            config.business_canton = regions[0]
        elif len(regions) > 1:
            config.radius = "custom"
            config.custom_cantons = list(regions)
            config.business_canton = regions[0]
        elif len(regions) == 1:
            config.business_canton = regions[0]
        elif postal:
            config.radius = "city"
        return config

    def encode(
        self,
        radius: str,
        *,
        plz: Optional[str] = None,
        canton: Optional[str] = None,
        custom_cantons: Optional[Sequence[str]] = None,
    ) -> list[str]:
        match radius:
            case "city":
                return [plz] if plz else []
            case "canton":
                return [canton] if canton else []
            case "nationwide":
                return list(self.registry.codes())
            case "custom":
                return list(custom_cantons or [])
            case _:
                return []

    def encode_config(self, config: ServiceAreaConfig) -> list[str]:
        return self.encode(
            config.radius,
            plz=config.business_plz,
            canton=config.business_canton,
            custom_cantons=config.custom_cantons,
        )

    def summarize(
        self,
        radius: str,
        *,
        business_city: Optional[str] = None,
        business_canton: Optional[str] = None,
        custom_cantons: Optional[Sequence[str]] = None,
    ) -> str:
        match radius:
            case "city":
                return f"Nur {business_city or self.city_placeholder}"
            case "canton":
                return f"Kanton {self.registry.label_of(business_canton or '')}"
            case "nationwide":
                return "Ganze Schweiz (alle Kantone)"
            case "custom":
                return f"{len(custom_cantons or [])} Kantone ausgewählt"
            case _:
                return ""

    def summarize_config(self, config: ServiceAreaConfig) -> str:
        return self.summarize(
            config.radius,
            business_city=config.business_city,
            business_canton=config.business_canton,
            custom_cantons=config.custom_cantons,
        )

    def estimate_code_count(self, region_codes: Iterable[str]) -> int:
        return self.postal_index.estimate_code_count(region_codes)

    def estimate_config(self, config: ServiceAreaConfig) -> int:
        """Approximate postal codes reachable under ``config``; city mode covers no canton."""

        if config.radius == "city":
            return 0
        return self.estimate_code_count(
            code for code in self.encode_config(config) if code in self.registry
        )

    def locate(self, postal_code: str) -> ServiceAreaConfig:
        """Canton-mode config for a business located at ``postal_code``."""

        if parse_postal_code(postal_code) is None:
            return ServiceAreaConfig()
        return ServiceAreaConfig(
            radius="canton",
            business_plz=postal_code,
            business_canton=self.postal_index.region_of(postal_code) or "",
        )

    @staticmethod
    def toggle_custom_canton(selection: Sequence[str], code: str) -> list[str]:
        if code in selection:
            return [item for item in selection if item != code]
        return [*selection, code]

    @staticmethod
    def has_valid_location(config: ServiceAreaConfig) -> bool:
        return len(config.business_plz) == 4 and bool(config.business_canton)
