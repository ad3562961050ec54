"""Registry of the 26 Swiss cantons."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models.domain import Region

SWISS_CANTONS: tuple[tuple[str, str], ...] = (
    ("AG", "Aargau"),
    ("AI", "Appenzell Innerrhoden"),
    ("AR", "Appenzell Ausserrhoden"),
    ("BE", "Bern"),
    ("BL", "Basel-Landschaft"),
    ("BS", "Basel-Stadt"),
    ("FR", "Freiburg"),
    ("GE", "Genf"),
    ("GL", "Glarus"),
    ("GR", "Graubünden"),
    ("JU", "Jura"),
    ("LU", "Luzern"),
    ("NE", "Neuenburg"),
    ("NW", "Nidwalden"),
    ("OW", "Obwalden"),
    ("SG", "St. Gallen"),
    ("SH", "Schaffhausen"),
    ("SO", "Solothurn"),
    ("SZ", "Schwyz"),
    ("TG", "Thurgau"),
    ("TI", "Tessin"),
    ("UR", "Uri"),
    ("VD", "Waadt"),
    ("VS", "Wallis"),
    ("ZG", "Zug"),
    ("ZH", "Zürich"),
)


class RegionRegistry:
    """Closed, ordered set of regions. Lookups never raise."""

    def __init__(self, regions: Iterable[Region]):
        self._regions = tuple(regions)
        self._by_code = {region.code: region for region in self._regions}
        if len(self._by_code) != len(self._regions):
            raise ValueError("Region codes must be unique.")

    @classmethod
    def default(cls) -> "RegionRegistry":
        return cls(Region(code, label) for code, label in SWISS_CANTONS)

    def list_regions(self) -> tuple[Region, ...]:
        return self._regions

    def codes(self) -> tuple[str, ...]:
        return tuple(region.code for region in self._regions)

    def get(self, code: str) -> Optional[Region]:
        return self._by_code.get(code)

    def label_of(self, code: str) -> str:
        """Return the display label, or the code itself when it is unknown."""

        region = self._by_code.get(code)
        return region.label if region else code

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._by_code

    def __len__(self) -> int:
        return len(self._regions)
