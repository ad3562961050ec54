"""Canton postal code ranges and lookups over them."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional, Sequence

from ..models.domain import PostalRange
from .cantons import RegionRegistry

# Declaration order matters: region_of() returns the first canton whose ranges
# contain a code. Several cantons sit inside a neighbour's broad range
# (GE in VD, VS in BE, SZ in GL in ZH, AR/AI in SG, ...), so enclaves are
# listed before the ranges enclosing them. This deliberately differs from the
# upstream table, which lists ZH first and so resolved 1200 to VD and 8200 to ZH.
CANTON_POSTAL_RANGES: dict[str, tuple[str, ...]] = {
    "GE": ("1200-1299",),
    "VD": ("1000-1299", "1400-1489"),
    "FR": ("1630-1798",),
    "VS": ("1890-1991", "3900-3999"),
    "BE": ("3000-3999",),
    "NE": ("2000-2149",),
    "JU": ("2350-2900",),
    "BS": ("4000-4059",),
    "BL": ("4100-4497",),
    "SO": ("4500-4719",),
    "AG": ("5000-5467", "8905-8946"),
    "OW": ("6060-6078",),
    "ZG": ("6300-6340",),
    "NW": ("6370-6390",),
    "SZ": ("6410-6448", "8840-8849"),
    "LU": ("6000-6459",),
    "UR": ("6460-6491",),
    "TI": ("6500-6999",),
    "GR": ("7000-7494",),
    "SH": ("8200-8262",),
    "TG": ("8500-8598",),
    "GL": ("8750-8879",),
    "ZH": ("8000-8999",),
    "AR": ("9000-9043", "9100-9125"),
    "AI": ("9050-9058",),
    "SG": ("9000-9499",),
}

_POSTAL_CODE = re.compile(r"[0-9]{4}")


def parse_postal_code(value: object) -> Optional[int]:
    """Return the numeric value of a well-formed 4-digit postal code, else None."""

    if not isinstance(value, str) or not _POSTAL_CODE.fullmatch(value):
        return None
    return int(value)


class PostalRangeIndex:
    """Maps canton codes to inclusive postal ranges.

    The index stores ranges rather than every issued code, so it answers
    membership and rough size questions only. Counts are upper bounds: ranges
    include numbers never issued as postal codes.
    """

    def __init__(self, ranges: Mapping[str, Sequence[PostalRange]], registry: RegionRegistry):
        self._ranges: dict[str, tuple[PostalRange, ...]] = {
            code: tuple(code_ranges) for code, code_ranges in ranges.items()
        }
        self._registry = registry

    @classmethod
    def from_strings(
        cls, table: Mapping[str, Iterable[str]], registry: RegionRegistry
    ) -> "PostalRangeIndex":
        return cls(
            {code: [PostalRange.parse(text) for text in texts] for code, texts in table.items()},
            registry,
        )

    @classmethod
    def default(cls, registry: RegionRegistry) -> "PostalRangeIndex":
        return cls.from_strings(CANTON_POSTAL_RANGES, registry)

    @property
    def registry(self) -> RegionRegistry:
        return self._registry

    def declared_regions(self) -> tuple[str, ...]:
        return tuple(self._ranges)

    def ranges_of(self, region_code: str) -> tuple[PostalRange, ...]:
        if not isinstance(region_code, str):
            return ()
        return self._ranges.get(region_code, ())

    def region_of(self, postal_code: str) -> Optional[str]:
        """Return the first canton, in declaration order, covering ``postal_code``.

        A plain linear scan: with nested ranges the answer depends only on
        table order, never on hashing.
        """

        value = parse_postal_code(postal_code)
        if value is None:
            return None
        for code, code_ranges in self._ranges.items():
            if any(value in postal_range for postal_range in code_ranges):
                return code
        return None

    def is_in_region(self, postal_code: str, region_code: str) -> bool:
        value = parse_postal_code(postal_code)
        if value is None:
            return False
        return any(value in postal_range for postal_range in self.ranges_of(region_code))

    def estimate_code_count(self, region_codes: Iterable[str]) -> int:
        """Sum the sizes of every range of every given canton.

        Repeated codes are counted again and unknown codes add nothing.
        """

        total = 0
        for code in region_codes:
            for postal_range in self.ranges_of(code):
                total += postal_range.size
        return total

    def format_region_display(self, region_code: str) -> str:
        code_ranges = self.ranges_of(region_code)
        name = self._registry.label_of(region_code)
        if not code_ranges:
            return name
        return f"{name} ({', '.join(str(postal_range) for postal_range in code_ranges)})"
