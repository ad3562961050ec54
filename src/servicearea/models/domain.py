"""Domain models for cantons, postal ranges and service area configurations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

ServiceRadius = Literal["city", "canton", "nationwide", "custom"]

_POSTAL_BOUND = re.compile(r"[0-9]{4}")


@dataclass(frozen=True, slots=True)
class Region:
    """A canton identified by its two-letter code."""

    code: str
    label: str


@dataclass(frozen=True, slots=True)
class PostalRange:
    """Inclusive interval of 4-digit postal codes."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if not 0 <= bound <= 9999:
                raise ValueError(f"Postal range bound out of 4-digit range: {bound}")
        if self.start > self.end:
            raise ValueError(f"Postal range start {self.start} exceeds end {self.end}")

    @classmethod
    def parse(cls, text: str) -> "PostalRange":
        """Build a range from its stored form, e.g. ``"8000-8999"``."""

        start_text, sep, end_text = str(text).partition("-")
        start_text, end_text = start_text.strip(), end_text.strip()
        if not sep or not _POSTAL_BOUND.fullmatch(start_text) or not _POSTAL_BOUND.fullmatch(end_text):
            raise ValueError(f"Invalid postal range '{text}', expected 'NNNN-NNNN'")
        return cls(int(start_text), int(end_text))

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{self.start:04d}-{self.end:04d}"

    def sample(self, size: int = 5) -> list[str]:
        """Return up to ``size`` evenly spaced postal codes from the range."""

        count = min(size, self.size)
        if count <= 0:
            return []
        step = max(1, (self.end - self.start) // count)
        return [f"{self.start + i * step:04d}" for i in range(count)]


@dataclass(slots=True)
class ServiceAreaConfig:
    """Canonical form of a craftsperson's declared coverage."""

    radius: ServiceRadius = "canton"
    business_plz: str = ""
    business_city: str = ""
    business_canton: str = ""
    custom_cantons: list[str] = field(default_factory=list)
