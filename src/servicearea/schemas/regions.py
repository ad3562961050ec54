"""Canton and postal code API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostalRangeModel(BaseModel):
    start: int
    end: int
    size: int
    sample: List[str] = Field(default_factory=list, description="Evenly spaced codes for map markers.")


class RegionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    label: str
    display: str
    ranges: List[PostalRangeModel]
    estimated_postal_codes: int = Field(..., alias="estimatedPostalCodes")


class PostalCodeLookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    postal_code: str = Field(..., alias="postalCode")
    region: Optional[str] = None
    label: Optional[str] = None
