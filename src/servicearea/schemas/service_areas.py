"""Pydantic request/response models for service area endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiceAreaConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    radius: str
    business_plz: str = Field("", alias="businessPlz")
    business_city: str = Field("", alias="businessCity")
    business_canton: str = Field("", alias="businessCanton")
    custom_cantons: List[str] = Field(default_factory=list, alias="customCantons")


class DecodeRequest(BaseModel):
    areas: List[str] = Field(default_factory=list, description="Stored service_areas entries.")


class DecodeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config: ServiceAreaConfigModel
    summary: str
    estimated_postal_codes: int = Field(..., alias="estimatedPostalCodes")


class EncodeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    radius: str = Field(..., description="One of city, canton, nationwide, custom.")
    plz: Optional[str] = None
    canton: Optional[str] = None
    custom_cantons: Optional[List[str]] = Field(default=None, alias="customCantons")


class EncodeResponse(BaseModel):
    areas: List[str]


class SummaryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    radius: str
    business_city: Optional[str] = Field(default=None, alias="businessCity")
    business_canton: Optional[str] = Field(default=None, alias="businessCanton")
    custom_cantons: Optional[List[str]] = Field(default=None, alias="customCantons")


class SummaryResponse(BaseModel):
    summary: str


class EstimateRequest(BaseModel):
    regions: List[str]

    @field_validator("regions")
    @classmethod
    def validate_regions(cls, value: List[str]) -> List[str]:
        if len(value) > 100:
            raise ValueError("regions must contain at most 100 entries")
        return value


class EstimateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    regions: List[str]
    estimated_postal_codes: int = Field(..., alias="estimatedPostalCodes")


class LocateResponse(ServiceAreaConfigModel):
    has_valid_location: bool = Field(..., alias="hasValidLocation")


class ToggleCantonRequest(BaseModel):
    selection: List[str] = Field(default_factory=list, description="Currently selected custom cantons.")
    code: str


class ToggleCantonResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    custom_cantons: List[str] = Field(..., alias="customCantons")
    summary: str
