"""API routes for service area classification."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from ...models.domain import ServiceAreaConfig
from ...schemas.service_areas import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    EstimateRequest,
    EstimateResponse,
    LocateResponse,
    ServiceAreaConfigModel,
    SummaryRequest,
    SummaryResponse,
    ToggleCantonRequest,
    ToggleCantonResponse,
)
from ...services.service_areas import ServiceAreaCodec
from ..dependencies import resolve_codec

router = APIRouter(prefix="/service-areas", tags=["service-areas"])


def _to_model(config: ServiceAreaConfig) -> ServiceAreaConfigModel:
    return ServiceAreaConfigModel(**asdict(config))


@router.post("/decode", response_model=DecodeResponse, status_code=status.HTTP_200_OK)
def decode_service_areas(
    payload: DecodeRequest, codec: ServiceAreaCodec = Depends(resolve_codec)
) -> DecodeResponse:
    """Classify a stored service_areas list into its radius configuration."""
    try:
        config = codec.decode(payload.areas)
        return DecodeResponse(
            config=_to_model(config),
            summary=codec.summarize_config(config),
            estimated_postal_codes=codec.estimate_config(config),
        )
    except Exception as exc:
        logging.exception(f"Error decoding service areas: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to decode service areas: {str(exc)}",
        ) from exc


@router.post("/encode", response_model=EncodeResponse, status_code=status.HTTP_200_OK)
def encode_service_areas(
    payload: EncodeRequest, codec: ServiceAreaCodec = Depends(resolve_codec)
) -> EncodeResponse:
    """Build the list to store for the chosen radius."""
    areas = codec.encode(
        payload.radius,
        plz=payload.plz,
        canton=payload.canton,
        custom_cantons=payload.custom_cantons,
    )
    return EncodeResponse(areas=areas)


@router.post("/summary", response_model=SummaryResponse, status_code=status.HTTP_200_OK)
def summarize_service_areas(
    payload: SummaryRequest, codec: ServiceAreaCodec = Depends(resolve_codec)
) -> SummaryResponse:
    summary = codec.summarize(
        payload.radius,
        business_city=payload.business_city,
        business_canton=payload.business_canton,
        custom_cantons=payload.custom_cantons,
    )
    return SummaryResponse(summary=summary)


@router.post("/estimate", response_model=EstimateResponse, status_code=status.HTTP_200_OK)
def estimate_postal_codes(
    payload: EstimateRequest, codec: ServiceAreaCodec = Depends(resolve_codec)
) -> EstimateResponse:
    """Approximate number of postal codes covered by the given cantons (display only)."""
    return EstimateResponse(
        regions=payload.regions,
        estimated_postal_codes=codec.estimate_code_count(payload.regions),
    )


@router.get("/locate/{postal_code}", response_model=LocateResponse, status_code=status.HTTP_200_OK)
def locate_business(postal_code: str, codec: ServiceAreaCodec = Depends(resolve_codec)) -> LocateResponse:
    """Detect the home canton for a business postal code."""
    config = codec.locate(postal_code)
    return LocateResponse(**asdict(config), has_valid_location=codec.has_valid_location(config))


@router.post("/custom-cantons/toggle", response_model=ToggleCantonResponse, status_code=status.HTTP_200_OK)
def toggle_custom_canton(
    payload: ToggleCantonRequest, codec: ServiceAreaCodec = Depends(resolve_codec)
) -> ToggleCantonResponse:
    """Add or remove one canton from a custom selection."""
    selection = codec.toggle_custom_canton(payload.selection, payload.code)
    return ToggleCantonResponse(
        custom_cantons=selection,
        summary=codec.summarize("custom", custom_cantons=selection),
    )
