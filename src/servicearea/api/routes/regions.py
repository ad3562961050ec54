"""Canton and postal code lookup endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...models.domain import Region
from ...schemas.regions import PostalCodeLookupResponse, PostalRangeModel, RegionModel
from ...services.service_areas import ServiceAreaCodec
from ..dependencies import resolve_codec

router = APIRouter(tags=["regions"])


def _region_model(region: Region, codec: ServiceAreaCodec) -> RegionModel:
    index = codec.postal_index
    return RegionModel(
        code=region.code,
        label=region.label,
        display=index.format_region_display(region.code),
        ranges=[
            PostalRangeModel(
                start=postal_range.start,
                end=postal_range.end,
                size=postal_range.size,
                sample=postal_range.sample(),
            )
            for postal_range in index.ranges_of(region.code)
        ],
        estimated_postal_codes=index.estimate_code_count([region.code]),
    )


@router.get("/regions", response_model=List[RegionModel], status_code=status.HTTP_200_OK)
def list_regions(codec: ServiceAreaCodec = Depends(resolve_codec)) -> List[RegionModel]:
    return [_region_model(region, codec) for region in codec.registry.list_regions()]


@router.get("/regions/{code}", response_model=RegionModel, status_code=status.HTTP_200_OK)
def get_region(code: str, codec: ServiceAreaCodec = Depends(resolve_codec)) -> RegionModel:
    region = codec.registry.get(code.upper())
    if region is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown region '{code}'")
    return _region_model(region, codec)


@router.get("/postal-codes/{postal_code}", response_model=PostalCodeLookupResponse, status_code=status.HTTP_200_OK)
def lookup_postal_code(postal_code: str, codec: ServiceAreaCodec = Depends(resolve_codec)) -> PostalCodeLookupResponse:
    """Resolve the canton for a postal code; region is null when nothing matches."""
    region = codec.postal_index.region_of(postal_code)
    return PostalCodeLookupResponse(
        postal_code=postal_code,
        region=region,
        label=codec.registry.label_of(region) if region else None,
    )
