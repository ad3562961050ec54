"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.service_areas import ServiceAreaCodec
from ..dependencies import resolve_codec

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/tables", status_code=status.HTTP_200_OK)
def health_tables(codec: ServiceAreaCodec = Depends(resolve_codec)) -> dict:
    """Load the canton and postal range tables and report their size."""
    registry = codec.registry
    declared = codec.postal_index.declared_regions()
    return {
        "regions": len(registry),
        "regions_with_ranges": len(declared),
        "regions_without_ranges": [code for code in registry.codes() if code not in declared],
    }
