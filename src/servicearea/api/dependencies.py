"""Dependency factories shared by the routers."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..services.service_areas import ServiceAreaCodec, get_codec


def resolve_codec() -> ServiceAreaCodec:
    """Codec for a request; table loading failures become HTTP errors."""
    try:
        return get_codec()
    except FileNotFoundError as exc:
        logging.exception(f"Service area tables unavailable: {exc}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except ValueError as exc:
        logging.exception(f"Service area tables invalid: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
