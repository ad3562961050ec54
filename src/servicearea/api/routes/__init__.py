"""Route group exports."""

from . import health, regions, service_areas

__all__ = ["health", "regions", "service_areas"]
