"""Services package (external collaborators)."""

from finance_engine.services.geocoding import LocationSearchService

__all__ = [
    "LocationSearchService",
]
