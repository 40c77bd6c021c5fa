"""Geocoding services package."""

from finance_engine.services.geocoding.location_search import LocationSearchService

__all__ = ["LocationSearchService"]
