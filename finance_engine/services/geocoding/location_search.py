"""
Location Search Service (Nominatim-compatible)

Used by expense geotagging to turn a typed place name into coordinates,
and coordinates back into a readable address.

This service handles:
1. Sending search / reverse requests to the geocoding API
2. Retrying transient transport failures
3. Converting the provider payload to LocationResult models

CRITICAL: This collaborator follows the same resilience policy as the
conversion engine. Any network, HTTP or payload error ends in an empty
result ([] or None) plus a location_search_failed diagnostic. It never
raises to the caller.
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from finance_engine.config import GeocodingSettings, get_settings
from finance_engine.diagnostics import emit_diagnostic
from finance_engine.models.diagnostic import DiagnosticEventBuilder
from finance_engine.models.location import LocationResult


class LocationSearchService:
    """
    Thin async client for a Nominatim-style geocoding API.

    IMPORTANT BOUNDARIES:
    1. Only transport errors (timeouts, connection resets) are retried
    2. HTTP error statuses are not retried; they fail the call immediately
    3. Malformed individual results are skipped, not fatal
    """

    def __init__(
        self,
        settings: Optional[GeocodingSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Geocoding settings. Defaults to the environment.
            transport: Custom httpx transport (tests use httpx.MockTransport).
        """
        self._settings = settings or get_settings().geocoding
        self._transport = transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=self._settings.timeout_seconds,
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
            transport=self._transport,
        )

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        """GET a JSON document, retrying transport failures."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._settings.max_attempts),
            wait=wait_exponential(
                multiplier=self._settings.retry_backoff_seconds,
                max=10,
            ),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                async with self._create_client() as client:
                    response = await client.get(path, params=params)
                    response.raise_for_status()
                    return response.json()

    def _parse_location(self, item: dict[str, Any]) -> LocationResult:
        """Convert one provider result to a LocationResult."""
        display_name = item.get("display_name") or None
        name = item.get("name") or (
            display_name.split(",")[0].strip() if display_name else None
        )
        place_id = item.get("place_id", item.get("osm_id"))

        return LocationResult(
            id=str(place_id) if place_id is not None else f"{item['lat']},{item['lon']}",
            name=name,
            address=display_name,
            latitude=float(item["lat"]),
            longitude=float(item["lon"]),
        )

    async def search_by_name(self, query: str) -> list[LocationResult]:
        """
        Search places by name.

        Returns:
            Matching locations (at most result_limit), or [] on any failure.
        """
        query = (query or "").strip()
        if not query:
            return []

        try:
            payload = await self._get_json(
                "/search",
                {
                    "q": query,
                    "format": "jsonv2",
                    "limit": self._settings.result_limit,
                },
            )
        except (httpx.HTTPError, ValueError) as e:
            emit_diagnostic(
                DiagnosticEventBuilder.location_search_failed(
                    operation="search",
                    error_message=str(e),
                    query=query,
                )
            )
            return []

        if not isinstance(payload, list):
            emit_diagnostic(
                DiagnosticEventBuilder.location_search_failed(
                    operation="search",
                    error_message=f"Unexpected payload type: {type(payload).__name__}",
                    query=query,
                )
            )
            return []

        results = []
        for item in payload:
            try:
                results.append(self._parse_location(item))
            except (AttributeError, KeyError, TypeError, ValueError, ValidationError):
                # Skip malformed results
                continue

        return results[: self._settings.result_limit]

    async def get_address_from_coordinates(
        self,
        latitude: float,
        longitude: float,
    ) -> Optional[str]:
        """
        Reverse-geocode coordinates to a display address.

        Returns:
            The address, or None if nothing was found or the call failed.
        """
        try:
            payload = await self._get_json(
                "/reverse",
                {"lat": latitude, "lon": longitude, "format": "jsonv2"},
            )
        except (httpx.HTTPError, ValueError) as e:
            emit_diagnostic(
                DiagnosticEventBuilder.location_search_failed(
                    operation="reverse",
                    error_message=str(e),
                )
            )
            return None

        if not isinstance(payload, dict):
            return None
        address = payload.get("display_name")
        return address if isinstance(address, str) and address else None
