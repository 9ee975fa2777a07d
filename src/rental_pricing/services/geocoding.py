"""Address autocomplete — the collaborator that turns free text into coordinates.

The engine never calls this.  Callers resolve an address first, then hand
the suggestion's coordinates to ``engine.validator.try_enable_*``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote

import requests
from pydantic import BaseModel

from rental_pricing.config.location import Coordinates
from rental_pricing.config.settings import EngineSettings, get_settings
from rental_pricing.errors import ConfigurationError, GeocodingError

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class AddressSuggestion(BaseModel):
    address: str
    latitude: float
    longitude: float
    city: str | None = None
    country: str | None = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.latitude, lng=self.longitude)


class AddressAutocomplete(Protocol):
    def search(
        self, query: str, countries: list[str] | None = None, limit: int = 5,
    ) -> list[AddressSuggestion]: ...


def _suggestion_from_feature(feature: dict[str, Any]) -> AddressSuggestion:
    # Mapbox centre is [lng, lat]
    longitude, latitude = feature["center"]
    city = country = None
    for ctx in feature.get("context") or []:
        ctx_id = ctx.get("id", "")
        if ctx_id.startswith("place.") and city is None:
            city = ctx.get("text")
        elif ctx_id.startswith("country.") and country is None:
            country = ctx.get("short_code") or ctx.get("text")
    return AddressSuggestion(
        address=feature["place_name"],
        latitude=latitude,
        longitude=longitude,
        city=city,
        country=country,
    )


class MapboxAutocomplete:
    """Forward geocoding against the Mapbox Places API."""

    def __init__(self, settings: EngineSettings | None = None, session: requests.Session | None = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    def search(
        self, query: str, countries: list[str] | None = None, limit: int = 5,
    ) -> list[AddressSuggestion]:
        """Return up to ``limit`` suggestions.  Queries under 2 chars return [] without a request."""
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []
        if not self.settings.mapbox_access_token:
            raise ConfigurationError("RENTAL_PRICING_MAPBOX_ACCESS_TOKEN is not set")

        params: dict[str, Any] = {
            "access_token": self.settings.mapbox_access_token,
            "limit": limit,
            "types": "place,address,poi",
        }
        if countries:
            params["country"] = ",".join(c.lower() for c in countries)

        url = f"{self.settings.mapbox_base_url}/{quote(query)}.json"
        try:
            resp = self.session.get(url, params=params, timeout=self.settings.geocoding_timeout_s)
            resp.raise_for_status()
            features = resp.json().get("features", [])
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Address lookup failed for %r: %s", query, exc)
            raise GeocodingError(f"address lookup failed: {exc}") from exc

        return [_suggestion_from_feature(f) for f in features]
