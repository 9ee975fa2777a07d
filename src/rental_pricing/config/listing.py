"""Listing bundle — everything the engine needs about one vehicle offer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from rental_pricing.config.location import Coordinates
from rental_pricing.config.options import ListingOptionsConfig
from rental_pricing.config.pricing import ListingPricingConfig


class Listing(BaseModel):
    """Pricing + options + fixed pickup point for one listing.

    Also accepts the marketplace listing JSON as served by the listings
    endpoint: ``pricePerDay`` / ``currency`` at the top level,
    ``latitude`` / ``longitude``, and the tariff nested in
    ``options.pricing``.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None)
    title: str | None = Field(default=None)
    coordinates: Coordinates | None = Field(
        default=None,
        description="Fixed pickup point. None = no fixed point, delivery and return cannot be priced.",
    )
    pricing: ListingPricingConfig = Field(default_factory=ListingPricingConfig)
    options: ListingOptionsConfig = Field(default_factory=ListingOptionsConfig)

    @model_validator(mode="before")
    @classmethod
    def _from_marketplace_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "pricing" in data:
            return data
        data = dict(data)
        options = dict(data.get("options") or {})

        pricing = dict(options.pop("pricing", None) or {})
        for key in ("pricePerDay", "currency"):
            if key in data:
                pricing.setdefault(key, data.pop(key))
        data["pricing"] = pricing
        data["options"] = options

        lat, lng = data.pop("latitude", None), data.pop("longitude", None)
        if "coordinates" not in data and lat is not None and lng is not None:
            data["coordinates"] = {"lat": lat, "lng": lng}
        return data


def load_listing(path: str | Path) -> Listing:
    """Load a listing from a ``.json``, ``.yaml`` or ``.yml`` file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported listing file type: {path.suffix!r}")
    return Listing(**data)
