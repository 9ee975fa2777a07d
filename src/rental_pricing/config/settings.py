"""Engine settings loaded from the environment (``RENTAL_PRICING_*``)."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Process-wide knobs.  Every engine function also accepts an explicit instance."""

    # ── Billing ──────────────────────────────────────────
    hourly_threshold_hours: int = Field(
        default=24, ge=1,
        description="Bookings shorter than this bill by the hour when the listing allows it",
    )
    price_decimal_places: int = Field(default=2, ge=0, le=4, description="Currency minor unit")

    # ── Geo ──────────────────────────────────────────────
    earth_radius_km: float = Field(default=6371.0, gt=0)

    # ── Geocoding collaborator ───────────────────────────
    mapbox_access_token: str = ""
    mapbox_base_url: str = "https://api.mapbox.com/geocoding/v5/mapbox.places"
    geocoding_timeout_s: float = Field(default=10.0, gt=0)

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RENTAL_PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> EngineSettings:
    """Return cached settings (singleton)."""
    return EngineSettings()
