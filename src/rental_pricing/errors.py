"""Engine error taxonomy.

All failures are synchronous and never retried:

- ``ConfigurationError`` — the listing cannot price what was asked (hourly
  booking without an hourly rate, delivery without listing coordinates).
  Callers grey the option out.
- ``InputError`` — programmer error, e.g. ``end <= start``.
- ``OutOfRangeError`` — a delivery / return address outside the allowed
  radius.  Recoverable by picking another address.
- ``GeocodingError`` — the address-autocomplete collaborator failed.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(PricingError):
    pass


class InputError(PricingError):
    pass


class OutOfRangeError(PricingError):
    """Address rejected by a radius check.  Carries the miss for display."""

    def __init__(self, option: str, distance_km: float, radius_km: float):
        self.option = option
        self.distance_km = distance_km
        self.radius_km = radius_km
        super().__init__(
            f"{option} address is {distance_km:.1f} km away, "
            f"outside the {radius_km:g} km radius"
        )


class GeocodingError(PricingError):
    pass
