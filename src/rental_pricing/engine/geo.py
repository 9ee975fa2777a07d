"""Great-circle distance (haversine).

Pure arithmetic, no validation: NaN or out-of-range inputs produce
meaningless output rather than an error.
"""

from __future__ import annotations

import math

from rental_pricing.config.location import Coordinates

EARTH_RADIUS_KM = 6371.0


def distance_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Haversine distance between two points in km.  Symmetric, 0 for equal points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return earth_radius_km * c


def distance_between(
    a: Coordinates,
    b: Coordinates,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    return distance_km(a.lat, a.lng, b.lat, b.lng, earth_radius_km)
