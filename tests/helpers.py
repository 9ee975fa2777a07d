"""Test helpers — fixed points and date ranges."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from rental_pricing.config import Coordinates, DateRange

PARIS = Coordinates(lat=48.8566, lng=2.3522)
LYON = Coordinates(lat=45.7640, lng=4.8357)

# km per degree of latitude on a 6371 km sphere
KM_PER_DEG_LAT = 6371.0 * math.pi / 180


def north_of(point: Coordinates, km: float) -> Coordinates:
    """Point ``km`` due north of ``point`` (exact on the haversine sphere)."""
    return Coordinates(lat=point.lat + km / KM_PER_DEG_LAT, lng=point.lng)


START = datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc)


def stay(**delta) -> DateRange:
    """DateRange starting at START and lasting ``timedelta(**delta)``."""
    return DateRange(start=START, end=START + timedelta(**delta))
