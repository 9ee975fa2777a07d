"""Decimal helpers for currency amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_money(value: Decimal | float | int, places: int = 2) -> Decimal:
    """Round to the currency minor unit, half up.

    Floats go through ``repr`` so that e.g. a haversine distance is not
    expanded to its full binary representation first.
    """
    if isinstance(value, float):
        value = Decimal(repr(value))
    elif not isinstance(value, Decimal):
        value = Decimal(value)
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
