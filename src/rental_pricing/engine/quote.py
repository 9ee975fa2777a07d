"""Quote orchestrator — base price + add-ons for one listing and date range.

This is what every booking surface calls on each date or option change.
"""

from __future__ import annotations

import logging

from rental_pricing.config.listing import Listing
from rental_pricing.config.pricing import DateRange
from rental_pricing.config.selection import OptionSelection
from rental_pricing.config.settings import EngineSettings, get_settings
from rental_pricing.engine.base_price import calculate_base_price
from rental_pricing.engine.options_price import price_options
from rental_pricing.models.results import Quote

logger = logging.getLogger(__name__)


def build_quote(
    listing: Listing,
    date_range: DateRange,
    selection: OptionSelection | None = None,
    settings: EngineSettings | None = None,
) -> Quote:
    """Price a booking end to end.

    Per-day add-ons use ``price.days``: for an hourly booking that is the
    elapsed time rounded up to whole days, i.e. 1 for a sub-day rental.
    """
    settings = settings or get_settings()
    selection = selection or OptionSelection()

    price = calculate_base_price(date_range, listing.pricing, settings)
    options = price_options(
        selection, listing.options, listing.coordinates, price.days, settings,
    )
    total = price.final_price + options.total

    logger.debug(
        "Quote for listing %s: %s + options %s = %s %s",
        listing.id, price.final_price, options.total, total, price.currency,
    )
    return Quote(price=price, options=options, total=total, currency=price.currency)
