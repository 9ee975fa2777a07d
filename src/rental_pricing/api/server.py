"""FastAPI server — quote service over the pricing engine.

Run with:
    uvicorn rental_pricing.api.server:app --reload --port 8000

Or:
    python -m rental_pricing.api.server

Endpoints:
    GET  /context            — self-describing manifest (sections + pricing rules)
    GET  /schema             — full JSON Schema for Listing inputs
    GET  /listing/defaults   — default listing as JSON
    POST /quote              — rental price + options + total
    POST /quote/base         — rental price only
    POST /options/validate   — radius-check an address, return updated selection
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from rental_pricing.api.context import build_context, get_default_listing, get_listing_schema
from rental_pricing.config import (
    Coordinates,
    DateRange,
    Listing,
    ListingPricingConfig,
    OptionSelection,
    get_settings,
)
from rental_pricing.engine.base_price import calculate_base_price
from rental_pricing.engine.quote import build_quote
from rental_pricing.engine.validator import try_enable_delivery, try_enable_flexible_return
from rental_pricing.errors import ConfigurationError, InputError, OutOfRangeError
from rental_pricing.models.results import PriceBreakdown, Quote
from rental_pricing.utils.logger import setup_logging


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Rental Pricing Engine API",
    version="1.0",
    description=(
        "Prices vehicle rental bookings: billable days/hours, duration discounts, "
        "and add-ons (insurance, second driver, delivery, flexible return)."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Error mapping
# ═══════════════════════════════════════════════════════════════════════════

@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc), "type": "input_error"})


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc), "type": "configuration_error"})


@app.exception_handler(OutOfRangeError)
async def out_of_range_handler(request: Request, exc: OutOfRangeError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "type": "out_of_range",
            "option": exc.option,
            "distance_km": round(exc.distance_km, 1),
            "radius_km": exc.radius_km,
        },
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class QuoteRequest(BaseModel):
    """Request body for /quote."""
    listing: Listing
    start: datetime
    end: datetime
    selection: OptionSelection = Field(default_factory=OptionSelection)


class BaseQuoteRequest(BaseModel):
    """Request body for /quote/base."""
    pricing: ListingPricingConfig
    start: datetime
    end: datetime


class ValidateOptionRequest(BaseModel):
    """Request body for /options/validate."""
    listing: Listing
    option: Literal["delivery", "flexible_return"]
    address: str
    coordinates: Coordinates
    selection: OptionSelection = Field(default_factory=OptionSelection)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Rental Pricing Engine API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds the pricing rules",
    ),
):
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Listing — all input parameters with types, defaults, constraints."""
    return get_listing_schema()


@app.get("/listing/defaults")
def get_defaults():
    return get_default_listing()


@app.post("/quote", response_model=Quote)
def quote(req: QuoteRequest):
    """Price a booking: rental price, add-ons and total.

    Example minimal request:
    ```json
    {"listing": {"pricing": {"pricePerDay": 50}},
     "start": "2025-06-01T10:00:00Z", "end": "2025-06-08T10:00:00Z"}
    ```
    """
    return build_quote(req.listing, DateRange(start=req.start, end=req.end), req.selection)


@app.post("/quote/base", response_model=PriceBreakdown)
def quote_base(req: BaseQuoteRequest):
    """Rental price only — no listing options or coordinates needed."""
    return calculate_base_price(DateRange(start=req.start, end=req.end), req.pricing)


@app.post("/options/validate", response_model=OptionSelection)
def validate_option(req: ValidateOptionRequest):
    """Radius-check an address and return the selection with the option enabled.

    Responds 422 with ``distance_km`` and ``radius_km`` when the address is
    out of range; the submitted selection is then still the current one.
    """
    enable = try_enable_delivery if req.option == "delivery" else try_enable_flexible_return
    return enable(
        req.selection,
        req.address,
        req.coordinates,
        req.listing.coordinates,
        req.listing.options,
        get_settings(),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    setup_logging(get_settings().log_level)
    uvicorn.run(
        "rental_pricing.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
