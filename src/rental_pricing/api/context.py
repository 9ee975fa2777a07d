"""Context manifest generator — makes the quote service self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the pricing rules in plain English
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_core import PydanticUndefined, to_jsonable_python

from rental_pricing.config import (
    DeliveryOptions,
    InsuranceOptions,
    Listing,
    ListingPricingConfig,
    PickupOptions,
    SecondDriverOptions,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (e.g. pricing, delivery)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    method: str
    path: str
    description: str


class ServiceContext(BaseModel):
    """Self-describing context for API consumers."""
    service_name: str
    version: str
    description: str
    pricing_rules: list[str]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for m in field_info.metadata:
            for attr in ("ge", "gt", "le", "lt", "max_length", "pattern"):
                if getattr(m, attr, None) is not None:
                    constraints[attr] = getattr(m, attr)

        default = field_info.get_default(call_default_factory=True)
        default_val = None if default is PydanticUndefined else to_jsonable_python(default)

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=field_info.alias or name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_PRICING_RULES = [
    "Days = elapsed time / 24h rounded up; exactly N×24h is N days.",
    "Hourly billing applies only if the listing allows it and the booking is under 24h; hours are rounded up.",
    "Duration discounts: the active tier with the largest threshold ≤ days applies. Tiers never stack.",
    "Hourly bookings never receive a duration discount.",
    "final_price = base_price × (1 − discount/100), rounded to 2 decimals.",
    "Insurance: flat price, or price_per_day × days. Missing/zero price = included.",
    "Second driver: one-time flat fee.",
    "Delivery / flexible return: great-circle km × price per km; address must be within the radius.",
]

_INPUT_SECTIONS = [
    ("pricing", ListingPricingConfig, "Daily/hourly rates and duration discount tiers"),
    ("insurance", InsuranceOptions, "Insurance offer — policy list or legacy single policy"),
    ("secondDriver", SecondDriverOptions, "Second driver flat fee"),
    ("delivery", DeliveryOptions, "Delivery radius and per-km price"),
    ("pickup", PickupOptions, "Return method and flexible-return radius and per-km price"),
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest."),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema for a Listing."),
    EndpointInfo(method="GET", path="/listing/defaults", description="Default Listing as JSON."),
    EndpointInfo(method="POST", path="/quote", description="Full quote: rental price + options + total."),
    EndpointInfo(method="POST", path="/quote/base", description="Rental price only, from a pricing config."),
    EndpointInfo(
        method="POST", path="/options/validate",
        description="Radius-check a delivery / return address and return the updated selection.",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> ServiceContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    return ServiceContext(
        service_name="Rental Pricing Engine",
        version="1.0",
        description=(
            "Prices vehicle rentals: billable days/hours, tiered duration discounts, "
            "and optional add-ons gated by delivery/return radius."
        ),
        pricing_rules=_PRICING_RULES if detail_level == "full" else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
    )


def get_listing_schema() -> dict:
    """Return the full JSON Schema for Listing."""
    return Listing.model_json_schema()


def get_default_listing() -> dict:
    """Return a default Listing as a JSON-serializable dict."""
    return Listing().model_dump(mode="json", by_alias=True)
