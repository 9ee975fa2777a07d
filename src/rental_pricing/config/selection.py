"""Renter-side choices for one booking session.

Owned by the caller and rebuilt on every change.  The engine never mutates a
selection; ``engine.validator.try_enable_*`` return updated copies.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rental_pricing.config.location import Coordinates


class _SelectionModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DriverInfo(_SelectionModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None


class SecondDriverSelection(_SelectionModel):
    enabled: bool = False
    driver_info: DriverInfo | None = None


class AddressSelection(_SelectionModel):
    """Delivery or flexible-return address picked by the renter."""

    enabled: bool = False
    address: str | None = None
    coordinates: Coordinates | None = None


class OptionSelection(_SelectionModel):
    insurance: bool = Field(default=False)
    insurance_policy_id: str | None = Field(default=None)
    second_driver: SecondDriverSelection = Field(default_factory=SecondDriverSelection)
    delivery: AddressSelection = Field(default_factory=AddressSelection)
    flexible_return: AddressSelection = Field(default_factory=AddressSelection)
