"""Geographic point shared by listings, delivery and return addresses."""

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees.

    Not range-checked: distance maths is garbage in, garbage out.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(description="Latitude (decimal degrees)")
    lng: float = Field(description="Longitude (decimal degrees)")
