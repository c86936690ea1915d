"""
Pydantic model for planets.

A planet carries its name and its mean distance from its star in
kilometres.  Records are frozen: the catalog builds them once at
import and they are never modified afterwards.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class Planet(BaseModel):
    """A planet exposed by the ``/planets`` endpoints."""

    name: str = Field(..., examples=["Earth"])
    distance_from_star: float = Field(
        ..., description="Distance from the star in kilometres", examples=[149_600_000]
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_serializer("distance_from_star", when_used="json")
    def serialize_distance(self, value: float) -> Union[int, float]:
        # Whole distances are written without a fractional part: 149600000, not 149600000.0.
        return int(value) if value.is_integer() else value
