"""Pydantic model for stars."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class Star(BaseModel):
    """A star exposed by the ``/stars`` endpoints."""

    name: str = Field(..., examples=["Sun"])
    solar_masses: float = Field(..., description="Mass in solar masses", examples=[1.0])

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_serializer("solar_masses", when_used="json")
    def serialize_solar_masses(self, value: float) -> Union[int, float]:
        return int(value) if value.is_integer() else value
