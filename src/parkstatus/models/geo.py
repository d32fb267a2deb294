"""Geographic position model."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A WGS-84 position in degrees.

    Accepts ``latitude``/``longitude`` as well as the short ``lat``
    and ``lng``/``lon`` keys used by various providers.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    latitude: float = Field(ge=-90.0, le=90.0, validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(ge=-180.0, le=180.0, validation_alias=AliasChoices("longitude", "lng", "lon"))

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
