"""Departure record domain model (pipeline output)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InterchangeDetail(BaseModel):
    """A change of line within a journey."""

    model_config = ConfigDict(frozen=True)

    line: str
    station: str
    platform: str


class DepartureRecord(BaseModel):
    """One display-ready row for an accepted journey.

    Serializes with camelCase keys (``model_dump(by_alias=True)``).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    line: str
    line_number: str
    train_destination: str
    boarding_station: str
    departure_time: str | None
    arrival_time: str | None
    departure_time_local: str
    arrival_time_local: str
    minutes_until_departure: int | None
    duration_minutes: int | None
    platform: str
    arrival_platform: str
    delay_minutes: int
    is_realtime: bool
    interchanges: int
    interchange_details: list[InterchangeDetail] = Field(default_factory=list)
    number_of_stops: int
    catchable: bool
    # Sort key; not part of the wire format
    departure_instant: datetime | None = Field(default=None, exclude=True)
