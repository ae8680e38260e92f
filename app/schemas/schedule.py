from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional


class ScheduleRecord(BaseModel):
    """Per-station timetable as published upstream.

    Each direction is a single comma separated string of HH:MM departures.
    `jadwal_lb_biasa` runs towards Lebak Bulus, `jadwal_hi_biasa` towards Bundaran HI.
    """
    model_config = ConfigDict(extra="ignore")

    station_id: str = Field(validation_alias=AliasChoices("nid", "stationId", "station_id"))
    schedule_direction_a: Optional[str] = Field(
        "", validation_alias=AliasChoices("jadwal_lb_biasa", "scheduleDirectionA")
    )
    schedule_direction_b: Optional[str] = Field(
        "", validation_alias=AliasChoices("jadwal_hi_biasa", "scheduleDirectionB")
    )


class ScheduleResponse(BaseModel):
    """One upcoming departure, labelled with the direction it heads to."""
    model_config = ConfigDict(populate_by_name=True)

    station_name: str = Field(alias="stationName")
    time: str  # HH:MM
