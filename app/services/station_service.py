import logging
from datetime import datetime
from functools import lru_cache
from typing import Callable, List, Optional, Type, TypeVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import TypeAdapter, ValidationError

from app.core.errors import DecodeError, NotFoundError
from app.core.fetcher import Fetcher
from app.schemas.schedule import ScheduleRecord, ScheduleResponse
from app.schemas.station import Station, StationRecord
from app.utils.time_utils import current_hhmm, format_hhmm, parse_times

logger = logging.getLogger("mrt.station_service")

R = TypeVar("R")


@lru_cache(maxsize=None)
def make_clock(tz_name: Optional[str]) -> Callable[[], datetime]:
    """Return a callable giving the current wall-clock time in `tz_name`.

    An empty name, or one the system does not know, falls back to server local time.
    Cached per name, so the zone is resolved (and an unknown one reported) once.
    """
    if not tz_name:
        return datetime.now
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {tz_name!r}, using server local time")
        return datetime.now
    return lambda: datetime.now(tz)


def _decode(payload: bytes, model: Type[R]) -> List[R]:
    try:
        return TypeAdapter(List[model]).validate_json(payload)
    except ValidationError as e:
        first = e.errors()[0]
        logger.warning(f"Undecodable upstream payload ({e.error_count()} errors): {first['msg']}")
        raise DecodeError(f"Invalid upstream payload: {first['msg']}") from e


class StationService:
    """Lists stations and upcoming departures, straight from the upstream payload.

    Nothing is cached: every call fetches and decodes a fresh copy.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        stations_url: str,
        schedules_url: str,
        direction_a_name: str,
        direction_b_name: str,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.fetcher = fetcher
        self.stations_url = stations_url
        self.schedules_url = schedules_url
        self.direction_a_name = direction_a_name
        self.direction_b_name = direction_b_name
        self.now = now or datetime.now

    async def list_stations(self) -> List[Station]:
        payload = await self.fetcher.fetch(self.stations_url)
        records = _decode(payload, StationRecord)
        logger.debug(f"Decoded {len(records)} stations")
        return [Station(id=r.id, name=r.name) for r in records]

    async def get_schedules_for_station(self, station_id: str) -> List[ScheduleResponse]:
        payload = await self.fetcher.fetch(self.schedules_url)
        records = _decode(payload, ScheduleRecord)

        selected = None
        if station_id:
            selected = next((r for r in records if r.station_id == station_id), None)
        if selected is None:
            raise NotFoundError("Station not found")

        return self.build_schedule_response(selected)

    def build_schedule_response(self, schedule: ScheduleRecord) -> List[ScheduleResponse]:
        """Parse both directions and keep departures later than the current minute.

        Direction A entries come first, then direction B, each in upstream order.
        """
        times_a = parse_times(schedule.schedule_direction_a or "")
        times_b = parse_times(schedule.schedule_direction_b or "")
        # zero padded 24h strings compare in chronological order
        now = current_hhmm(self.now())

        response: List[ScheduleResponse] = []
        for label, times in ((self.direction_a_name, times_a), (self.direction_b_name, times_b)):
            for t in times:
                hhmm = format_hhmm(t)
                if hhmm > now:
                    response.append(ScheduleResponse(station_name=label, time=hhmm))
        return response
