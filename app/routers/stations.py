from fastapi import APIRouter, Depends
from typing import List
from app.config.settings import settings
from app.core.fetcher import Fetcher
from app.schemas.response import APIResponse
from app.schemas.schedule import ScheduleResponse
from app.schemas.station import Station
from app.services.station_service import StationService, make_clock
from app.utils.response import success_response

router = APIRouter(prefix="/stations", tags=["Stations"])


def get_station_service() -> StationService:
	"""Build a service wired to the configured upstream. Overridden in tests."""
	return StationService(
		fetcher=Fetcher(timeout=settings.FETCH_TIMEOUT),
		stations_url=settings.STATIONS_URL,
		schedules_url=settings.SCHEDULES_URL,
		direction_a_name=settings.DIRECTION_A_NAME,
		direction_b_name=settings.DIRECTION_B_NAME,
		now=make_clock(settings.TIMEZONE),
	)


@router.get(
	"",
	summary="List stations",
	response_model=APIResponse[List[Station]],
	description=(
		"Returns every MRT station published upstream as `id`/`name` pairs, "
		"in the order the MRT site lists them.\n\n"
		"Errors (upstream unreachable, malformed payload) are returned as "
		"`400` with `success: false` and the error text in `message`."
	),
	responses={400: {"description": "Upstream error"}},
)
async def list_stations(service: StationService = Depends(get_station_service)):
	data = await service.list_stations()
	return success_response("Success get all stations", data)


@router.get(
	"/{station_id}",
	summary="Upcoming departures at a station",
	response_model=APIResponse[List[ScheduleResponse]],
	description=(
		"Returns the departures still ahead today at the given station. "
		"Trains towards Lebak Bulus come first, then trains towards Bundaran HI; "
		"each entry carries the direction name in `stationName` and the time as `HH:MM`.\n\n"
		"Parameters:\n- `station_id` (string): the station `id` as returned by `GET /stations`.\n\n"
		"Example:\n``GET /stations/38``\n\n"
		"Errors:\n- `400`: unknown station (`Station not found`), bad upstream data or upstream failure."
	),
	responses={400: {"description": "Station not found or upstream error"}},
)
async def get_schedules_by_station(station_id: str, service: StationService = Depends(get_station_service)):
	"""Upcoming departures for `station_id`, both directions."""
	data = await service.get_schedules_for_station(station_id)
	return success_response("Successfully get schedules by station", data)
