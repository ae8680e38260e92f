import os
from typing import Optional


DEFAULT_UPSTREAM_URL = "https://www.jakartamrt.co.id/id/val/stasiuns"


def _bool_env(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).lower() in ("1", "true", "yes", "on")


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _timeout_env(name: str, default: float) -> float:
    # aiohttp treats a total timeout <= 0 as "no timeout"
    value = _float_env(name, default)
    return value if value > 0 else default


class Settings:
    """Simple settings loader that reads from environment with sensible defaults.

    Upstream URLs, the fetch timeout and the direction labels are handed to the
    fetcher and the station service explicitly, so tests can swap them out.
    """

    def __init__(self) -> None:
        # Upstream endpoints. The MRT site serves stations and schedules from one URL.
        self.STATIONS_URL: str = os.getenv("STATIONS_URL", DEFAULT_UPSTREAM_URL)
        self.SCHEDULES_URL: str = os.getenv("SCHEDULES_URL", self.STATIONS_URL)
        self.FETCH_TIMEOUT: float = _timeout_env("FETCH_TIMEOUT", 10.0)

        # Display names for the two directions of the line
        self.DIRECTION_A_NAME: str = os.getenv("DIRECTION_A_NAME", "Stasiun Lebak Bulus Grab")
        self.DIRECTION_B_NAME: str = os.getenv("DIRECTION_B_NAME", "Stasiun Bundaran HI Bank DKI")

        # Timezone used to decide which departures are still upcoming ("" = server local time)
        self.TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Jakarta")

        self.API_KEY: Optional[str] = os.getenv("API_KEY")

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_TO_CONSOLE: bool = _bool_env("LOG_TO_CONSOLE", True)
        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s | %(levelname)s | %(name)s | %(message)s")


settings = Settings()
