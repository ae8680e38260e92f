import json
from datetime import datetime

import pytest

from app.core.errors import FetchError
from app.services.station_service import StationService

UPSTREAM_URL = "http://upstream.test/stasiuns"
DIR_A = "Stasiun Lebak Bulus Grab"
DIR_B = "Stasiun Bundaran HI Bank DKI"


class FakeFetcher:
    """Stands in for `Fetcher`: returns a canned payload or raises a canned error."""

    def __init__(self, payload=b"[]", error=None):
        if not isinstance(payload, bytes):
            payload = json.dumps(payload).encode("utf-8")
        self.payload = payload
        self.error = error
        self.urls = []

    async def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


def make_service(payload=b"[]", error=None, now=datetime(2024, 3, 1, 12, 0)):
    return StationService(
        fetcher=FakeFetcher(payload, error),
        stations_url=UPSTREAM_URL,
        schedules_url=UPSTREAM_URL,
        direction_a_name=DIR_A,
        direction_b_name=DIR_B,
        now=lambda: now,
    )


@pytest.fixture
def mrt_payload():
    """A trimmed copy of what the MRT site returns."""
    return [
        {
            "nid": "38",
            "title": "Lebak Bulus Grab",
            "urutan": "1",
            "jadwal_lb_biasa": "",
            "jadwal_hi_biasa": "05:00, 11:50, 12:10, 23:30",
        },
        {
            "nid": "41",
            "title": "Blok M BCA",
            "urutan": "8",
            "jadwal_lb_biasa": "05:20,12:05,22:40",
            "jadwal_hi_biasa": "05:25 ,12:00, 12:01",
        },
    ]


@pytest.fixture
def fetch_error():
    return FetchError("Upstream returned status 503", status=503)
