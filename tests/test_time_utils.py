from datetime import datetime, time

import pytest

from app.core.errors import FormatError
from app.utils.time_utils import current_hhmm, format_hhmm, parse_hhmm, parse_times


def test_parse_times_empty_string():
    assert parse_times("") == []


def test_parse_times_trims_and_skips_blank_segments():
    assert parse_times(" 09:00 , 10:15,,11:00") == [time(9, 0), time(10, 15), time(11, 0)]


def test_parse_times_keeps_upstream_order():
    assert parse_times("23:00,05:00,12:30") == [time(23, 0), time(5, 0), time(12, 30)]


def test_parse_times_only_separators():
    assert parse_times(" , ,") == []


@pytest.mark.parametrize("raw", ["9:00", "25:61", "24:00", "12:60", "12.30", "abc", "12:3", "012:30"])
def test_parse_times_rejects_bad_tokens(raw):
    with pytest.raises(FormatError) as exc:
        parse_times(raw)
    assert exc.value.message == "Invalid time format " + raw


def test_parse_times_is_all_or_nothing():
    with pytest.raises(FormatError) as exc:
        parse_times("08:00, 8:30 ,09:00")
    # message carries the trimmed token
    assert exc.value.message == "Invalid time format 8:30"


@pytest.mark.parametrize("token", ["00:00", "05:07", "12:00", "19:45", "23:59"])
def test_hhmm_round_trip(token):
    assert format_hhmm(parse_hhmm(token)) == token


def test_current_hhmm_drops_seconds():
    assert current_hhmm(datetime(2024, 3, 1, 7, 5, 59)) == "07:05"
