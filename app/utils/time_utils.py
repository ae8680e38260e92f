import re
from datetime import datetime, time
from typing import List

from app.core.errors import FormatError

# 24h clock, zero padded: 00:00 .. 23:59
_HHMM_RE = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


def parse_hhmm(text: str) -> time:
    """Parse a single HH:MM token, raising FormatError if it is not one."""
    m = _HHMM_RE.fullmatch(text)
    if not m:
        raise FormatError("Invalid time format " + text)
    return time(int(m.group(1)), int(m.group(2)))


def format_hhmm(t: time) -> str:
    return t.strftime("%H:%M")


def current_hhmm(now: datetime) -> str:
    return format_hhmm(now.time())


def parse_times(raw: str) -> List[time]:
    """Parse a comma separated list of departure times.

    Blank segments are skipped; the first invalid segment aborts the whole
    list with `FormatError`. Order is preserved.
    """
    out: List[time] = []
    for segment in raw.split(","):
        segment = segment.strip()
        if not segment:
            continue
        out.append(parse_hhmm(segment))
    return out
