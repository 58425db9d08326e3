from __future__ import annotations

from datetime import datetime, time

from ..core.constants import TIME_OF_DAY_FORMAT


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM:SS string into time."""
    return datetime.strptime(value, TIME_OF_DAY_FORMAT).time()


def format_time_of_day(value: time) -> str:
    return value.strftime(TIME_OF_DAY_FORMAT)


def time_of_day(moment: datetime) -> time:
    """Wall-clock part of a timestamp at seconds resolution."""
    return moment.time().replace(microsecond=0)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
