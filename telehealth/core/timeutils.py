"""Date and time-of-day helpers shared by the classifiers.

Dates and times arrive from the data sources either as native ``date``/``time``
objects or as strings. Strings are parsed strictly; anything unparsable raises
``MalformedTimeError`` instead of being guessed at.
"""

import re
from datetime import date, datetime, time, timedelta

from telehealth.core.errors import MalformedTimeError

TIME_OF_DAY_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})(?::(\d{2}))?$')


def parse_calendar_date(value: date | str, field: str = 'date') -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise MalformedTimeError(field, value)

    # ISO datetimes such as 2025-01-05T00:00:00.000Z carry the calendar date up front.
    date_part = value.strip().split('T', 1)[0].split(' ', 1)[0]
    try:
        return date.fromisoformat(date_part)
    except ValueError as exc:
        raise MalformedTimeError(field, value) from exc


def parse_time_of_day(value: time | str, field: str = 'time') -> time:
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise MalformedTimeError(field, value)

    match = TIME_OF_DAY_PATTERN.match(value.strip())
    if not match:
        raise MalformedTimeError(field, value)

    hours, minutes, seconds = match.groups()
    try:
        return time(int(hours), int(minutes), int(seconds or 0))
    except ValueError as exc:
        raise MalformedTimeError(field, value) from exc


def combine_date_time(day: date | str, time_of_day: time | str, field: str = 'time') -> datetime:
    return datetime.combine(parse_calendar_date(day), parse_time_of_day(time_of_day, field))


def is_same_calendar_day(day: date, instant: datetime) -> bool:
    return day == instant.date()


def interval_bounds(day: date | str, start: time | str, end: time | str) -> tuple[datetime, datetime]:
    """Return the start and end instants of a booked interval on ``day``."""
    return (
        combine_date_time(day, start, field='start_time'),
        combine_date_time(day, end, field='end_time'),
    )


def roll_past_midnight(end_instant: datetime, start_of_day: time, end_of_day: time) -> datetime:
    """Move ``end_instant`` to the next day when the interval wraps past midnight."""
    if end_of_day.hour < start_of_day.hour:
        return end_instant + timedelta(days=1)
    return end_instant
