"""Timestamps as integer nanoseconds since the Unix epoch (UTC) and their conversions.

Local time zones follow fixed standard offsets with the United States
daylight saving rules (from 2007 on: second Sunday in March to first Sunday
in November; earlier: first Sunday in April to last Sunday in October).
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

NANOS_PER_SECOND = 1_000_000_000

_SECONDS_PER_HOUR = 3600
_SECONDS_PER_DAY = 86400
_EPOCH = datetime(1970, 1, 1)
_EPOCH_DATE = date(1970, 1, 1)
_SUNDAY = 6

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)
_SHORT_TIME_RE = re.compile(r"(\d{2}):(\d{2})", re.ASCII)


class Timezone(str, Enum):
    """Recognised time zone names."""

    UTC = "UTC"
    GMT = "GMT"
    EST = "EST"
    CST = "CST"
    MST = "MST"
    PST = "PST"
    NYC = "America/New_York"


_UTC_OFFSET_HOURS = {
    Timezone.UTC: None,
    Timezone.GMT: None,
    Timezone.EST: -5,
    Timezone.NYC: -5,
    Timezone.CST: -6,
    Timezone.MST: -7,
    Timezone.PST: -8,
}


@dataclass(frozen=True)
class ExchangeClose:
    """When an exchange closes, in its own time zone."""

    hour: int
    minute: int
    time_zone: str


NASDAQ_CLOSE = ExchangeClose(16, 0, Timezone.NYC.value)


def _to_datetime(seconds: int) -> datetime:
    return _EPOCH + timedelta(seconds=seconds)


def _day_seconds(day: date) -> int:
    return (day - _EPOCH_DATE).days * _SECONDS_PER_DAY


def _nth_sunday(year: int, month: int, n: int) -> date:
    first = date(year, month, 1)
    offset = (_SUNDAY - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def _last_sunday(year: int, month: int) -> date:
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() - _SUNDAY) % 7)


def _dst_dates(year: int) -> tuple[date, date]:
    if year >= 2007:
        return _nth_sunday(year, 3, 2), _nth_sunday(year, 11, 1)
    return _nth_sunday(year, 4, 1), _last_sunday(year, 10)


def _resolve(tz: str) -> Timezone:
    try:
        return Timezone(tz)
    except ValueError:
        raise ValueError(f"Unsupported timezone: {tz}") from None


def _local_to_utc(local_seconds: int, offset_hours: int) -> int:
    local = _to_datetime(local_seconds)
    start, end = _dst_dates(local.year)
    day = local.date()
    time_of_day = local_seconds % _SECONDS_PER_DAY
    if start < day < end:
        in_dst = True
    elif day == start:
        if time_of_day < 2 * _SECONDS_PER_HOUR:
            in_dst = False
        elif time_of_day < 3 * _SECONDS_PER_HOUR:
            raise ValueError(f"Local time {local} does not exist in the time zone")
        else:
            in_dst = True
    elif day == end:
        if time_of_day < _SECONDS_PER_HOUR:
            in_dst = True
        elif time_of_day < 2 * _SECONDS_PER_HOUR:
            raise ValueError(f"Local time {local} is ambiguous in the time zone")
        else:
            in_dst = False
    else:
        in_dst = False
    utc = local_seconds - offset_hours * _SECONDS_PER_HOUR
    return utc - _SECONDS_PER_HOUR if in_dst else utc


def _utc_to_local(utc_seconds: int, offset_hours: int) -> int:
    standard = utc_seconds + offset_hours * _SECONDS_PER_HOUR
    start, end = _dst_dates(_to_datetime(standard).year)
    dst_begin = _day_seconds(start) + 2 * _SECONDS_PER_HOUR
    dst_end = _day_seconds(end) + _SECONDS_PER_HOUR
    if dst_begin <= standard < dst_end:
        return standard + _SECONDS_PER_HOUR
    return standard


def serialize_timestamp(timestamp: int) -> str:
    """Format as 'YYYY-MM-DD HH:MM:SS.nnnnnnnnnZ' in UTC."""
    seconds, nanos = divmod(timestamp, NANOS_PER_SECOND)
    return f"{_to_datetime(seconds):%Y-%m-%d %H:%M:%S}.{nanos:09d}Z"


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse a 'yyyy-mm-dd' string into (year, month, day)."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Cannot convert '{text}' as yyyy-mm-dd date string")
    year, month, day = (int(group) for group in match.groups())
    return year, month, day


def parse_time(text: str) -> tuple[int, int, int]:
    """Parse an 'HH:MM:SS' or 'HH:MM' string into (hour, minute, second)."""
    match = _TIME_RE.fullmatch(text)
    if match is not None:
        hour, minute, second = (int(group) for group in match.groups())
        return hour, minute, second
    match = _SHORT_TIME_RE.fullmatch(text)
    if match is not None:
        hour, minute = (int(group) for group in match.groups())
        return hour, minute, 0
    raise ValueError(f"Cannot convert '{text}' as HH:MM:SS time string")


def make_timestamp_zulu(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """UTC timestamp for the given calendar fields; out-of-range days and times roll over."""
    seconds = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
    return seconds * NANOS_PER_SECOND


def make_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    tz: str = Timezone.NYC,
) -> int:
    """UTC timestamp for calendar fields given in the time zone tz."""
    zulu = make_timestamp_zulu(year, month, day, hour, minute, second)
    return convert_timestamp_to_zulu(zulu, tz)


def make_timestamp_from_strings(
    date_text: str, time_text: str, tz: str = Timezone.NYC
) -> int:
    """UTC timestamp from 'yyyy-mm-dd' and 'HH:MM[:SS]' strings in the time zone tz."""
    year, month, day = parse_date(date_text)
    hour, minute, second = parse_time(time_text)
    return make_timestamp(year, month, day, hour, minute, second, tz)


def make_timestamp_zulu_from_date(date_text: str) -> int:
    """UTC midnight of a 'yyyy-mm-dd' date."""
    year, month, day = parse_date(date_text)
    return make_timestamp_zulu(year, month, day, 0, 0, 0)


def convert_timestamp_to_zulu(timestamp: int, tz: str = Timezone.NYC) -> int:
    """Shift a timestamp holding local wall-clock time in tz to UTC.

    Outside UTC and GMT the result is truncated to whole seconds.
    """
    offset = _UTC_OFFSET_HOURS[_resolve(tz)]
    if offset is None:
        return timestamp
    seconds = timestamp // NANOS_PER_SECOND
    return _local_to_utc(seconds, offset) * NANOS_PER_SECOND


def convert_zulu_to_timestamp(timestamp: int, tz: str = Timezone.NYC) -> int:
    """Shift a UTC timestamp to local wall-clock time in tz.

    Outside UTC and GMT the result is truncated to whole seconds.
    """
    offset = _UTC_OFFSET_HOURS[_resolve(tz)]
    if offset is None:
        return timestamp
    seconds = timestamp // NANOS_PER_SECOND
    return _utc_to_local(seconds, offset) * NANOS_PER_SECOND


def timestamp_to_string_int_seconds(timestamp: int) -> str:
    """Format as 'YYYY-MM-DD HH:MM:SS' without fractional seconds."""
    return f"{_to_datetime(timestamp // NANOS_PER_SECOND):%Y-%m-%d %H:%M:%S}"


def format_request_time(timestamp: int) -> str:
    """Format as 'YYYY-MM-DDTHH:MM:SS.nnnnnnnnn' for data requests."""
    seconds, nanos = divmod(timestamp, NANOS_PER_SECOND)
    return f"{_to_datetime(seconds):%Y-%m-%dT%H:%M:%S}.{nanos:09d}"