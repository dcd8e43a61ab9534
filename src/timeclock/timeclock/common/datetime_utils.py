from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..core.constants import QUARTER_HOUR_MINUTES
from ..core.enums import Weekday

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_date_value(value: str) -> date:
    """Parse YYYY-MM-DD or an ISO date-time; any time-of-day part is dropped."""
    value = value.strip()
    if len(value) == 10:
        return parse_iso_date(value)
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def parse_time_value(value: str) -> time:
    value = value.strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    return time.fromisoformat(value)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def start_of_week(value: DateLike, start: Weekday = Weekday.SUNDAY) -> date:
    """Most recent ``start`` weekday on or before ``value``, time-of-day stripped."""
    if isinstance(value, datetime):
        value = value.date()
    diff = (7 + (Weekday.of(value) - start)) % 7
    return value - timedelta(days=diff)


def default_week(today: date, start: Weekday = Weekday.SUNDAY) -> date:
    """Week shown when none is requested.

    Monday and Tuesday still default to the previous week so people can finish
    logging it.
    """
    if Weekday.of(today) in (Weekday.MONDAY, Weekday.TUESDAY):
        return start_of_week(today, start) - timedelta(days=7)
    return start_of_week(today, start)


def day_name(value: date) -> str:
    return value.strftime("%A")


def _seconds(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def hours_between(start: time, end: time) -> float:
    """Signed end - start in hours. No midnight handling: end < start is negative."""
    return (_seconds(end) - _seconds(start)) / 3600.0


def span_across_midnight(start: Optional[time], end: Optional[time]) -> timedelta:
    """end - start where an end before the start means the next day."""
    start_s = _seconds(start) if start else 0
    end_s = _seconds(end) if end else 0
    if end_s < start_s:
        end_s += 86400
    return timedelta(seconds=end_s - start_s)


def round_to_quarter_hours(span: timedelta) -> float:
    """Round a span to the nearest quarter hour, in hours (halves go to even)."""
    minutes = span.total_seconds() / 60
    return round(minutes / QUARTER_HOUR_MINUTES) * QUARTER_HOUR_MINUTES / 60
