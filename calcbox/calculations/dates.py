"""
Date and Time Arithmetic

Calendar-correct day counts, interval addition and ages built on
dateutil's relativedelta, plus formatting one instant across time zones.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Sequence

from dateutil import tz
from dateutil.relativedelta import relativedelta

from calcbox.calculations.errors import InvalidInput, OutOfRange, UnknownUnit


@dataclass(frozen=True)
class Age:
    years: int
    months: int
    days: int
    total_days: int


@dataclass(frozen=True)
class ZoneTime:
    zone: str
    local_time: datetime
    utc_offset: str
    abbreviation: str


def _require_date(value, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidInput(f"{name} must be a date, got {value!r}")
    return value


def days_between(start: date, end: date) -> int:
    """Signed number of days from ``start`` to ``end``."""
    return (_require_date(end, "end") - _require_date(start, "start")).days


def add_to_date(
    start: date,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
) -> date:
    """
    Add (or subtract, with negative values) a calendar interval.

    Month and year steps clamp to the last valid day, so Jan 31 + 1 month
    is Feb 29 in a leap year and Feb 28 otherwise.
    """
    start = _require_date(start, "start")
    for name, value in (("years", years), ("months", months), ("weeks", weeks), ("days", days)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"{name} must be a whole number, got {value!r}")
    try:
        return start + relativedelta(years=years, months=months, weeks=weeks, days=days)
    except (OverflowError, ValueError) as e:
        raise OutOfRange(f"resulting date is out of range: {e}") from None


def calculate_age(birth_date: date, on_date: date) -> Age:
    """Age in whole years, months and days on ``on_date``."""
    birth_date = _require_date(birth_date, "birth_date")
    on_date = _require_date(on_date, "on_date")
    if on_date < birth_date:
        raise InvalidInput("on_date must not be before birth_date")

    delta = relativedelta(on_date, birth_date)
    return Age(
        years=delta.years,
        months=delta.months,
        days=delta.days,
        total_days=(on_date - birth_date).days,
    )


def _format_offset(local_time: datetime) -> str:
    offset = local_time.utcoffset()
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def convert_time_zones(instant: datetime, zones: Sequence[str]) -> List[ZoneTime]:
    """
    Show one instant as wall-clock time in several zones.

    Args:
        instant: Timezone-aware datetime
        zones: IANA zone names, e.g. "America/New_York"

    Returns:
        One ZoneTime per requested zone, in request order

    Raises:
        InvalidInput: If ``instant`` is naive
        UnknownUnit: If a zone name cannot be resolved
    """
    if not isinstance(instant, datetime) or instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidInput("instant must be a timezone-aware datetime")

    results = []
    for name in zones:
        zone = tz.gettz(name) if name else None
        if zone is None:
            raise UnknownUnit(f"unknown time zone: {name}")
        local_time = instant.astimezone(zone)
        results.append(
            ZoneTime(
                zone=name,
                local_time=local_time,
                utc_offset=_format_offset(local_time),
                abbreviation=local_time.tzname() or "",
            )
        )
    return results
