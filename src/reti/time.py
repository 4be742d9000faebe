# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def today() -> pendulum.Date:
    return pendulum.today().date()


def time_to_str(time: pendulum.Time) -> str:
    return time.strftime("%H:%M")


def time_to_str_optional(time: Optional[pendulum.Time]) -> Optional[str]:
    if time is None:
        return None
    return time_to_str(time)


def time_from_str(time: str) -> pendulum.Time:
    """Parse a snapshot time in 'HH:MM' format."""
    hours, minutes = map(int, time.split(":"))
    return pendulum.time(hours, minutes)


def time_from_str_optional(time: Optional[str]) -> Optional[pendulum.Time]:
    if time is None:
        return None
    return time_from_str(time)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.isoformat()


def date_from_iso_str(date: str) -> pendulum.Date:
    """Parse a date string in 'YYYY-MM-DD' format to a pendulum.Date."""
    parsed = pendulum.parse(date, exact=True)
    if isinstance(parsed, pendulum.DateTime) or not isinstance(parsed, pendulum.Date):
        raise ValueError(f"Not a calendar date: {date!r}")
    return cast(pendulum.Date, parsed)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def minutes_of_day(time: pendulum.Time) -> int:
    return time.hour * 60 + time.minute


def duration_from_minutes(minutes: int) -> pendulum.Duration:
    return pendulum.duration(minutes=minutes)


def duration_to_hours(duration: pendulum.Duration) -> float:
    return duration.in_minutes() / 60.0
