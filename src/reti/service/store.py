# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import structlog

from reti.model.day import Day
from reti.model.month import Month
from reti.model.part import Part
from reti.model.store import Store
from reti.model.week import Week
from reti.model.year import Year
from reti.service.merge import clear_day, merge_day
from reti.template.day import get_day_template
from reti.template.year import get_year_template
from reti.time import time_to_str

log = structlog.get_logger(__name__)


def get_year(store: Store, year: int) -> Optional[Year]:
    for candidate in store["years"]:
        if candidate["year"] == year:
            return candidate
    return None


def get_or_create_year(store: Store, year: int) -> Year:
    existing = get_year(store, year)
    if existing is not None:
        return existing
    new_year = get_year_template(year)
    store["years"].append(new_year)
    return new_year


def get_year_day(year: Year, month: int, day: int) -> Optional[Day]:
    for candidate in year["days"]:
        if candidate["date"].month == month and candidate["date"].day == day:
            return candidate
    return None


def _find_day(store: Store, date: pendulum.Date) -> Optional[Day]:
    year = get_year(store, date.year)
    if year is None:
        return None
    return get_year_day(year, date.month, date.day)


def get_month(store: Store, year: int, month: int) -> Optional[Month]:
    """Build a month view, None if the month has no recorded days."""
    found = get_year(store, year)
    if found is None:
        return None
    days = [day for day in found["days"] if day["date"].month == month]
    if len(days) == 0:
        return None
    return {
        "year": year,
        "month": month,
        "days": sorted(days, key=lambda day: day["date"]),
    }


def get_week(store: Store, year: int, week: int) -> Optional[Week]:
    """Build a view of the days of a year falling into ISO week `week`."""
    found = get_year(store, year)
    if found is None:
        return None
    days = [day for day in found["days"] if day["date"].isocalendar()[1] == week]
    if len(days) == 0:
        return None
    return {
        "year": year,
        "week": week,
        "days": sorted(days, key=lambda day: day["date"]),
    }


def get_day(store: Store, year: int, month: int, day: int) -> Optional[Day]:
    found = get_month(store, year, month)
    if found is None:
        return None
    for candidate in found["days"]:
        if candidate["date"].day == day:
            return candidate
    return None


def add_part(store: Store, date: pendulum.Date, part: Part) -> bool:
    if part["stop"] is not None and part["stop"] < part["start"]:
        log.warning(
            "part_rejected",
            reason="stop before start",
            start=time_to_str(part["start"]),
            stop=time_to_str(part["stop"]),
        )
        return False

    new_day = get_day_template(date, parts=[part])
    return add_day(store, new_day)


def _insert_day(store: Store, day: Day) -> bool:
    """Record a day for a new date, dropping parts that clash with each other."""
    new_day = get_day_template(day["date"])
    if not merge_day(new_day, day):
        return False
    get_or_create_year(store, day["date"].year)["days"].append(new_day)
    return True


def add_day(store: Store, day: Day) -> bool:
    """
    Insert a day, merging it into an already recorded day of that date.

    Returns True if the store changed.
    """
    existing = _find_day(store, day["date"])
    if existing is not None:
        return merge_day(existing, day)
    return _insert_day(store, day)


def add_day_force(store: Store, day: Day) -> bool:
    """Replace whatever is recorded for the day's date with `day`."""
    if len(day["parts"]) == 0:
        log.warning("day_rejected", reason="no parts", date=str(day["date"]))
        return False

    existing = _find_day(store, day["date"])
    if existing is not None:
        clear_day(existing)
        return merge_day(existing, day)
    return _insert_day(store, day)


def remove_day(store: Store, date: pendulum.Date) -> bool:
    year = get_year(store, date.year)
    if year is None:
        return False
    size = len(year["days"])
    year["days"] = [day for day in year["days"] if day["date"] != date]
    return size > len(year["days"])


def get_fee(store: Store) -> float:
    return store["fee_per_hour"]


def set_fee(store: Store, fee: float) -> None:
    if fee < 0:
        raise ValueError(f"Fee per hour cannot be negative, got {fee}")
    store["fee_per_hour"] = fee
