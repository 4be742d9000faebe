# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum

from reti.model.day import Day
from reti.model.month import Month
from reti.model.week import Week
from reti.model.year import Year
from reti.service.arithmetic import part_factor, part_worked_minutes, worked
from reti.time import duration_from_minutes


def months_of_year(year: Year) -> list[Month]:
    """Group the days of a year by calendar month, ordered by month."""
    buckets: dict[int, list[Day]] = {}
    for day in year["days"]:
        buckets.setdefault(day["date"].month, []).append(day)

    return [
        {
            "year": year["year"],
            "month": month,
            "days": sorted(buckets[month], key=lambda day: day["date"]),
        }
        for month in sorted(buckets)
    ]


def weeks_of_year(year: Year) -> list[Week]:
    """Group the days of a year by ISO week number, ordered by week."""
    buckets: dict[int, list[Day]] = {}
    for day in year["days"]:
        buckets.setdefault(day["date"].isocalendar()[1], []).append(day)

    return [
        {
            "year": year["year"],
            "week": week,
            "days": sorted(buckets[week], key=lambda day: day["date"]),
        }
        for week in sorted(buckets)
    ]


def worked_by_factor(days: Iterable[Day]) -> dict[float, pendulum.Duration]:
    """
    Worked time bucketed by pay rate factor.

    Factors are rounded to one decimal, so 1.04 and 1.0 share a bucket.
    Open parts are left out.
    """
    minutes_by_factor: dict[float, int] = {}
    for day in days:
        for part in day["parts"]:
            minutes = part_worked_minutes(part)
            if minutes is None:
                continue
            factor = round(part_factor(part), 1)
            minutes_by_factor[factor] = minutes_by_factor.get(factor, 0) + minutes

    return {
        factor: duration_from_minutes(minutes_by_factor[factor])
        for factor in sorted(minutes_by_factor)
    }


def average_worked_per_day(days: list[Day]) -> pendulum.Duration:
    if len(days) == 0:
        return duration_from_minutes(0)
    return duration_from_minutes(worked(days).in_minutes() // len(days))


def month_name(month: Month) -> str:
    return pendulum.date(month["year"], month["month"], 1).format("MMMM")
