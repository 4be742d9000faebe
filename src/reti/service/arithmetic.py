# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from reti.model.day import Day
from reti.model.part import Part
from reti.time import duration_from_minutes, minutes_of_day

DEFAULT_FACTOR = 1.0


def part_factor(part: Part) -> float:
    """The pay rate multiplier of a part. An absent factor counts as 1.0."""
    factor = part["factor"]
    if factor is None:
        return DEFAULT_FACTOR
    return factor


def part_worked_minutes(part: Part) -> Optional[int]:
    if part["stop"] is None:
        return None
    return minutes_of_day(part["stop"]) - minutes_of_day(part["start"])


def part_worked(part: Part) -> Optional[pendulum.Duration]:
    """
    Worked time of a single part.

    Returns None for an open part, it contributes nothing to any total
    until it gets a stop time.
    """
    minutes = part_worked_minutes(part)
    if minutes is None:
        return None
    return duration_from_minutes(minutes)


def part_earned(part: Part, fee: float) -> float:
    minutes = part_worked_minutes(part)
    if minutes is None:
        return 0.0
    return (minutes / 60.0) * part_factor(part) * fee


def day_worked_minutes(day: Day) -> int:
    total = 0
    for part in day["parts"]:
        minutes = part_worked_minutes(part)
        if minutes is None:
            continue
        total += minutes
    return total


def day_worked(day: Day) -> pendulum.Duration:
    return duration_from_minutes(day_worked_minutes(day))


def day_earned(day: Day, fee: float) -> float:
    return sum((part_earned(part, fee) for part in day["parts"]), 0.0)


def worked(days: Iterable[Day]) -> pendulum.Duration:
    """Worked time summed over days, e.g. the days of a month, week or year."""
    return duration_from_minutes(sum(day_worked_minutes(day) for day in days))


def earned(days: Iterable[Day], fee: float) -> float:
    return sum((day_earned(day, fee) for day in days), 0.0)
