# SPDX-License-Identifier: MIT

from typing import TypedDict

from reti.model.day import Day


class Week(TypedDict):
    """Snapshot of the days of one ISO week within a year, see Month."""

    year: int
    week: int
    days: list[Day]
