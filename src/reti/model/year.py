# SPDX-License-Identifier: MIT

from typing import TypedDict

from reti.model.day import Day


class Year(TypedDict):
    year: int
    days: list[Day]  # at most one day per (month, day)
