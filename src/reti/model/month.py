# SPDX-License-Identifier: MIT

from typing import TypedDict

from reti.model.day import Day


class Month(TypedDict):
    """
    Snapshot of the days of one calendar month.

    The days are the store's own records, collected into a fresh list
    when the view is built. Rebuild the view after changing the store.
    """

    year: int
    month: int
    days: list[Day]
