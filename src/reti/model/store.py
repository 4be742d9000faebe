# SPDX-License-Identifier: MIT

from typing import TypedDict

from reti.model.year import Year


class Store(TypedDict):
    fee_per_hour: float
    years: list[Year]
