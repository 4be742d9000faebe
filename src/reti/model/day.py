# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from reti.model.part import Part


class Day(TypedDict):
    date: pendulum.Date
    parts: list[Part]  # order carries no meaning, parts never overlap
    comment: Optional[str]
