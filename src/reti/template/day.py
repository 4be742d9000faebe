# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from reti.model.day import Day
from reti.model.part import Part


def get_day_template(
    date: pendulum.Date,
    parts: Optional[list[Part]] = None,
    comment: Optional[str] = None,
) -> Day:
    return {
        "date": date,
        "parts": parts if parts is not None else [],
        "comment": comment,
    }
