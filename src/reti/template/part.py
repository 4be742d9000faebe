# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from reti.model.part import Part


def get_part_template(
    start: pendulum.Time,
    stop: Optional[pendulum.Time] = None,
    factor: Optional[float] = None,
) -> Part:
    return {
        "start": start,
        "stop": stop,
        "factor": factor,
    }
