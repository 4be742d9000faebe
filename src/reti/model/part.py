# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Part(TypedDict):
    start: pendulum.Time
    stop: Optional[pendulum.Time]  # None while the part is still open
    factor: Optional[float]  # None is equivalent to 1.0
