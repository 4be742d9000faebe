# SPDX-License-Identifier: MIT

import structlog

from reti.model.day import Day
from reti.model.part import Part
from reti.time import time_to_str_optional

log = structlog.get_logger(__name__)


def parts_intersect(existing: Part, candidate: Part) -> bool:
    # An open part clashes with every other part
    if existing["stop"] is None or candidate["stop"] is None:
        return True

    if candidate["start"] > existing["start"]:
        return existing["stop"] > candidate["start"]
    return candidate["stop"] > existing["start"]


def does_intersect(day: Day, part: Part) -> bool:
    """
    Check whether a part overlaps any part already recorded for the day.

    Intervals are half open, so a part ending at 08:00 does not clash
    with one starting at 08:00.
    """
    return any(parts_intersect(existing, part) for existing in day["parts"])


def merge_day(existing: Day, incoming: Day) -> bool:
    """
    Add the parts of `incoming` to `existing`, skipping clashing parts.

    The incoming comment is only taken over when the existing day has
    none. Returns True if at least one part was added.
    """
    if len(incoming["parts"]) == 0:
        log.warning("merge_rejected", reason="no parts", date=str(incoming["date"]))
        return False

    if existing["date"] != incoming["date"]:
        log.warning(
            "merge_rejected",
            reason="different dates",
            existing=str(existing["date"]),
            incoming=str(incoming["date"]),
        )
        return False

    added = 0
    for part in incoming["parts"]:
        if does_intersect(existing, part):
            log.warning(
                "part_clash",
                date=str(existing["date"]),
                start=time_to_str_optional(part["start"]),
                stop=time_to_str_optional(part["stop"]),
            )
            continue
        existing["parts"].append(part)
        added += 1

    if existing["comment"] is None and incoming["comment"] is not None:
        existing["comment"] = incoming["comment"]

    return added > 0


def clear_day(day: Day) -> None:
    day["parts"].clear()
    day["comment"] = None
