# SPDX-License-Identifier: MIT

from typing import Callable, Iterable, Optional, TypedDict

import pendulum
import structlog

from reti.errors import EmptyLineError, LineSkipped, ParseError
from reti.model.day import Day
from reti.model.part import Part
from reti.model.store import Store
from reti.parser import LineParser, ParseMode
from reti.service.arithmetic import part_factor
from reti.service.store import add_day, add_day_force
from reti.time import time_to_str

log = structlog.get_logger(__name__)


class ImportResult(TypedDict):
    changed: int  # days that gained at least one part
    unchanged: int  # parsed days whose parts all clashed
    skipped: int  # comment-only and empty lines
    failed: int  # lines that could not be parsed


def import_lines(
    store: Store,
    lines: Iterable[str],
    today: Optional[pendulum.Date] = None,
    mode: ParseMode = ParseMode.TOLERANT,
) -> ImportResult:
    """
    Merge legacy lines into the store.

    A bad line is reported and skipped, it never aborts the import.
    """
    return _apply_lines(store, lines, add_day, today, mode)


def edit_lines(
    store: Store,
    lines: Iterable[str],
    today: Optional[pendulum.Date] = None,
    mode: ParseMode = ParseMode.TOLERANT,
) -> ImportResult:
    """Like import_lines, but every parsed day replaces the recorded one."""
    return _apply_lines(store, lines, add_day_force, today, mode)


def _apply_lines(
    store: Store,
    lines: Iterable[str],
    apply: Callable[[Store, Day], bool],
    today: Optional[pendulum.Date],
    mode: ParseMode,
) -> ImportResult:
    parser = LineParser(mode, today)
    result: ImportResult = {"changed": 0, "unchanged": 0, "skipped": 0, "failed": 0}

    for number, line in enumerate(lines, start=1):
        try:
            day = parser.parse_line(line)
        except (LineSkipped, EmptyLineError):
            result["skipped"] += 1
            continue
        except ParseError as e:
            log.warning("line_skipped", line_number=number, line=line.rstrip(), error=str(e))
            result["failed"] += 1
            continue

        if apply(store, day):
            result["changed"] += 1
        else:
            result["unchanged"] += 1

    return result


def part_to_legacy(part: Part) -> str:
    """Render a part, an open part as `HH:MM-` which needs a stop to parse."""
    start = time_to_str(part["start"])
    if part["stop"] is None:
        return f"{start}-"
    return f"{start}-{time_to_str(part['stop'])}-{part_factor(part)}"


def day_to_legacy(day: Day) -> str:
    """Render a day as one legacy line, parts ordered by start time."""
    parts = sorted(day["parts"], key=lambda part: part["start"])
    line = f"{day['date'].format('YYYY-MM-DD')}   " + "  ".join(
        part_to_legacy(part) for part in parts
    )
    if day["comment"] is not None:
        line += f"   # {day['comment']}"
    return line


def has_open_part(day: Day) -> bool:
    return any(part["stop"] is None for part in day["parts"])
