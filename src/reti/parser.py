# SPDX-License-Identifier: MIT

"""
Parser for the legacy line format, one day per line:

    [date] part [part ...] [# comment]

where a date is `y-m-d`, `m-d` or `d` (missing fields are taken from
today), a part is `start-stop[-factor]` and times are written `HH:MM`
or `HHMM`. Everything after the first `#` is the comment.

    2017-03-20   08:00-11:30-2  12:30-17:59   # release day
    05-23 1000-1130

Two modes share the same building blocks. The tolerant mode falls back
to today when the line does not start with a date and skips tokens it
does not understand, parts that stop before they start included. The strict mode insists on a date followed by
nothing but parts.
"""

import re
from enum import StrEnum
from typing import Optional

import pendulum
import structlog

from reti import time
from reti.errors import (
    DateFormatError,
    EmptyLineError,
    FactorFormatError,
    LineSkipped,
    MalformedLineError,
    ParseError,
    PartOrderError,
    TimeFormatError,
)
from reti.model.day import Day
from reti.model.part import Part
from reti.template.day import get_day_template
from reti.template.part import get_part_template

log = structlog.get_logger(__name__)

_TIME_COLON_P = re.compile(r"^(\d{1,2}):(\d{2})$")
_TIME_COMPACT_P = re.compile(r"^(\d{2})(\d{2})$")
_FACTOR_P = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_NUMBER_P = re.compile(r"^\d+$")


class ParseMode(StrEnum):
    TOLERANT = "tolerant"
    STRICT = "strict"


def parse_time(token: str) -> pendulum.Time:
    """Parse a time of day written as `HH:MM` or `HHMM`."""
    for pattern in (_TIME_COLON_P, _TIME_COMPACT_P):
        match = pattern.match(token)
        if match is None:
            continue
        hour = int(match.group(1))
        minute = int(match.group(2))
        if hour > 23:
            raise TimeFormatError(token, f"Hour must be between 0 and 23, got {hour}")
        if minute > 59:
            raise TimeFormatError(
                token, f"Minute must be between 0 and 59, got {minute}"
            )
        return pendulum.time(hour, minute)
    raise TimeFormatError(token, "Time must be in HH:MM or HHMM format")


def parse_factor(token: str) -> float:
    if not _FACTOR_P.match(token):
        raise FactorFormatError(token, "Factor must be an unsigned decimal")
    return float(token)


def parse_date(token: str, today: Optional[pendulum.Date] = None) -> pendulum.Date:
    """
    Parse `y-m-d`, `m-d` or `d`.

    Missing fields are filled in from `today`, which defaults to the
    current date.
    """
    if today is None:
        today = time.today()

    fields = token.strip().split("-")
    if len(fields) > 3 or not all(_NUMBER_P.match(field) for field in fields):
        raise DateFormatError(token, "Date must be [[YYYY-]MM-]DD")

    numbers = [int(field) for field in fields]
    if len(numbers) == 3:
        year, month, day = numbers
    elif len(numbers) == 2:
        year = today.year
        month, day = numbers
    else:
        year = today.year
        month = today.month
        day = numbers[0]

    try:
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise DateFormatError(token, str(e)) from e


def parse_part(token: str, mode: ParseMode = ParseMode.TOLERANT) -> Part:
    """
    Parse `start-stop[-factor]`.

    An omitted factor stays None. A malformed factor is an error in
    strict mode and is dropped in tolerant mode.
    """
    fields = token.split("-")
    if len(fields) < 2 or len(fields) > 3:
        raise MalformedLineError(token, "Part must be START-STOP[-FACTOR]")

    start = parse_time(fields[0])
    stop = parse_time(fields[1])
    if stop < start:
        raise PartOrderError(token, "Stop is earlier than start")

    factor = None
    if len(fields) == 3:
        try:
            factor = parse_factor(fields[2])
        except FactorFormatError:
            if mode is ParseMode.STRICT:
                raise
            log.debug("factor_ignored", token=token)

    return get_part_template(start, stop, factor)


class LineParser:
    """Parses legacy lines into days, in either tolerant or strict mode."""

    def __init__(
        self,
        mode: ParseMode = ParseMode.TOLERANT,
        today: Optional[pendulum.Date] = None,
    ) -> None:
        self._mode = mode
        self._today = today

    @property
    def mode(self) -> ParseMode:
        return self._mode

    @property
    def today(self) -> pendulum.Date:
        if self._today is None:
            return time.today()
        return self._today

    def parse_line(self, line: str) -> Day:
        """
        Parse one line into a day.

        Raises LineSkipped for a comment-only line, EmptyLineError when
        nothing is left once the comment is removed, and another
        ParseError for anything else that does not parse.
        """
        line = line.strip()
        if line.startswith("#"):
            raise LineSkipped(line)

        data, separator, comment_text = line.partition("#")
        comment = comment_text.strip() if separator else None
        if comment == "":
            comment = None

        tokens = data.split()
        if len(tokens) == 0:
            raise EmptyLineError(line)

        if self._mode is ParseMode.STRICT:
            date, parts = self.__parse_strict(tokens, line)
        else:
            date, parts = self.__parse_tolerant(tokens, line)

        return get_day_template(date, parts=parts, comment=comment)

    def __parse_tolerant(
        self, tokens: list[str], line: str
    ) -> tuple[pendulum.Date, list[Part]]:
        today = self.today
        try:
            date = parse_date(tokens[0], today)
            remaining = tokens[1:]
        except DateFormatError:
            try:
                parse_part(tokens[0], self._mode)
            except PartOrderError:
                # A part all the same, the loop below drops it
                pass
            except ParseError as e:
                raise MalformedLineError(
                    line, "Line must start with a date or a part"
                ) from e
            date = today
            remaining = tokens

        parts: list[Part] = []
        for token in remaining:
            try:
                parts.append(parse_part(token, self._mode))
            except PartOrderError:
                log.warning("part_rejected", reason="stop before start", token=token)
                continue
            except ParseError:
                log.debug("token_skipped", token=token)
                continue
        return date, parts

    def __parse_strict(
        self, tokens: list[str], line: str
    ) -> tuple[pendulum.Date, list[Part]]:
        date = parse_date(tokens[0], self.today)
        if len(tokens) < 2:
            raise MalformedLineError(line, "Date must be followed by parts")
        parts = [parse_part(token, self._mode) for token in tokens[1:]]
        return date, parts


def parse_line(
    line: str,
    today: Optional[pendulum.Date] = None,
    mode: ParseMode = ParseMode.TOLERANT,
) -> Day:
    return LineParser(mode, today).parse_line(line)
