# SPDX-License-Identifier: MIT

import os
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import pendulum
import typer

from reti import parser, time
from reti.errors import ParseError
from reti.model.part import Part


def parse_date_param(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a `[[YYYY-]MM-]DD` command line date.

    `today`/`t` and `yesterday`/`y` are accepted as well.
    """
    if date_param is None:
        return None
    if date_param in ("today", "t"):
        return time.today()
    if date_param in ("yesterday", "y"):
        return time.today().subtract(days=1)
    try:
        return parser.parse_date(date_param, time.today())
    except ParseError as e:
        raise typer.BadParameter(str(e))


def parse_time_param(time_param: str) -> pendulum.Time:
    """Parse `HH:MM`, `HHMM` or `now`, the latter rounded down to the minute."""
    if time_param in ("now", "n"):
        now = pendulum.now()
        return pendulum.time(now.hour, now.minute)
    try:
        return parser.parse_time(time_param)
    except ParseError as e:
        raise typer.BadParameter(str(e))


def parse_part_param(part_param: str, mode: parser.ParseMode) -> Part:
    try:
        return parser.parse_part(part_param, mode)
    except ParseError as e:
        raise typer.BadParameter(str(e))


def parse_date_list(date_params: list[str]) -> list[pendulum.Date]:
    dates = []
    for date_param in date_params:
        date = parse_date_param(date_param)
        if date is not None:
            dates.append(date)
    return dates


def open_editor_for_text(
    initial_text: Optional[str] = None, editor: Optional[str] = None
) -> Optional[str]:
    """
    Open the user's preferred editor on a temporary legacy file.
    Returns the edited text, or None if empty.
    """
    # Configured editor first, then environment, default to vim
    if editor is None:
        editor = os.environ.get("EDITOR", "vim")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        # Editors may replace the file rather than write into it
        text = Path(tf.name).read_text()
        if not text.strip():
            return None
        return text
