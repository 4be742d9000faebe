# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from reti import time
from reti.errors import ParseError
from reti.parser import LineParser
from reti.repository.store import STORE_REPO
from reti.template.part import get_part_template
from reti.terminal.common import console, ensure_store_loaded, get_parse_mode
from reti.terminal.custom_typer import AliasedTyperGroup
from reti.terminal.parse import (
    parse_date_param,
    parse_part_param,
    parse_time_param,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("part, p", no_args_is_help=True)
def part(
    start: Annotated[
        pendulum.Time,
        typer.Argument(parser=parse_time_param, help="valid inputs: HH:MM, HHMM, now"),
    ],
    stop: Annotated[
        Optional[pendulum.Time],
        typer.Argument(
            parser=parse_time_param,
            help="valid inputs: HH:MM, HHMM, now; leave out to record an open part",
        ),
    ] = None,
    factor: Annotated[
        Optional[float], typer.Option("--factor", "-x", min=0.0)
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date_param,
            help="valid inputs: [[YYYY-]MM-]DD, today, yesterday (default: today)",
        ),
    ] = None,
) -> None:
    """Add a single part to a day."""
    ensure_store_loaded()
    if date is None:
        date = time.today()

    if not STORE_REPO.add_part(date, get_part_template(start, stop, factor)):
        console.print(f"[red]Part was not added to {date}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Added part to {date}[/green]")


@app.command("parts, ps", no_args_is_help=True)
def parts(
    parts: Annotated[
        list[str], typer.Argument(help="format: HH:MM-HH:MM[-FACTOR], space separated")
    ],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date_param,
            help="valid inputs: [[YYYY-]MM-]DD, today, yesterday (default: today)",
        ),
    ] = None,
) -> None:
    """Add several parts to a day, parts clashing with recorded ones are skipped."""
    ensure_store_loaded()
    if date is None:
        date = time.today()
    mode = get_parse_mode()

    parsed = [parse_part_param(part, mode) for part in parts]
    added = sum(1 for part in parsed if STORE_REPO.add_part(date, part))
    console.print(f"Added {added} of {len(parsed)} part(s) to {date}")
    if added == 0:
        raise typer.Exit(1)


@app.command("parse, pa", no_args_is_help=True)
def parse(
    data: Annotated[
        list[str], typer.Argument(help="a legacy line: [date] part [part ...] [# comment]")
    ],
) -> None:
    """Add a day written in the legacy line format."""
    ensure_store_loaded()
    parser = LineParser(get_parse_mode())
    try:
        day = parser.parse_line(" ".join(data))
    except ParseError as e:
        console.print(f"[red]Unable to parse data: {e}[/red]")
        raise typer.Exit(1)

    if not STORE_REPO.add_day(day):
        console.print(f"[red]Nothing was added to {day['date']}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Added {day['date']}[/green]")
