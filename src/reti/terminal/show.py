# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from reti import time
from reti.repository.store import STORE_REPO
from reti.terminal.common import console, ensure_store_loaded
from reti.terminal.custom_typer import AliasedTyperGroup
from reti.view import report
from reti.view import state as view_state

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.callback()
def show_callback(
    days: Annotated[
        bool, typer.Option("--days", "-d", help="Show all days")
    ] = False,
    parts: Annotated[
        bool, typer.Option("--parts", "-p", help="Show all parts of a day")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show earnings and worked time per factor"),
    ] = False,
) -> None:
    """Show recorded times."""
    view_state.set_show_days(days)
    view_state.set_show_parts(parts)
    view_state.set_verbose(verbose)


@app.command("year, y")
def year(
    years: Annotated[
        Optional[list[int]], typer.Argument(help="years to show (default: current)")
    ] = None,
) -> None:
    ensure_store_loaded()
    if not years:
        years = [time.today().year]

    fee = STORE_REPO.get_fee()
    report.fee_view(fee)
    for number in years:
        found = STORE_REPO.get_year(number)
        if found is None:
            console.print(f"[yellow]Year {number} not available![/yellow]")
            continue
        report.year_view(found, fee)


@app.command("month, m")
def month(
    months: Annotated[
        Optional[list[int]], typer.Argument(help="months to show (default: current)")
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="default: current")
    ] = None,
) -> None:
    ensure_store_loaded()
    today = time.today()
    if year is None:
        year = today.year
    if not months:
        months = [today.month]

    fee = STORE_REPO.get_fee()
    report.fee_view(fee)
    for number in months:
        found = STORE_REPO.get_month(year, number)
        if found is None:
            console.print(
                f"[yellow]Month {number} not available for year {year}![/yellow]"
            )
            continue
        report.month_view(found, fee)


@app.command("week, w")
def week(
    weeks: Annotated[
        Optional[list[int]],
        typer.Argument(help="ISO weeks to show (default: current)"),
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="default: current")
    ] = None,
) -> None:
    ensure_store_loaded()
    today = time.today()
    if year is None:
        year = today.year
    if not weeks:
        weeks = [today.isocalendar()[1]]

    fee = STORE_REPO.get_fee()
    report.fee_view(fee)
    for number in weeks:
        found = STORE_REPO.get_week(year, number)
        if found is None:
            console.print(
                f"[yellow]Week {number} not available for year {year}![/yellow]"
            )
            continue
        report.week_view(found, fee)


@app.command("day, d")
def day(
    days: Annotated[
        Optional[list[int]], typer.Argument(help="days to show (default: today)")
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="default: current")
    ] = None,
    month: Annotated[
        Optional[int], typer.Option("--month", "-m", help="default: current")
    ] = None,
) -> None:
    ensure_store_loaded()
    today = time.today()
    if year is None:
        year = today.year
    if month is None:
        month = today.month
    if not days:
        days = [today.day]

    found_days = []
    for number in days:
        found = STORE_REPO.get_day(year, month, number)
        if found is None:
            console.print(
                f"[yellow]Day {number} not available for month {month} "
                f"in year {year}![/yellow]"
            )
            continue
        found_days.append(found)

    if found_days:
        report.days_view(found_days, STORE_REPO.get_fee())
