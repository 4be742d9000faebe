# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from reti.model.day import Day
from reti.model.month import Month
from reti.model.part import Part
from reti.model.week import Week
from reti.model.year import Year
from reti.service.aggregate import (
    average_worked_per_day,
    month_name,
    months_of_year,
    worked_by_factor,
)
from reti.service.arithmetic import day_earned, day_worked, earned, part_factor, worked
from reti.time import date_to_display_str, duration_to_hours, time_to_str
from reti.view import state


def render_part(part: Part) -> str:
    stop = time_to_str(part["stop"]) if part["stop"] is not None else "..."
    return f"{time_to_str(part['start'])}-{stop} f: {part_factor(part):.1f}"


def days_table(days: list[Day], fee: float) -> Table:
    verbose = state.get_verbose()

    table = Table(box=box.SIMPLE)
    table.add_column("date")
    table.add_column("worked", justify="right")
    if state.get_show_parts():
        table.add_column("parts")
    if verbose:
        table.add_column("#", justify="right")
        table.add_column("earned", justify="right")
    table.add_column("comment")

    for day in sorted(days, key=lambda day: day["date"]):
        row = [
            date_to_display_str(day["date"]) if verbose else str(day["date"]),
            f"{duration_to_hours(day_worked(day)):.2f}h",
        ]
        if state.get_show_parts():
            parts = sorted(day["parts"], key=lambda part: part["start"])
            row.append(", ".join(render_part(part) for part in parts))
        if verbose:
            row.append(str(len(day["parts"])))
            row.append(f"{day_earned(day, fee):.2f}")
        row.append(day["comment"] or "")
        table.add_row(*row)

    return table


def totals_table(days: list[Day], fee: float) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("property")
    table.add_column("value", justify="right")

    table.add_row("days recorded", str(len(days)))
    table.add_row("total worked", f"{duration_to_hours(worked(days)):.2f}h")
    table.add_row(
        "avg worked per day",
        f"{duration_to_hours(average_worked_per_day(days)):.2f}h/day",
    )
    if state.get_verbose():
        for factor, duration in worked_by_factor(days).items():
            table.add_row(
                f"worked factor {factor:.1f}", f"{duration_to_hours(duration):.2f}h"
            )
        table.add_row("total earned", f"{earned(days, fee):.2f}")
    return table


def fee_view(fee: float) -> None:
    console = Console()
    console.print(f"Assumed fee per hour: {fee:.2f}")


def days_view(days: list[Day], fee: float) -> None:
    console = Console()
    console.print(days_table(days, fee))


def week_view(week: Week, fee: float) -> None:
    console = Console()
    console.print(f"[bold]Week: {week['week']:02d} ({week['year']})[/bold]")
    if state.get_show_days():
        console.print(days_table(week["days"], fee))
    console.print(totals_table(week["days"], fee))


def month_view(month: Month, fee: float) -> None:
    console = Console()
    console.print(
        f"[bold]Month: {month['month']:02d} - {month_name(month)} "
        f"({month['year']})[/bold]"
    )
    if state.get_show_days():
        console.print(days_table(month["days"], fee))
    console.print(totals_table(month["days"], fee))


def year_view(year: Year, fee: float) -> None:
    console = Console()
    months = months_of_year(year)
    console.print(
        f"[bold]Year: {year['year']}, {len(months)} month(s) recorded[/bold]"
    )
    for month in months:
        month_view(month, fee)
    console.print(
        f"Accumulated worked: {duration_to_hours(worked(year['days'])):.2f}h"
        f" - earned: {earned(year['days'], fee):.2f}"
    )
