# SPDX-License-Identifier: MIT

import subprocess
from pathlib import Path
from typing import Annotated, Optional

import typer

from reti import time
from reti.errors import StorageError
from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import STORE_REPO
from reti.service.legacy import day_to_legacy, has_open_part
from reti.terminal.common import (
    console,
    ensure_store_loaded,
    get_parse_mode,
    print_import_result,
)
from reti.terminal.parse import open_editor_for_text, parse_date_list

EDIT_TEMPLATE_PARTS = "08:00-12:00  13:00-17:00"


def _read_legacy_file(legacy_file: Path) -> list[str]:
    try:
        return legacy_file.read_text().splitlines()
    except OSError as e:
        console.print(f"[red]Unable to read {legacy_file}: {e}[/red]")
        raise typer.Exit(1)


def init(
    storage_file: Annotated[
        Optional[Path],
        typer.Argument(help="file to write (default: the configured store file)"),
    ] = None,
    legacy_file: Annotated[
        Optional[Path], typer.Argument(help="import data from this legacy file")
    ] = None,
    fee: Annotated[float, typer.Option("--fee", min=0.0)] = 0.0,
    force: Annotated[
        bool, typer.Option("--force", help="overwrite an existing file without asking")
    ] = False,
) -> None:
    """Initialize a new storage file. CAUTION: this overwrites existing data!"""
    if storage_file is not None:
        STORE_REPO.set_path(storage_file)
    if STORE_REPO.exists() and not force:
        typer.confirm(f"{STORE_REPO.path} exists, overwrite it?", abort=True)

    STORE_REPO.initialize(fee)
    if legacy_file is not None:
        print_import_result(
            STORE_REPO.import_lines(_read_legacy_file(legacy_file), mode=get_parse_mode())
        )

    try:
        STORE_REPO.flush()
    except StorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Initialized {STORE_REPO.path}[/green]")


def import_legacy(
    legacy_file: Annotated[Path, typer.Argument(help="file in the legacy format")],
) -> None:
    """Import from the legacy format. Parts with intersecting times are disregarded."""
    ensure_store_loaded()
    print_import_result(
        STORE_REPO.import_lines(_read_legacy_file(legacy_file), mode=get_parse_mode())
    )


def edit(
    dates: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="format: [[YYYY-]MM-]DD, missing year or month default to the current"
        ),
    ] = None,
) -> None:
    """
    Edit days in your editor, every saved line replaces the recorded day.

    An open part is shown as HH:MM- and is dropped unless it gets a stop time.
    """
    ensure_store_loaded()

    lines = []
    for date in parse_date_list(dates or []):
        day = STORE_REPO.get_day(date.year, date.month, date.day)
        if day is None:
            lines.append(f"# {date.format('YYYY-MM-DD')}   {EDIT_TEMPLATE_PARTS}")
            continue
        if has_open_part(day):
            lines.append(
                f"# {date.format('YYYY-MM-DD')} has an open part, "
                "add a stop time or it is dropped"
            )
        lines.append(day_to_legacy(day))
    if len(lines) == 0:
        lines.append(f"# {time.today().format('YYYY-MM-DD')}   {EDIT_TEMPLATE_PARTS}")

    try:
        text = open_editor_for_text(
            "\n".join(lines) + "\n", CONFIGURATION_REPO.get_config()["editor"]
        )
    except (OSError, subprocess.CalledProcessError) as e:
        console.print(f"[red]Edit canceled: {e}[/red]")
        raise typer.Exit(1)

    if text is None:
        console.print("Nothing to do")
        return
    print_import_result(STORE_REPO.edit_lines(text.splitlines(), mode=get_parse_mode()))


def remove(
    dates: Annotated[
        list[str], typer.Argument(help="days to remove, format: [[YYYY-]MM-]DD")
    ],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="remove without asking")
    ] = False,
) -> None:
    """Remove days from the store."""
    ensure_store_loaded()
    for date in parse_date_list(dates):
        if not force and not typer.confirm(f"Remove {date}?"):
            continue
        if STORE_REPO.remove_day(date):
            console.print(f"Removed {date}")
        else:
            console.print(f"[yellow]{date} is not recorded[/yellow]")
