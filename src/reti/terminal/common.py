# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from reti.errors import StorageError
from reti.parser import ParseMode
from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import STORE_REPO
from reti.service.legacy import ImportResult

console = Console()


def ensure_store_loaded() -> None:
    """Load the store up front so a broken file ends the command cleanly."""
    try:
        STORE_REPO.store
    except StorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def get_parse_mode() -> ParseMode:
    return ParseMode(CONFIGURATION_REPO.get_config()["parse_mode"])


def print_import_result(result: ImportResult) -> None:
    console.print(
        f"{result['changed']} day(s) changed, {result['unchanged']} unchanged, "
        f"{result['skipped']} line(s) skipped, {result['failed']} failed"
    )
