# SPDX-License-Identifier: MIT

import atexit

from rich.console import Console

from reti.errors import StorageError
from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import STORE_REPO

err_console = Console(stderr=True)


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    try:
        STORE_REPO.flush()
    except StorageError as e:
        err_console.print(f"[red]Error: changes were not saved. {e}[/red]")


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
