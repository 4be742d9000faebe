# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from reti.repository.store import STORE_REPO
from reti.terminal.common import console, ensure_store_loaded
from reti.terminal.custom_typer import AliasedTyperGroup

get_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
set_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@get_app.command("fee, f")
def get_fee() -> None:
    """Get the fee per hour."""
    ensure_store_loaded()
    console.print(f"Current fee: {STORE_REPO.get_fee()}")


@set_app.command("fee, f", no_args_is_help=True)
def set_fee(
    value: Annotated[float, typer.Argument(min=0.0, help="the fee per hour")],
) -> None:
    """Set the fee per hour, the base for the earnings of every part."""
    ensure_store_loaded()
    STORE_REPO.set_fee(value)
    console.print(f"Fee set to {value}")
