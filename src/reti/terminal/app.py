# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from reti.repository.store import STORE_REPO
from reti.terminal import add, configuration, fee, show, store
from reti.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="reti - The cli time reporting tool",
    no_args_is_help=True,
)
app.command(name="init")(store.init)
app.command(name="import, i")(store.import_legacy)
app.add_typer(fee.get_app, name="get", help="Gets attributes for the current store.")
app.add_typer(fee.set_app, name="set", help="Sets attributes for the current store.")
app.command(name="rm")(store.remove)
app.add_typer(add.app, name="add, a", help="Add data to the store.")
app.command(name="edit, e")(store.edit)
app.add_typer(show.app, name="show, s")
app.add_typer(configuration.app, name="config, c", help="Configure reti.")


@app.callback()
def main_callback(
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="The file where the data is stored."),
    ] = None,
    save_pretty: Annotated[
        bool,
        typer.Option(
            "--save-pretty",
            help="Save the json file readable if a subcommand saves.",
        ),
    ] = False,
) -> None:
    """
    reti - The cli time reporting tool

    Global options that apply to all commands.
    """
    if file is not None:
        STORE_REPO.set_path(file)
    if save_pretty:
        STORE_REPO.save_pretty = True


def run() -> None:
    app()
