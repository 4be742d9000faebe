# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.table import Table

from reti import configuration
from reti.parser import ParseMode
from reti.repository.configuration import CONFIGURATION_REPO
from reti.terminal.common import console
from reti.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("store_file", config["store_file"])
    table.add_row(
        "save_pretty",
        "✓ Enabled" if config["save_pretty"] else "✗ Disabled",
    )
    table.add_row("editor", config["editor"] or "$EDITOR")
    table.add_row("parse_mode", config["parse_mode"])
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the store file"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data directory")
    ] = False,
    store_file: Annotated[Optional[str], typer.Option("--store-file")] = None,
    save_pretty: Annotated[
        Optional[bool], typer.Option("--save-pretty/--no-save-pretty")
    ] = None,
    editor: Annotated[Optional[str], typer.Option("--editor")] = None,
    remove_editor: Annotated[bool, typer.Option("--remove-editor")] = False,
    parse_mode: Annotated[
        Optional[ParseMode],
        typer.Option("--parse-mode", help="tolerant skips unknown tokens, strict rejects the line"),
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        store_file=store_file,
        save_pretty=save_pretty,
        editor=editor,
        remove_editor=remove_editor,
        parse_mode=parse_mode.value if parse_mode is not None else None,
        log_level=log_level.upper() if log_level is not None else None,
    )
    console.print("[green]Configuration updated[/green]")
