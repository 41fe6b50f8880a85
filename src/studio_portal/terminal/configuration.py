# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studio_portal import configuration
from studio_portal.repository.configuration import CONFIGURATION_REPO
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.validate import validate_log_level, validate_positive

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __config_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("user_id", escape(config["user_id"]))
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row(
        "seed_on_first_use",
        "✓ Enabled" if config["seed_on_first_use"] else "✗ Disabled",
    )
    table.add_row("default_artists", escape(", ".join(config["default_artists"])))
    table.add_row("timeline_days", str(config["timeline_days"]))
    table.add_row("timeline_step_days", str(config["timeline_step_days"]))
    table.add_row("timeline_offset_days", str(config["timeline_offset_days"]))
    table.add_row("log_level", config.get("log_level", "WARNING"))
    data_path = "None (platform default)"
    if config["data_path"]:
        data_path = escape(config["data_path"])
    table.add_row("data_path", data_path)
    table.add_row("store", escape(str(configuration.DATA_STORE_PATH)))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(__config_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        from yaml import Loader  # type: ignore[assignment] # noqa: F401

        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", help="Owner of every record you create and see"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the record store"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use the platform data directory)",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header", help="Print the banner above views"
        ),
    ] = None,
    seed_on_first_use: Annotated[
        Optional[bool],
        typer.Option(
            "--seed-on-first-use/--no-seed-on-first-use",
            help="Create starter tasks for a user with none",
        ),
    ] = None,
    default_artists: Annotated[
        Optional[list[str]],
        typer.Option(
            "--default-artist",
            help="Roster seeded on first use (accepts multiple)",
        ),
    ] = None,
    timeline_days: Annotated[
        Optional[int],
        typer.Option("--timeline-days", callback=validate_positive),
    ] = None,
    timeline_step_days: Annotated[
        Optional[int],
        typer.Option("--timeline-step-days", callback=validate_positive),
    ] = None,
    timeline_offset_days: Annotated[
        Optional[int],
        typer.Option(
            "--timeline-offset-days",
            help="How many days before today the default window starts",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        user_id=user_id,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        seed_on_first_use=seed_on_first_use,
        default_artists=default_artists,
        timeline_days=timeline_days,
        timeline_step_days=timeline_step_days,
        timeline_offset_days=timeline_offset_days,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__config_table("Updated Configuration"))
