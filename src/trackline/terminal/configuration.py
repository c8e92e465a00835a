# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from trackline import configuration
from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("timezone", config["timezone"])
    table.add_row("zoom_initial", str(config["zoom_initial"]))
    table.add_row("zoom_min", str(config["zoom_min"]))
    table.add_row("zoom_max", str(config["zoom_max"]))
    table.add_row("zoom_step", str(config["zoom_step"]))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="Timezone for month and week boundaries"),
    ] = None,
    zoom_initial: Annotated[
        Optional[float],
        typer.Option("--zoom-initial", help="Zoom factor used when a view opens"),
    ] = None,
    zoom_min: Annotated[
        Optional[float],
        typer.Option("--zoom-min", help="Smallest allowed zoom factor"),
    ] = None,
    zoom_max: Annotated[
        Optional[float],
        typer.Option("--zoom-max", help="Largest allowed zoom factor"),
    ] = None,
    zoom_step: Annotated[
        Optional[float],
        typer.Option("--zoom-step", help="Multiplier applied per zoom step"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option("--left-column-width", help="Width of the track title column"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show view headers"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
    ] = None,
) -> None:
    """Change configuration settings."""
    if timezone is not None:
        try:
            pendulum.timezone(timezone)
        except Exception as e:
            typer.echo(f"Error: unknown timezone '{timezone}': {e}", err=True)
            raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    new_min = zoom_min if zoom_min is not None else config["zoom_min"]
    new_max = zoom_max if zoom_max is not None else config["zoom_max"]
    if new_min > new_max:
        typer.echo(
            f"Error: zoom_min {new_min} must not be greater than zoom_max {new_max}",
            err=True,
        )
        raise typer.Exit(1)
    if zoom_step is not None and zoom_step <= 1:
        typer.echo("Error: zoom_step must be greater than 1", err=True)
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        timezone=timezone,
        zoom_initial=zoom_initial,
        zoom_min=zoom_min,
        zoom_max=zoom_max,
        zoom_step=zoom_step,
        left_column_width=left_column_width,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    typer.echo("Configuration updated")
