# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from trackline.log import configure_logging
from trackline.terminal import configuration
from trackline.terminal.custom_typer import OrderedAliasedTyperGroup
from trackline.terminal.view import gantt, timebar, tracks
from trackline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Trackline - Hierarchical task timelines in the CLI",
    no_args_is_help=True,
)
app.command(name="gantt, g")(gantt)
app.command(name="tracks, tr")(tracks)
app.command(name="timebar, tb")(timebar)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Override the configured logging level",
        ),
    ] = None,
) -> None:
    """
    Trackline - Hierarchical task timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if log_level is not None:
        configure_logging(log_level)


def run() -> None:
    app()
