# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from trackline.model.timebar import TimebarSegment
from trackline.time import datetime_to_display_date_str
from trackline.view.header import header


def timebar_view(
    segments: list[TimebarSegment],
    console: Optional[Console] = None,
    tz: str = "UTC",
) -> None:
    if console is None:
        console = Console()

    header(console, "timebar")

    table = Table()
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Start", style="magenta")
    table.add_column("End", style="magenta")

    for segment in segments:
        label = segment["label"]
        if segment["granularity"] == "month":
            label = f"[bold]{label}[/bold]"
        else:
            label = f"  {label}"
        table.add_row(
            segment["id"],
            label,
            datetime_to_display_date_str(segment["start"], tz),
            datetime_to_display_date_str(segment["end"], tz),
        )

    console.print(table)
