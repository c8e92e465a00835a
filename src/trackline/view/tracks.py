# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from trackline.color import rich_style
from trackline.model.layout import Layout
from trackline.model.track import Track
from trackline.time import datetime_to_display_short_str
from trackline.view.header import header


def _track_label(track: Track, tz: str) -> str:
    state = ""
    if track["has_children"]:
        state = " [green]open[/green]" if track["is_open"] else " [dim]closed[/dim]"

    label = f"[cyan]{track['id']}[/cyan] {escape(track['title'])}{state}"
    for element in track["elements"]:
        style = rich_style(element["style"]["color"])
        label += (
            f" [{style}]{datetime_to_display_short_str(element['start'], tz)}"
            f" → {datetime_to_display_short_str(element['end'], tz)}[/{style}]"
            f" [dim]{element['id']}[/dim]"
        )
    return label


def _add_children(tree: Tree, tracks: list[Track], tz: str) -> None:
    for track in tracks:
        branch = tree.add(_track_label(track, tz))
        _add_children(branch, track["tracks"], tz)


def tracks_view(layout: Layout, console: Optional[Console] = None, tz: str = "UTC") -> None:
    """Display the full track tree with ids, regardless of open state."""
    if console is None:
        console = Console()

    header(console, "tracks")

    if not layout["tracks"]:
        console.print("\n[dim]No tasks in timeline[/dim]\n")
        return

    tree = Tree("[bold]tracks[/bold]")
    _add_children(tree, layout["tracks"], tz)
    console.print(tree)
