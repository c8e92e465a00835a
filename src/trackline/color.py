# SPDX-License-Identifier: MIT

from typing import Literal, Optional

ColorToken = Literal["green", "blue", "red", "gray", "purple", "slate"]

# Neutral token for subtask bars, never produced by status_color
SUBTASK_COLOR: ColorToken = "slate"

DEFAULT_STATUS_COLOR: ColorToken = "purple"

_STATUS_COLORS: dict[str, ColorToken] = {
    "in progress": "blue",
    "doing": "blue",
    "done": "green",
    "completed": "green",
    "blocked": "red",
    "stuck": "red",
    "to do": "gray",
    "todo": "gray",
    "not started": "gray",
}

# Rich styles used when a token is drawn in the terminal
RICH_STYLES: dict[str, str] = {
    "green": "green3",
    "blue": "dodger_blue1",
    "red": "red3",
    "gray": "grey62",
    "purple": "medium_purple",
    "slate": "grey42",
}

BORDER_STYLES: dict[str, str] = {
    "red": "bold red",
    "amber": "bold dark_orange",
}


def status_color(status: Optional[str], is_completed: bool) -> ColorToken:
    """Map a task status and completion flag to a color token.

    Completion always wins. Unknown or missing statuses fall back to purple.
    """
    if is_completed:
        return "green"
    if not isinstance(status, str):
        return DEFAULT_STATUS_COLOR
    return _STATUS_COLORS.get(status.strip().lower(), DEFAULT_STATUS_COLOR)


def rich_style(token: str) -> str:
    return RICH_STYLES.get(token, "white")
