# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "trackline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    timezone: str
    zoom_initial: float
    zoom_min: float
    zoom_max: float
    zoom_step: float
    left_column_width: int
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "timezone": "UTC",
        "zoom_initial": 1.0,
        "zoom_min": 1.0,
        "zoom_max": 20.0,
        "zoom_step": 1.2,
        "left_column_width": 40,
        "show_header": True,
        "log_level": "WARNING",
    }
