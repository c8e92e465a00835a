# SPDX-License-Identifier: MIT

from trackline.configuration import Configuration
from trackline.model.zoom import ZoomState
from trackline.service.zoom import make_zoom_state


def get_zoom_template(config: Configuration) -> ZoomState:
    return make_zoom_state(
        config["zoom_initial"], config["zoom_min"], config["zoom_max"]
    )
