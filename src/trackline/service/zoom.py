# SPDX-License-Identifier: MIT

import logging

from trackline.model.zoom import ZoomState

logger = logging.getLogger(__name__)

ZOOM_STEP = 1.2


def make_zoom_state(factor: float, minimum: float, maximum: float) -> ZoomState:
    """Build a zoom state with the factor clamped into [minimum, maximum]."""
    if minimum > maximum:
        raise ValueError(
            f"Zoom minimum {minimum} must not be greater than maximum {maximum}"
        )
    return {"factor": min(max(factor, minimum), maximum), "min": minimum, "max": maximum}


def _check_step(step: float) -> None:
    if step <= 1:
        raise ValueError(f"Zoom step must be greater than 1, got {step}")


def zoom_in(state: ZoomState, step: float = ZOOM_STEP) -> ZoomState:
    _check_step(step)
    factor = min(state["factor"] * step, state["max"])
    if factor == state["factor"]:
        logger.debug("Zoom already at maximum %s", state["max"])
    return {"factor": factor, "min": state["min"], "max": state["max"]}


def zoom_out(state: ZoomState, step: float = ZOOM_STEP) -> ZoomState:
    _check_step(step)
    factor = max(state["factor"] / step, state["min"])
    if factor == state["factor"]:
        logger.debug("Zoom already at minimum %s", state["min"])
    return {"factor": factor, "min": state["min"], "max": state["max"]}
