# SPDX-License-Identifier: MIT

from typing import Iterator, Optional, Sequence, Union

from trackline.model.task import Subtask, Task
from trackline.model.track import Element, Track


def iter_elements(tracks: Sequence[Track]) -> Iterator[Element]:
    """Walk the track tree depth-first and yield every element."""
    for track in tracks:
        yield from track["elements"]
        yield from iter_elements(track["tracks"])


def find_element(tracks: Sequence[Track], element_id: str) -> Optional[Element]:
    for element in iter_elements(tracks):
        if element["id"] == element_id:
            return element
    return None


def route_click(element: Element) -> Union[Task, Subtask]:
    """Return the domain record a clicked element was built from."""
    return element["source"]
