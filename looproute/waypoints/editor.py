"""Mini README: Editing helpers for user placed stop markers.

Structure:
    * append_stop - add a numbered marker at a coordinate.
    * move_stop - drag an existing marker to a new coordinate.
    * changed_markers - detect markers that need redrawing.
    * demo_waypoints - example markers for previews and tests.

Markers are immutable, so each edit returns a new ``RoutePlan``; the list
of waypoints belongs to the caller and is never retained here.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..geometry import Coordinate
from ..logging_utils import get_logger
from ..route_planning.models import RoutePlan, StopMarker

LOGGER = get_logger(__name__)

CUSTOM_ROUTE_TITLE = "Custom route"


def append_stop(plan: Optional[RoutePlan], coordinate: Coordinate) -> RoutePlan:
    """Return ``plan`` with a new stop appended at ``coordinate``.

    Without a plan a new, otherwise empty plan is created to hold the stop.
    """

    existing = plan.stop_markers if plan is not None else ()
    number = len(existing) + 1
    marker = StopMarker(title=str(number), coordinate=coordinate, order_index=number)
    LOGGER.debug("Appending stop %s at %s", marker.title, coordinate.as_tuple())
    if plan is None:
        return RoutePlan(title=CUSTOM_ROUTE_TITLE, stop_markers=(marker,))
    return plan.with_stops([*existing, marker])


def move_stop(plan: RoutePlan, title: str, coordinate: Coordinate) -> RoutePlan:
    """Return ``plan`` with the stop named ``title`` moved to ``coordinate``."""

    markers = list(plan.stop_markers)
    for index, marker in enumerate(markers):
        if marker.title == title:
            markers[index] = marker.with_coordinate(coordinate)
            LOGGER.debug("Moved stop %s to %s", title, coordinate.as_tuple())
            return plan.with_stops(markers)
    raise KeyError(f"Stop '{title}' not found")


def changed_markers(
    previous: Sequence[StopMarker], current: Sequence[StopMarker]
) -> List[StopMarker]:
    """Return markers of ``current`` that are new or moved since ``previous``.

    Markers are matched by title.
    """

    known: Dict[str, Coordinate] = {marker.title: marker.coordinate for marker in previous}
    return [marker for marker in current if known.get(marker.title) != marker.coordinate]


def demo_waypoints() -> List[StopMarker]:
    """Markers along a short street in Frederiksberg, Copenhagen."""

    coordinates = [
        (55.670616, 12.535209),
        (55.670986, 12.535339),
        (55.671416, 12.535474),
        (55.671989, 12.535639),
        (55.672745, 12.535889),
        (55.673689, 12.536189),
    ]
    return [
        StopMarker(
            title=str(index),
            coordinate=Coordinate(latitude=latitude, longitude=longitude),
            order_index=index,
        )
        for index, (latitude, longitude) in enumerate(coordinates, start=1)
    ]
