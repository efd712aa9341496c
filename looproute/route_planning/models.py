"""Mini README: Value records produced and consumed by the route planner.

Structure:
    * StopMarker - labelled point used as waypoint or as down-sampled stop.
    * CornerMarker - labelled vertex of the loop ("A" to "D").
    * RoutePlan - consolidated result of one generation request.
    * derive_trace - coordinates connecting the current stop markers.

All records are frozen. Editing the stop list of a plan produces a new plan
through ``RoutePlan.with_stops`` so callers never share mutable markers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..geometry import Coordinate


@dataclass(frozen=True, slots=True)
class StopMarker:
    """Labelled point on the map.

    ``title`` doubles as the identity key when comparing one rendering of
    the markers against the next.
    """

    title: str
    coordinate: Coordinate
    subtitle: Optional[str] = None
    order_index: Optional[int] = None
    id: Optional[str] = None

    def with_coordinate(self, coordinate: Coordinate) -> "StopMarker":
        return replace(self, coordinate=coordinate)

    def as_dict(self) -> Dict[str, Any]:
        """Serialise the marker for JSON payloads."""

        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
            "order_index": self.order_index,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "StopMarker":
        """Rebuild a marker from ``as_dict`` output."""

        try:
            title = str(payload["title"])
            coordinate = Coordinate(
                latitude=float(payload["latitude"]),
                longitude=float(payload["longitude"]),
            )
        except KeyError as error:
            raise ValueError(f"Stop marker payload is missing {error}") from error
        except (TypeError, ValueError) as error:
            raise ValueError("Stop marker coordinates must be numeric") from error

        order_index = payload.get("order_index")
        if order_index is not None:
            try:
                order_index = int(order_index)
            except (TypeError, ValueError) as error:
                raise ValueError("Stop marker order_index must be an integer") from error
        return cls(
            title=title,
            coordinate=coordinate,
            subtitle=payload.get("subtitle"),
            order_index=order_index,
            id=payload.get("id"),
        )


@dataclass(frozen=True, slots=True)
class CornerMarker:
    """Vertex of the generated loop."""

    title: str
    coordinate: Coordinate


def derive_trace(stop_markers: Sequence[StopMarker]) -> List[Coordinate]:
    """Return the polyline joining the markers in list order."""

    return [marker.coordinate for marker in stop_markers]


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """Consolidated loop route.

    ``stop_markers`` are the points shown to the user; ``step_markers`` mark
    where each turn-by-turn instruction begins. ``leg_polylines`` keeps the
    four raw legs for drawing.
    """

    title: str
    step_directions: Tuple[str, ...] = ()
    step_markers: Tuple[StopMarker, ...] = ()
    leg_polylines: Tuple[Tuple[Coordinate, ...], ...] = ()
    stop_markers: Tuple[StopMarker, ...] = ()
    corners: Tuple[CornerMarker, ...] = ()
    est_distance: float = 0.0
    est_time: float = 0.0

    @property
    def stop_trace(self) -> List[Coordinate]:
        """Polyline through the current stop markers, rebuilt on each access."""

        return derive_trace(self.stop_markers)

    def with_stops(self, stop_markers: Sequence[StopMarker]) -> "RoutePlan":
        return replace(self, stop_markers=tuple(stop_markers))

    def summary(self) -> Dict[str, Any]:
        """Headline figures for status panels."""

        return {
            "title": self.title,
            "distance_m": round(self.est_distance),
            "expected_travel_time_s": round(self.est_time),
            "stops": len(self.stop_markers),
        }

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON friendly representation of the whole plan."""

        return {
            **self.summary(),
            "est_distance": self.est_distance,
            "est_time": self.est_time,
            "step_directions": list(self.step_directions),
            "step_markers": [marker.as_dict() for marker in self.step_markers],
            "stop_markers": [marker.as_dict() for marker in self.stop_markers],
            "stop_trace": [list(point.as_tuple()) for point in self.stop_trace],
            "leg_polylines": [
                [list(point.as_tuple()) for point in polyline]
                for polyline in self.leg_polylines
            ],
            "corners": [
                {
                    "title": corner.title,
                    "latitude": corner.coordinate.latitude,
                    "longitude": corner.coordinate.longitude,
                }
                for corner in self.corners
            ],
        }
