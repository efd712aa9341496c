"""Mini README: GeoJSON helper utilities for LoopRoute.

Converts route plans into GeoJSON FeatureCollections so map front-ends can
draw the legs, the stop trace and the markers. GeoJSON positions are
``[longitude, latitude]``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..geometry import Coordinate
from ..route_planning.models import RoutePlan


def _position(coordinate: Coordinate) -> List[float]:
    return [coordinate.longitude, coordinate.latitude]


def _line(coordinates: Sequence[Coordinate], properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [_position(point) for point in coordinates],
        },
        "properties": properties,
    }


def _point(coordinate: Coordinate, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": _position(coordinate)},
        "properties": properties,
    }


def route_plan_to_geojson(plan: RoutePlan) -> Dict[str, Any]:
    """Return a FeatureCollection describing ``plan``."""

    features: List[Dict[str, Any]] = [
        _line(polyline, {"kind": "leg", "leg": index})
        for index, polyline in enumerate(plan.leg_polylines, start=1)
    ]
    features.append(_line(plan.stop_trace, {"kind": "stop_trace"}))
    features.extend(
        _point(marker.coordinate, {"kind": "stop", "title": marker.title, "order_index": marker.order_index})
        for marker in plan.stop_markers
    )
    features.extend(
        _point(corner.coordinate, {"kind": "corner", "title": corner.title})
        for corner in plan.corners
    )
    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": plan.summary(),
    }
