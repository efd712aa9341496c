"""Mini README: Bearing helpers shared by the directions providers."""

from __future__ import annotations

import math

from .corners import Coordinate

_COMPASS_POINTS = (
    "north",
    "northeast",
    "east",
    "southeast",
    "south",
    "southwest",
    "west",
    "northwest",
)


def initial_bearing(start: Coordinate, finish: Coordinate) -> float:
    """Great-circle bearing from ``start`` towards ``finish`` in degrees [0, 360)."""

    lat1 = math.radians(start.latitude)
    lat2 = math.radians(finish.latitude)
    delta_lon = math.radians(finish.longitude - start.longitude)
    x = math.sin(delta_lon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)
    return math.degrees(math.atan2(x, y)) % 360.0


def compass_point(bearing: float) -> str:
    """Name the eight-wind compass point closest to ``bearing``."""

    return _COMPASS_POINTS[int(((bearing % 360.0) + 22.5) // 45) % 8]
