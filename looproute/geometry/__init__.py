"""Mini README: Geographic primitives and loop geometry.

Exports the coordinate and viewport records used throughout LoopRoute along
with the corner calculator that shapes the walking loop around the user.
"""

from .bearings import compass_point, initial_bearing
from .corners import (
    Coordinate,
    Viewport,
    compute_corners,
    lat_lon_ratios,
    meters_per_degree,
    normalise_heading,
)

__all__ = [
    "Coordinate",
    "Viewport",
    "compass_point",
    "compute_corners",
    "initial_bearing",
    "lat_lon_ratios",
    "meters_per_degree",
    "normalise_heading",
]
