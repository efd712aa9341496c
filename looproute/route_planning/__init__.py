"""Mini README: Route planning subsystem for circular walking routes.

Exports the planner together with the records it produces so interfaces
and scripts can generate plans without knowing the module layout.
"""

from .errors import LegRequestFailed
from .models import CornerMarker, RoutePlan, StopMarker, derive_trace
from .planner import RoutePlanner, assemble_route_plan, trim_coordinates

__all__ = [
    "CornerMarker",
    "LegRequestFailed",
    "RoutePlan",
    "RoutePlanner",
    "StopMarker",
    "assemble_route_plan",
    "derive_trace",
    "trim_coordinates",
]
