"""Mini README: Core package initializer for LoopRoute.

LoopRoute turns a snapshot of the user's map view (centre, visible span and
heading) into a circular walking route: three corner points are derived
around the user, four walking legs are requested from a directions provider,
and the combined path is reduced to a handful of evenly spaced stops.

Sub-packages:
    * geometry - coordinates, viewports and the corner calculator.
    * route_planning - route plan records and the asynchronous planner.
    * directions - walking-directions providers and their registry.
    * waypoints - editing helpers for user placed stop markers.
    * interface - FastAPI service exposing planning and editing.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
