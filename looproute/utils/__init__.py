"""Mini README: Utility helper functions for LoopRoute.

Currently exports the GeoJSON exporter used by the web service and CLI.
"""

from .geojson import route_plan_to_geojson

__all__ = ["route_plan_to_geojson"]
