"""Mini README: User waypoint editing.

Exports pure helpers for appending and dragging stop markers and for
working out which markers changed between two renders.
"""

from .editor import append_stop, changed_markers, demo_waypoints, move_stop

__all__ = ["append_stop", "changed_markers", "demo_waypoints", "move_stop"]
