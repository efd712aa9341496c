"""Mini README: Records returned by walking-directions providers.

Structure:
    * RouteStep - one turn-by-turn instruction anchored at a coordinate.
    * RouteLeg - walking path between two points with its totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..geometry import Coordinate


@dataclass(frozen=True, slots=True)
class RouteStep:
    """Single instruction of a walking leg.

    ``coordinate`` is where the step's own polyline starts. The last step of
    a leg may carry an empty instruction.
    """

    coordinate: Coordinate
    instructions: str = ""
    distance: float = 0.0


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """Walking path between two coordinates."""

    name: str
    coordinates: Tuple[Coordinate, ...]
    steps: Tuple[RouteStep, ...]
    distance: float
    expected_travel_time: float
