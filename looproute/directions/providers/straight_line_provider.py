"""Mini README: Offline walking-directions simulator.

Structure:
    * StraightLineProvider - answers every leg with a straight path.

Useful for demos and tests without a routing server: the leg is sampled at
evenly spaced points, measured with a geodesic distance and timed at the
configured walking speed.
"""

from __future__ import annotations

from geopy.distance import geodesic

from ..base import DirectionsProvider
from ..models import RouteLeg, RouteStep
from ..registry import REGISTRY
from ...geometry import Coordinate, compass_point, initial_bearing
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class StraightLineProvider(DirectionsProvider):
    """Mock provider walking in a straight line between the endpoints."""

    provider_name = "straight-line"

    async def fetch_leg(self, start: Coordinate, finish: Coordinate) -> RouteLeg:
        samples = self.settings.straight_line_samples
        interior = tuple(
            Coordinate(
                latitude=start.latitude + (finish.latitude - start.latitude) * n / (samples - 1),
                longitude=start.longitude + (finish.longitude - start.longitude) * n / (samples - 1),
            )
            for n in range(1, samples - 1)
        )
        coordinates = (start, *interior, finish)
        distance = geodesic(start.as_tuple(), finish.as_tuple()).meters
        direction = compass_point(initial_bearing(start, finish))
        LOGGER.debug("Simulated %.0f m leg heading %s", distance, direction)
        return RouteLeg(
            name=f"Straight walk {direction}",
            coordinates=coordinates,
            steps=(
                RouteStep(coordinate=start, instructions=f"Head {direction}", distance=distance),
                RouteStep(coordinate=finish),
            ),
            distance=distance,
            expected_travel_time=distance / self.settings.walking_speed_mps,
        )


REGISTRY.register(StraightLineProvider)
