"""Mini README: Circular walking route planner.

Structure:
    * trim_coordinates - evenly down-sample a path while keeping its end.
    * assemble_route_plan - merge four legs into a ``RoutePlan``.
    * RoutePlanner - asynchronous facade fetching legs from a provider.

A plan is generated from a snapshot of the map: the corner calculator
yields points A, B and C around the viewport centre, the walking legs
centre->A, A->B, B->C and C->centre are requested, and the merged result is
reduced to the requested number of stops. When any leg fails the whole
request fails with ``LegRequestFailed``; partial plans are never returned.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple

from .errors import LegRequestFailed
from .models import CornerMarker, RoutePlan, StopMarker
from ..configuration import LoopRouteSettings, get_settings
from ..directions import REGISTRY, DirectionsProvider, RouteLeg, RouteStep
from ..geometry import Coordinate, Viewport, compute_corners
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CORNER_TITLES = ("A", "B", "C", "D")


def trim_coordinates(coordinates: Sequence[Coordinate], stop_count: int) -> List[Coordinate]:
    """Reduce ``coordinates`` to at most ``stop_count`` evenly spaced points.

    The last coordinate is always kept. The remaining ``stop_count - 1``
    picks are taken at ``floor(n * stride)`` from the path without its last
    point, so nearby indices may repeat when points are scarce.
    """

    if stop_count >= len(coordinates):
        return list(coordinates)
    if stop_count <= 0:
        return []

    *head, last = coordinates
    remaining = stop_count - 1
    middle: List[Coordinate] = []
    if remaining > 0:
        stride = len(head) / remaining
        middle = [head[int(n * stride)] for n in range(remaining)]
    return middle + [last]


def _numbered_markers(coordinates: Sequence[Coordinate]) -> Tuple[StopMarker, ...]:
    return tuple(
        StopMarker(title=str(index), coordinate=coordinate, order_index=index)
        for index, coordinate in enumerate(coordinates, start=1)
    )


def _kept_steps(legs: Sequence[RouteLeg]) -> List[RouteStep]:
    """Concatenate leg steps, dropping each inner leg's arrival step.

    The arrival of one leg sits where the next leg departs, so only the
    final leg keeps its last step.
    """

    steps: List[RouteStep] = []
    for position, leg in enumerate(legs):
        is_last_leg = position == len(legs) - 1
        steps.extend(leg.steps if is_last_leg else leg.steps[:-1])
    return steps


def assemble_route_plan(
    legs: Sequence[RouteLeg],
    corners: Sequence[Coordinate],
    stop_count: int,
) -> RoutePlan:
    """Consolidate four walking legs and the loop corners into one plan."""

    if len(legs) != 4 or len(corners) != 4:
        raise ValueError("A loop route needs exactly four legs and four corners")

    path = [coordinate for leg in legs for coordinate in leg.coordinates]
    stops = _numbered_markers(trim_coordinates(path, stop_count))

    steps = _kept_steps(legs)
    step_markers = _numbered_markers([step.coordinate for step in steps])
    directions = tuple(step.instructions for step in steps if step.instructions)

    return RoutePlan(
        title=legs[1].name,
        step_directions=directions,
        step_markers=step_markers,
        leg_polylines=tuple(leg.coordinates for leg in legs),
        stop_markers=stops,
        corners=tuple(
            CornerMarker(title=title, coordinate=corner)
            for title, corner in zip(CORNER_TITLES, corners)
        ),
        est_distance=sum(leg.distance for leg in legs),
        est_time=sum(leg.expected_travel_time for leg in legs),
    )


class RoutePlanner:
    """Generate circular walking routes around the user's position."""

    def __init__(
        self,
        provider: Optional[DirectionsProvider] = None,
        *,
        settings: Optional[LoopRouteSettings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.provider = provider or REGISTRY.create(settings=self.settings)
        self.spread = self.settings.spread_angle_degrees
        self.concurrent_legs = self.settings.concurrent_legs
        LOGGER.debug(
            "Initialised RoutePlanner with provider=%s spread=%s concurrent=%s",
            self.provider.provider_name,
            self.spread,
            self.concurrent_legs,
        )

    async def generate_route(
        self, viewport: Viewport, heading: float, stop_count: Optional[int] = None
    ) -> RoutePlan:
        """Build a loop route starting and ending at the viewport centre."""

        if stop_count is None:
            stop_count = self.settings.default_stop_count
        LOGGER.info(
            "Generating loop route at %s heading %.1f with %s stops",
            viewport.center.as_tuple(),
            heading,
            stop_count,
        )
        first, second, third = compute_corners(viewport, heading, self.spread)
        vertices = (viewport.center, first, second, third)
        endpoints = [
            (vertices[index], vertices[(index + 1) % len(vertices)])
            for index in range(len(vertices))
        ]

        if self.concurrent_legs:
            legs = await self._fetch_concurrently(endpoints)
        else:
            legs = [
                await self._fetch_leg(index, start, finish)
                for index, (start, finish) in enumerate(endpoints, start=1)
            ]

        plan = assemble_route_plan(legs, vertices, stop_count)
        LOGGER.info(
            "Generated route '%s': %.0f m, %.0f s, %s stops",
            plan.title,
            plan.est_distance,
            plan.est_time,
            len(plan.stop_markers),
        )
        return plan

    async def _fetch_leg(self, index: int, start: Coordinate, finish: Coordinate) -> RouteLeg:
        LOGGER.debug("Requesting leg %s from %s to %s", index, start.as_tuple(), finish.as_tuple())
        try:
            return await self.provider.fetch_leg(start, finish)
        except Exception as error:
            LOGGER.warning("Leg %s failed: %s", index, error)
            raise LegRequestFailed(index, error) from error

    async def _fetch_concurrently(
        self, endpoints: Sequence[Tuple[Coordinate, Coordinate]]
    ) -> List[RouteLeg]:
        results = await asyncio.gather(
            *(self.provider.fetch_leg(start, finish) for start, finish in endpoints),
            return_exceptions=True,
        )
        for index, result in enumerate(results, start=1):
            if isinstance(result, BaseException):
                LOGGER.warning("Leg %s failed: %s", index, result)
                raise LegRequestFailed(index, result) from result
        return list(results)
