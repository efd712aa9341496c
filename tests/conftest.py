"""Mini README: Shared fixtures for the LoopRoute test-suite.

Structure:
    * settings - default settings isolated from the process environment cache.
    * make_leg - factory building synthetic walking legs.
    * scripted_provider - factory for providers answering from a script.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Union

import pytest

from looproute.configuration import LoopRouteSettings
from looproute.directions import DirectionsProvider, RouteLeg, RouteStep
from looproute.geometry import Coordinate


class ScriptedProvider(DirectionsProvider):
    """Provider replaying prepared legs (or raising prepared errors) in order."""

    provider_name = "scripted"

    def __init__(
        self,
        script: Sequence[Union[RouteLeg, Exception]],
        settings: LoopRouteSettings,
    ) -> None:
        super().__init__(settings=settings)
        self._script = list(script)
        self.requests: List[tuple] = []

    async def fetch_leg(self, start: Coordinate, finish: Coordinate) -> RouteLeg:
        self.requests.append((start, finish))
        answer = self._script[len(self.requests) - 1]
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def settings() -> LoopRouteSettings:
    return LoopRouteSettings(
        directions_provider="straight-line",
        default_stop_count=10,
        spread_angle_degrees=90.0,
        concurrent_legs=False,
    )


@pytest.fixture
def make_leg() -> Callable[..., RouteLeg]:
    def _make_leg(
        number: int,
        points: int = 5,
        distance: float = 100.0,
        duration: float = 80.0,
    ) -> RouteLeg:
        coordinates = tuple(
            Coordinate(latitude=55.0 + number + index / 1000, longitude=12.0 + index / 1000)
            for index in range(points)
        )
        steps = (
            RouteStep(coordinate=coordinates[0], instructions=f"Head north on Leg {number} Street"),
            RouteStep(coordinate=coordinates[points // 2], instructions=f"Turn left onto Leg {number} Lane"),
            RouteStep(coordinate=coordinates[-1]),
        )
        return RouteLeg(
            name=f"Leg {number}",
            coordinates=coordinates,
            steps=steps,
            distance=distance,
            expected_travel_time=duration,
        )

    return _make_leg


@pytest.fixture
def scripted_provider(settings: LoopRouteSettings) -> Callable[..., ScriptedProvider]:
    def _build(script: Sequence[Union[RouteLeg, Exception]]) -> ScriptedProvider:
        return ScriptedProvider(script, settings)

    return _build
