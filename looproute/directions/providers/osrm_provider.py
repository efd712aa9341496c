"""Mini README: OSRM backed walking-directions provider.

Structure:
    * OSRMWalkingProvider - queries the OSRM ``/route`` service for one leg.
    * describe_maneuver - turns an OSRM maneuver into a readable instruction.

Internal coordinates are (lat, lon); OSRM expects ``lon,lat`` pairs in the
URL and answers with GeoJSON ``[lon, lat]`` positions. The first route of
the answer is used. Transport failures raised by ``httpx`` are not caught
here so callers see them unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..base import DirectionsError, DirectionsProvider, NoRouteFound
from ..models import RouteLeg, RouteStep
from ..registry import REGISTRY
from ...configuration import LoopRouteSettings
from ...geometry import Coordinate, compass_point
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_LEG_NAME = "Walking route"


def _to_coordinate(position: List[float]) -> Coordinate:
    longitude, latitude = position[0], position[1]
    return Coordinate(latitude=float(latitude), longitude=float(longitude))


def describe_maneuver(step: Mapping[str, Any]) -> str:
    """Build an instruction such as "Turn left onto Vesterbrogade"."""

    maneuver = step.get("maneuver", {})
    kind = maneuver.get("type", "")
    modifier = maneuver.get("modifier", "")
    street = step.get("name", "")

    if kind == "arrive":
        return ""
    if kind == "depart":
        direction = compass_point(float(maneuver.get("bearing_after", 0.0)))
        instruction = f"Head {direction}"
        return f"{instruction} on {street}" if street else instruction
    if kind in {"roundabout", "rotary", "roundabout turn"}:
        exit_number = maneuver.get("exit")
        instruction = "Enter the roundabout"
        if exit_number:
            instruction = f"{instruction} and take exit {exit_number}"
        return f"{instruction} onto {street}" if street else instruction
    if kind in {"continue", "new name"} or modifier in {"", "straight"}:
        return f"Continue onto {street}" if street else "Continue straight"
    instruction = f"Turn {modifier}"
    return f"{instruction} onto {street}" if street else instruction


class OSRMWalkingProvider(DirectionsProvider):
    """Walking directions from an OSRM server."""

    provider_name = "osrm"

    def __init__(
        self,
        settings: Optional[LoopRouteSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(settings=settings)
        self.base_url = self.settings.osrm_base_url
        self.profile = self.settings.osrm_profile
        self.timeout = self.settings.request_timeout_seconds
        self._transport = transport

    def _route_url(self, start: Coordinate, finish: Coordinate) -> str:
        waypoints = ";".join(
            f"{point.longitude},{point.latitude}" for point in (start, finish)
        )
        return f"{self.base_url}/route/v1/{self.profile}/{waypoints}"

    async def fetch_leg(self, start: Coordinate, finish: Coordinate) -> RouteLeg:
        url = self._route_url(start, finish)
        params = {"steps": "true", "geometries": "geojson", "overview": "full"}
        LOGGER.debug("Requesting OSRM walking leg %s", url)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(url, params=params)

        try:
            data = response.json()
        except ValueError as error:
            response.raise_for_status()
            raise DirectionsError(
                f"OSRM returned a non-JSON response ({response.status_code})"
            ) from error

        if data.get("code") != "Ok" or not data.get("routes"):
            raise NoRouteFound(start, finish, data.get("message", data.get("code", "")))
        return self._parse_route(data["routes"][0])

    def _parse_route(self, route: Dict[str, Any]) -> RouteLeg:
        coordinates = tuple(
            _to_coordinate(position) for position in route["geometry"]["coordinates"]
        )
        steps: List[RouteStep] = []
        name = ""
        for leg in route.get("legs", []):
            name = name or leg.get("summary", "")
            for step in leg.get("steps", []):
                positions = step.get("geometry", {}).get("coordinates") or [
                    step["maneuver"]["location"]
                ]
                steps.append(
                    RouteStep(
                        coordinate=_to_coordinate(positions[0]),
                        instructions=describe_maneuver(step),
                        distance=float(step.get("distance", 0.0)),
                    )
                )
        return RouteLeg(
            name=name or DEFAULT_LEG_NAME,
            coordinates=coordinates,
            steps=tuple(steps),
            distance=float(route["distance"]),
            expected_travel_time=float(route["duration"]),
        )

    def metadata(self) -> Dict[str, str]:
        return {**super().metadata(), "base_url": self.base_url, "profile": self.profile}


REGISTRY.register(OSRMWalkingProvider)
