"""Mini README: Tests for the OSRM walking-directions provider.

Uses ``httpx.MockTransport`` so no routing server is contacted. Verifies the
request shape, response parsing, instruction wording and error propagation.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from looproute.configuration import LoopRouteSettings
from looproute.directions import DirectionsError, NoRouteFound
from looproute.directions.providers import OSRMWalkingProvider
from looproute.directions.providers.osrm_provider import describe_maneuver
from looproute.geometry import Coordinate

START = Coordinate(latitude=55.6706, longitude=12.5352)
FINISH = Coordinate(latitude=55.6731, longitude=12.5389)

ROUTE_RESPONSE = {
    "code": "Ok",
    "routes": [
        {
            "distance": 412.5,
            "duration": 297.0,
            "geometry": {
                "type": "LineString",
                "coordinates": [[12.5352, 55.6706], [12.5360, 55.6715], [12.5389, 55.6731]],
            },
            "legs": [
                {
                    "summary": "Vesterbrogade, Frederiksberg Allé",
                    "steps": [
                        {
                            "name": "Vesterbrogade",
                            "distance": 120.0,
                            "geometry": {"coordinates": [[12.5352, 55.6706], [12.5360, 55.6715]]},
                            "maneuver": {"type": "depart", "bearing_after": 12, "location": [12.5352, 55.6706]},
                        },
                        {
                            "name": "Frederiksberg Allé",
                            "distance": 292.5,
                            "geometry": {"coordinates": [[12.5360, 55.6715], [12.5389, 55.6731]]},
                            "maneuver": {"type": "turn", "modifier": "right", "location": [12.5360, 55.6715]},
                        },
                        {
                            "name": "",
                            "distance": 0.0,
                            "geometry": {"coordinates": [[12.5389, 55.6731]]},
                            "maneuver": {"type": "arrive", "location": [12.5389, 55.6731]},
                        },
                    ],
                }
            ],
        }
    ],
}


def _provider(handler) -> OSRMWalkingProvider:
    settings = LoopRouteSettings(osrm_base_url="http://osrm.test/", osrm_profile="foot")
    return OSRMWalkingProvider(settings=settings, transport=httpx.MockTransport(handler))


def test_fetch_leg_parses_route() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ROUTE_RESPONSE)

    leg = asyncio.run(_provider(handler).fetch_leg(START, FINISH))

    request = seen[0]
    assert request.url.path == "/route/v1/foot/12.5352,55.6706;12.5389,55.6731"
    assert request.url.params["steps"] == "true"
    assert request.url.params["geometries"] == "geojson"

    assert leg.name == "Vesterbrogade, Frederiksberg Allé"
    assert leg.distance == 412.5
    assert leg.expected_travel_time == 297.0
    assert leg.coordinates[0] == START
    assert leg.coordinates[-1] == FINISH
    assert [step.instructions for step in leg.steps] == [
        "Head north on Vesterbrogade",
        "Turn right onto Frederiksberg Allé",
        "",
    ]
    assert leg.steps[1].coordinate == Coordinate(latitude=55.6715, longitude=12.5360)


def test_no_route_raises_no_route_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"code": "NoRoute", "message": "Impossible route between points"})

    with pytest.raises(NoRouteFound, match="Impossible route"):
        asyncio.run(_provider(handler).fetch_leg(START, FINISH))


def test_transport_errors_propagate_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        asyncio.run(_provider(handler).fetch_leg(START, FINISH))


def test_non_json_error_raises_http_status_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_provider(handler).fetch_leg(START, FINISH))


def test_non_json_success_raises_directions_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html></html>")

    with pytest.raises(DirectionsError):
        asyncio.run(_provider(handler).fetch_leg(START, FINISH))


def test_missing_summary_falls_back_to_default_name() -> None:
    payload = {"code": "Ok", "routes": [{**ROUTE_RESPONSE["routes"][0], "legs": [{"summary": "", "steps": []}]}]}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    leg = asyncio.run(_provider(handler).fetch_leg(START, FINISH))
    assert leg.name == "Walking route"
    assert leg.steps == ()


@pytest.mark.parametrize(
    ("step", "expected"),
    [
        ({"name": "", "maneuver": {"type": "depart", "bearing_after": 270}}, "Head west"),
        ({"name": "Nørrebrogade", "maneuver": {"type": "turn", "modifier": "left"}}, "Turn left onto Nørrebrogade"),
        ({"name": "Gammel Kongevej", "maneuver": {"type": "new name", "modifier": "straight"}}, "Continue onto Gammel Kongevej"),
        ({"name": "", "maneuver": {"type": "continue"}}, "Continue straight"),
        ({"name": "", "maneuver": {"type": "roundabout", "exit": 2}}, "Enter the roundabout and take exit 2"),
        ({"name": "", "maneuver": {"type": "arrive"}}, ""),
    ],
)
def test_describe_maneuver(step, expected) -> None:
    assert describe_maneuver(step) == expected
