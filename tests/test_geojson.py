"""Mini README: Tests for route plan exports (GeoJSON and dictionaries)."""

from __future__ import annotations

from looproute.geometry import Coordinate
from looproute.route_planning import assemble_route_plan
from looproute.utils.geojson import route_plan_to_geojson

CENTER = Coordinate(latitude=55.6706, longitude=12.5352)


def test_geojson_contains_legs_trace_stops_and_corners(make_leg) -> None:
    legs = [make_leg(number) for number in range(1, 5)]
    plan = assemble_route_plan(legs, [CENTER] * 4, stop_count=3)

    collection = route_plan_to_geojson(plan)

    kinds = [feature["properties"]["kind"] for feature in collection["features"]]
    assert kinds.count("leg") == 4
    assert kinds.count("stop_trace") == 1
    assert kinds.count("stop") == 3
    assert kinds.count("corner") == 4
    corner = next(f for f in collection["features"] if f["properties"]["kind"] == "corner")
    assert corner["geometry"]["coordinates"] == [CENTER.longitude, CENTER.latitude]
    assert collection["properties"]["stops"] == 3


def test_plan_dictionary_is_json_ready(make_leg) -> None:
    legs = [make_leg(number, distance=250.4, duration=180.6) for number in range(1, 5)]
    plan = assemble_route_plan(legs, [CENTER] * 4, stop_count=2)

    payload = plan.as_dict()

    assert payload["title"] == "Leg 2"
    assert payload["distance_m"] == 1002
    assert payload["expected_travel_time_s"] == 722
    assert payload["stops"] == 2
    assert len(payload["stop_trace"]) == 2
    assert [corner["title"] for corner in payload["corners"]] == ["A", "B", "C", "D"]
