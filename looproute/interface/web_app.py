"""Mini README: FastAPI-powered route editing service for LoopRoute.

Structure:
    * create_application - application factory wiring routes and state.
    * Request models - Pydantic bodies for generation and stop editing.
    * Session state - in-memory holder of the plan currently being edited.

The service generates loop routes from a map snapshot, lets clients add and
drag stop markers, and exports the current plan as JSON or GeoJSON. A single
plan is kept per application instance, mirroring one user editing one map.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import get_settings
from ..directions import REGISTRY, DirectionsProvider
from ..geometry import Coordinate, Viewport
from ..logging_utils import get_logger
from ..route_planning import LegRequestFailed, RoutePlan, RoutePlanner
from ..utils.geojson import route_plan_to_geojson
from ..waypoints import append_stop, move_stop

LOGGER = get_logger(__name__)


class CoordinateBody(BaseModel):
    """Latitude/longitude pair in degrees."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class GenerateRouteRequest(BaseModel):
    """Map snapshot used to generate a loop route."""

    center: CoordinateBody
    latitude_span: float = Field(..., ge=0)
    longitude_span: float = Field(..., ge=0)
    heading: float = 0.0
    stops: Optional[int] = Field(None, ge=0)


def create_application(provider: Optional[DirectionsProvider] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="LoopRoute", version="0.1.0")
    settings = get_settings()
    planner = RoutePlanner(provider, settings=settings)

    session_state: Dict[str, Optional[RoutePlan]] = {"plan": None}

    def current_plan() -> RoutePlan:
        plan = session_state["plan"]
        if plan is None:
            raise HTTPException(status_code=404, detail="No route plan has been created yet")
        return plan

    @app.get("/")
    async def status() -> JSONResponse:
        """Summarise the service and the plan being edited."""

        plan = session_state["plan"]
        return JSONResponse(
            {
                "providers": list(REGISTRY.available_providers()),
                "active_provider": planner.provider.metadata(),
                "default_stops": settings.default_stop_count,
                "plan": plan.summary() if plan else None,
            }
        )

    @app.post("/generate-route")
    async def generate_route(body: GenerateRouteRequest) -> JSONResponse:
        """Generate a fresh loop route and make it the current plan."""

        viewport = Viewport(
            center=body.center.to_coordinate(),
            latitude_span=body.latitude_span,
            longitude_span=body.longitude_span,
        )
        try:
            plan = await planner.generate_route(viewport, body.heading, body.stops)
        except LegRequestFailed as error:
            raise HTTPException(status_code=502, detail=str(error)) from error
        session_state["plan"] = plan
        return JSONResponse(plan.as_dict())

    @app.get("/route-plan")
    async def route_plan() -> JSONResponse:
        """Return the current plan."""

        return JSONResponse(current_plan().as_dict())

    @app.get("/route-plan/geojson")
    async def route_plan_geojson() -> JSONResponse:
        """Return the current plan as a GeoJSON FeatureCollection."""

        return JSONResponse(route_plan_to_geojson(current_plan()))

    @app.post("/stops")
    async def add_stop(body: CoordinateBody) -> JSONResponse:
        """Append a stop, creating an empty plan when none exists."""

        plan = append_stop(session_state["plan"], body.to_coordinate())
        session_state["plan"] = plan
        LOGGER.info("Stop added, plan now has %s stops", len(plan.stop_markers))
        return JSONResponse(plan.stop_markers[-1].as_dict(), status_code=201)

    @app.patch("/stops/{title}")
    async def drag_stop(title: str, body: CoordinateBody) -> JSONResponse:
        """Move an existing stop to a new coordinate."""

        try:
            plan = move_stop(current_plan(), title, body.to_coordinate())
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        session_state["plan"] = plan
        return JSONResponse({"stop_markers": [marker.as_dict() for marker in plan.stop_markers]})

    @app.get("/stops/trace")
    async def stop_trace() -> JSONResponse:
        """Return the polyline joining the current stops."""

        trace = current_plan().stop_trace
        return JSONResponse({"coordinates": [list(point.as_tuple()) for point in trace]})

    return app
