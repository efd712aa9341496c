"""Mini README: Entry point CLI for LoopRoute.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI route editing service through uvicorn, and ``plan`` generates a loop
route from the command line and prints the same figures the service shows.
Settings come from ``LOOPROUTE_`` environment variables when options are
omitted.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional

import typer
import uvicorn

from looproute.configuration import get_settings
from looproute.directions import REGISTRY
from looproute.geometry import Coordinate, Viewport
from looproute.logging_utils import configure_root_logger
from looproute.route_planning import LegRequestFailed, RoutePlanner
from looproute.utils.geojson import route_plan_to_geojson

cli = typer.Typer(help="Generate and edit circular walking routes.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting LoopRoute on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "looproute.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def plan(
    latitude: float = typer.Argument(..., help="Latitude of the map centre."),
    longitude: float = typer.Argument(..., help="Longitude of the map centre."),
    span: float = typer.Option(0.01, help="Visible latitudinal span in degrees."),
    heading: float = typer.Option(0.0, help="Heading in degrees clockwise from north."),
    stops: Optional[int] = typer.Option(None, help="Number of stops to keep."),
    provider: Optional[str] = typer.Option(None, help="Directions provider identifier."),
    directions: bool = typer.Option(False, help="Print turn-by-turn directions."),
    geojson: bool = typer.Option(False, help="Print the plan as GeoJSON."),
    verbose: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Generate a loop route around a point and print its summary."""

    configure_root_logger(logging.DEBUG if verbose else logging.WARNING)
    settings = get_settings()
    try:
        directions_provider = REGISTRY.create(provider, settings=settings)
    except KeyError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2) from error

    planner = RoutePlanner(directions_provider, settings=settings)
    viewport = Viewport(
        center=Coordinate(latitude=latitude, longitude=longitude),
        latitude_span=span,
        longitude_span=span,
    )
    try:
        route = asyncio.run(planner.generate_route(viewport, heading, stops))
    except LegRequestFailed as error:
        typer.echo(f"Route generation failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    if geojson:
        typer.echo(json.dumps(route_plan_to_geojson(route), indent=2))
        return

    summary = route.summary()
    typer.echo(f"Name: {summary['title']}")
    typer.echo(f"Distance: {summary['distance_m']}m")
    typer.echo(f"Expected travel time: {summary['expected_travel_time_s']}s")
    typer.echo(f"Stops: {summary['stops']}")
    if directions:
        typer.echo("Directions:")
        for number, instruction in enumerate(route.step_directions, start=1):
            typer.echo(f"  {number}. {instruction}")


if __name__ == "__main__":
    cli()
