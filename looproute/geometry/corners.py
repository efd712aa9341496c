"""Mini README: Corner geometry for circular walking routes.

Structure:
    * Coordinate - immutable latitude/longitude pair in degrees.
    * Viewport - visible map region (centre plus angular span).
    * meters_per_degree - geodesic length of one degree of latitude/longitude.
    * lat_lon_ratios - latitude correction and loop radius for a viewport.
    * compute_corners - the three extra vertices of the loop.

The loop is a parallelogram with the user standing at one corner. Points A
and C sit one radius away on either side of the heading and point B sits on
the diagonal, so walking centre -> A -> B -> C -> centre circles back home.
The radius is a quarter of the visible latitudinal extent which keeps the
loop roughly inside the map the user is looking at. Everything here is pure
and deterministic; degenerate inputs (zero span, zero spread) give
coincident points rather than errors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from geopy.distance import geodesic

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

# Added to every heading before the corners are laid out. Without it the
# loop's first edge does not line up with the direction the user faces; the
# offset is kept until it is checked against real-world fixtures.
HEADING_CORRECTION_DEGREES = 90.0


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Geographic point in WGS84 degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Currently visible map region."""

    center: Coordinate
    latitude_span: float
    longitude_span: float

    def __post_init__(self) -> None:
        if self.latitude_span < 0 or self.longitude_span < 0:
            raise ValueError("Viewport spans must not be negative")


def normalise_heading(heading: float) -> float:
    """Fold any heading in degrees into the range [0, 360)."""

    return heading % 360.0


def meters_per_degree(center: Coordinate) -> Tuple[float, float]:
    """Return the metres covered by one degree of latitude and of longitude.

    Distances are measured on the WGS84 ellipsoid from ``center`` to a point
    one degree north (south when that would pass the pole) and one degree
    east.
    """

    latitude_step = 1.0 if center.latitude + 1.0 <= 90.0 else -1.0
    origin = center.as_tuple()
    lat_meters = geodesic(origin, (center.latitude + latitude_step, center.longitude)).meters
    lon_meters = geodesic(origin, (center.latitude, center.longitude + 1.0)).meters
    return lat_meters, lon_meters


def lat_lon_ratios(viewport: Viewport) -> Tuple[float, float]:
    """Return ``(lat_ratio, dist_ratio)`` for the viewport centre.

    ``lat_ratio`` scales latitude offsets so a loop drawn in degrees is not
    stretched north-south. ``dist_ratio`` is a quarter of the visible
    latitudinal extent expressed in degrees of longitude.
    """

    lat_meters, lon_meters = meters_per_degree(viewport.center)
    distance = viewport.latitude_span * lat_meters / 4
    lat_ratio = lon_meters / lat_meters
    if lon_meters == 0:
        # At the poles a degree of longitude has no length.
        return lat_ratio, 0.0
    return lat_ratio, distance / lon_meters


def _offset(
    center: Coordinate, distance: float, angle: float, lat_ratio: float
) -> Coordinate:
    return Coordinate(
        latitude=center.latitude + distance * lat_ratio * math.sin(angle),
        longitude=center.longitude - distance * math.cos(angle),
    )


def compute_corners(
    viewport: Viewport, heading: float, spread: float = 90.0
) -> Tuple[Coordinate, Coordinate, Coordinate]:
    """Return the left (A), far (B) and right (C) corners of the loop.

    ``heading`` is in degrees clockwise from north and may be any real
    value. ``spread`` is the angle at the user's corner, between 0 and 180
    degrees.
    """

    if not 0.0 <= spread <= 180.0:
        raise ValueError("Spread angle must lie between 0 and 180 degrees")

    lat_ratio, dist_ratio = lat_lon_ratios(viewport)
    rotated = math.radians(normalise_heading(heading + HEADING_CORRECTION_DEGREES))
    half_spread = math.radians(spread) / 2
    diagonal = dist_ratio * math.cos(half_spread) * 2

    left = _offset(viewport.center, dist_ratio, rotated - half_spread, lat_ratio)
    far = _offset(viewport.center, diagonal, rotated, lat_ratio)
    right = _offset(viewport.center, dist_ratio, rotated + half_spread, lat_ratio)
    LOGGER.debug(
        "Corners for centre %s heading %.1f spread %.1f -> %s %s %s",
        viewport.center,
        heading,
        spread,
        left,
        far,
        right,
    )
    return left, far, right
