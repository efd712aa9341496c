"""Mini README: Walking-directions subsystem.

``models`` defines the leg records providers return, ``base`` holds the
provider interface and its errors, ``registry`` resolves providers by name,
and ``providers`` contains the OSRM client and an offline straight-line
simulator.
"""

from .base import DirectionsError, DirectionsProvider, NoRouteFound
from .models import RouteLeg, RouteStep
from .registry import DirectionsProviderRegistry, REGISTRY
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "DirectionsError",
    "DirectionsProvider",
    "DirectionsProviderRegistry",
    "NoRouteFound",
    "REGISTRY",
    "RouteLeg",
    "RouteStep",
]
