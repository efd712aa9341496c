"""Mini README: Abstract walking-directions provider.

Structure:
    * DirectionsError / NoRouteFound - provider level failures.
    * DirectionsProvider - asynchronous interface answering one leg at a time.

Providers translate a start and finish coordinate into a ``RouteLeg``. They
always use walking as the transport mode and leave timeout and cancellation
policy to their own configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..configuration import LoopRouteSettings, get_settings
from ..geometry import Coordinate
from ..logging_utils import get_logger
from .models import RouteLeg

LOGGER = get_logger(__name__)


class DirectionsError(Exception):
    """Base class for failures reported by a directions provider."""


class NoRouteFound(DirectionsError):
    """The provider answered but knows no walking path between the points."""

    def __init__(self, start: Coordinate, finish: Coordinate, reason: str = "") -> None:
        message = f"No walking route from {start.as_tuple()} to {finish.as_tuple()}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.start = start
        self.finish = finish


class DirectionsProvider(ABC):
    """Base interface for walking-directions integrations."""

    provider_name: str = "generic"

    def __init__(self, settings: Optional[LoopRouteSettings] = None) -> None:
        self.settings = settings or get_settings()
        LOGGER.debug("Initialising %s directions provider", self.provider_name)

    @abstractmethod
    async def fetch_leg(self, start: Coordinate, finish: Coordinate) -> RouteLeg:
        """Return the walking leg from ``start`` to ``finish``."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for status displays."""

        return {"provider": self.provider_name, "transport": "walking"}
