"""Mini README: Registry of walking-directions providers.

Structure:
    * DirectionsProviderRegistry - maps identifiers to ``DirectionsProvider``
      classes and instantiates them with the active settings.

Providers register themselves when their module is imported, so the
configured ``directions_provider`` name can be resolved at runtime.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from .base import DirectionsProvider
from ..configuration import LoopRouteSettings, get_settings
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class DirectionsProviderRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[DirectionsProvider]] = {}

    def register(self, provider: Type[DirectionsProvider]) -> None:
        """Register a new provider class with the registry."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering directions provider '%s'", identifier)
        self._providers[identifier] = provider

    def available_providers(self) -> Iterable[str]:
        """Return iterable of provider identifiers for display."""

        return sorted(self._providers.keys())

    def create(
        self, identifier: Optional[str] = None, *, settings: Optional[LoopRouteSettings] = None
    ) -> DirectionsProvider:
        """Instantiate the named provider, defaulting to the configured one."""

        settings = settings or get_settings()
        identifier = (identifier or settings.directions_provider).lower()
        provider_cls = self._providers.get(identifier)
        if not provider_cls:
            raise KeyError(f"Unknown directions provider '{identifier}'")
        LOGGER.info("Creating directions provider '%s'", identifier)
        return provider_cls(settings=settings)


REGISTRY = DirectionsProviderRegistry()
