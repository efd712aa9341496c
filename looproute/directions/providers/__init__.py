"""Mini README: Concrete walking-directions providers.

New providers should subclass ``DirectionsProvider`` and call
``REGISTRY.register`` during module import to become selectable through the
``directions_provider`` setting.
"""

from .osrm_provider import OSRMWalkingProvider
from .straight_line_provider import StraightLineProvider

__all__ = ["OSRMWalkingProvider", "StraightLineProvider"]
