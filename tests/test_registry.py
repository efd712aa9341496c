"""Mini README: Tests for the directions provider registry.

Ensures built-in providers register on import and that the registry honours
both explicit identifiers and the configured default.
"""

import pytest

from looproute.directions import REGISTRY, DirectionsProvider
from looproute.directions.providers import OSRMWalkingProvider, StraightLineProvider


def test_registry_contains_builtin_providers():
    assert {"osrm", "straight-line"} <= set(REGISTRY.available_providers())


def test_registry_instantiates_named_provider(settings):
    provider = REGISTRY.create("OSRM", settings=settings)
    assert isinstance(provider, DirectionsProvider)
    assert isinstance(provider, OSRMWalkingProvider)
    assert provider.metadata()["transport"] == "walking"


def test_registry_defaults_to_configured_provider(settings):
    assert isinstance(REGISTRY.create(settings=settings), StraightLineProvider)


def test_registry_rejects_unknown_provider(settings):
    with pytest.raises(KeyError):
        REGISTRY.create("teleport", settings=settings)
