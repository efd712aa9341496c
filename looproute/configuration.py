"""Mini README: Centralised configuration models and helpers for LoopRoute.

Structure:
    * LoopRouteSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``LOOPROUTE_`` prefixed environment
    variables (or a local ``.env`` file). Settings choose the walking
    directions provider, its endpoint and timeout, the default number of
    stops and the service bind address. The configuration is cached so the
    cost of validation is incurred only once per process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LoopRouteSettings(BaseSettings):
    """Runtime configuration for route generation and the web service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the route service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the route service exposes.",
        ge=1,
        le=65535,
    )
    directions_provider: str = Field(
        "osrm",
        description="Registry identifier of the walking directions provider.",
    )
    osrm_base_url: str = Field(
        "https://router.project-osrm.org",
        description="Base URL of the OSRM server answering walking route requests.",
    )
    osrm_profile: str = Field(
        "foot",
        description="OSRM routing profile used for walking legs.",
    )
    request_timeout_seconds: float = Field(
        10.0,
        description="Timeout applied by HTTP based providers to each leg request.",
        gt=0,
    )
    default_stop_count: int = Field(
        10,
        description="Number of stop markers requested when the caller gives none.",
        ge=0,
    )
    spread_angle_degrees: float = Field(
        90.0,
        description="Angle at the user's corner of the generated loop.",
        ge=0,
        le=180,
    )
    concurrent_legs: bool = Field(
        False,
        description="Request the four legs concurrently instead of one after another.",
    )
    walking_speed_mps: float = Field(
        1.4,
        description="Walking speed used by the offline straight-line provider.",
        gt=0,
    )
    straight_line_samples: int = Field(
        6,
        description="Points emitted per leg by the offline straight-line provider.",
        ge=2,
    )

    class Config:
        env_prefix = "LOOPROUTE_"
        env_file = ".env"
        case_sensitive = False

    @validator("osrm_base_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so path joining never doubles slashes."""

        return value.rstrip("/")

    @validator("directions_provider")
    def _lower_provider(cls, value: str) -> str:
        """Provider identifiers are matched case-insensitively."""

        return value.lower()


@lru_cache()
def get_settings() -> LoopRouteSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LoopRouteSettings()
