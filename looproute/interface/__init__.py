"""Mini README: Interactive interfaces for LoopRoute.

Exports the FastAPI application factory powering the route editing
service. The Typer CLI lives in ``main_control_centre.py`` at the repository
root.
"""

from .web_app import create_application

__all__ = ["create_application"]
