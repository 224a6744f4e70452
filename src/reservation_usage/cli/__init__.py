"""
Reservation usage CLI package.

This package exposes the top-level Typer `app` so tests and the console
entrypoint can import `reservation_usage.cli.app`.
"""

from .main import app

__all__ = ["app"]
