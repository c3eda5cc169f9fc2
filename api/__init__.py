"""HTTP API for nearby-hotel search."""

from .app import create_app

__all__ = ["create_app"]
