"""Utility functions."""

from .geo import EARTH_RADIUS_M, haversine_m, radius_for_zoom

__all__ = ["EARTH_RADIUS_M", "haversine_m", "radius_for_zoom"]
