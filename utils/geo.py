"""Geospatial helpers."""

import math

EARTH_RADIUS_M = 6_371_000.0

# Zoom thresholds (minimum zoom, radius in meters), most zoomed-in first
ZOOM_RADIUS_STEPS: tuple[tuple[float, int], ...] = (
    (18, 1_000),
    (16, 2_000),
    (14, 5_000),
    (12, 10_000),
    (10, 15_000),
)
WIDEST_RADIUS_M = 20_000


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def radius_for_zoom(zoom: float) -> int:
    """Pick a hotel search radius for a map zoom level.

    Zoom runs from 0 (whole world) to about 20 (building level); the closer
    the user is zoomed in, the smaller the area worth searching.
    """
    for min_zoom, radius in ZOOM_RADIUS_STEPS:
        if zoom >= min_zoom:
            return radius
    return WIDEST_RADIUS_M
