#!/usr/bin/env python3
"""
Distance Calculator - great-circle distance between coordinate pairs.

Spherical-earth (haversine) approximation. Used as a filter predicate only,
so a few meters of error against an ellipsoidal model do not matter.
"""
import math
from dataclasses import dataclass
from typing import Tuple

EARTH_RADIUS_M = 6_371_000.0
METERS_PER_DEGREE_LAT = 111_320.0


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""
    lat: float
    lon: float


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate great-circle distance in meters between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Non-negative distance in meters; 0.0 when the points are equal
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = abs(lat2 - lat1)
    dlon = abs(math.radians(b.lon) - math.radians(a.lon))

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1.0 for antipodal points
    h = min(1.0, h)
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))


def bounding_box(center: GeoPoint, radius_m: float) -> Tuple[float, float, float, float]:
    """
    Latitude/longitude window that contains every point within radius_m of center.

    The window is deliberately loose (1% margin, full longitude range near the
    poles); callers must still apply haversine_m for the exact check.

    Returns:
        (min_lat, max_lat, min_lon, max_lon)
    """
    margin = radius_m * 1.01
    dlat = margin / METERS_PER_DEGREE_LAT

    min_lat = max(-90.0, center.lat - dlat)
    max_lat = min(90.0, center.lat + dlat)

    cos_lat = math.cos(math.radians(max(abs(min_lat), abs(max_lat))))
    if cos_lat < 1e-6:
        return min_lat, max_lat, -180.0, 180.0

    dlon = margin / (METERS_PER_DEGREE_LAT * cos_lat)
    if dlon >= 180.0:
        return min_lat, max_lat, -180.0, 180.0

    return min_lat, max_lat, center.lon - dlon, center.lon + dlon
