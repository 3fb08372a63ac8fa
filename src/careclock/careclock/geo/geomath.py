"""Distance and containment on latitude/longitude pairs.

Containment fails closed: malformed input is reported as "outside", never as
an exception and never as "inside".
"""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from .model import LatLng


def distance_meters(a: LatLng, b: LatLng) -> float:
    """Great-circle distance in meters (haversine)."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlng = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    h = min(1.0, h)
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))


def is_finite_location(point: LatLng | None) -> bool:
    if point is None:
        return False
    try:
        return math.isfinite(point.latitude) and math.isfinite(point.longitude)
    except (TypeError, OverflowError):
        return False


def is_within(point: LatLng | None, center: LatLng | None, radius_meters: float) -> bool:
    """True exactly when ``point`` lies within ``radius_meters`` of ``center``."""
    if not is_finite_location(point) or not is_finite_location(center):
        return False
    try:
        if not math.isfinite(radius_meters) or radius_meters <= 0:
            return False
    except (TypeError, OverflowError):
        return False

    distance = distance_meters(point, center)
    if not math.isfinite(distance):
        return False
    return distance <= radius_meters
