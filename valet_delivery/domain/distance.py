"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of radius 6 371 km.  Great-circle
distance is an approximation of the real (ellipsoidal) geodesic, which is
good enough for ranking customers by proximity to the valet.

Coordinates are not range-checked here: out-of-range values still give a
well-defined number.  Non-finite coordinates (NaN / inf), or values so
large that their difference overflows, give ``nan`` so the ranking layer
can push them to the end instead of crashing.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    if not all(math.isfinite(v) for v in (lat1, lng1, lat2, lng2)):
        return math.nan

    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    # huge out-of-range inputs can overflow the differences
    if not (math.isfinite(dlat) and math.isfinite(dlng)):
        return math.nan

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # rounding can push ``a`` just outside [0, 1]
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(max(a, 0.0), 1.0)))


def distance_between(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """Great-circle distance in km between two ``GeoPoint`` values."""
    return haversine_km(
        point_a.latitude, point_a.longitude,
        point_b.latitude, point_b.longitude,
    )
