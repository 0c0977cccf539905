"""
Great-circle distance using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of radius ``EARTH_RADIUS_KM``.  Results are
within ~0.5 % of the ellipsoidal (Vincenty) distance, which is good enough
for a calculator endpoint.

Numerics
--------
Degrees are converted with ``math.radians`` before differencing, so any pair
of finite inputs stays finite.  The haversine term ``a`` and its complement
``1 - a`` are each written as a sum of squares:

    a     = sin²(Δφ/2)·cos²(Δλ/2) + cos²(φm)·sin²(Δλ/2)
    1 - a = cos²(Δφ/2)·cos²(Δλ/2) + sin²(φm)·sin²(Δλ/2)

with ``φm`` the mean latitude.  Both are algebraically identical to the
textbook ``sin²(Δφ/2) + cos φ1·cos φ2·sin²(Δλ/2)`` form and its complement,
but neither can round below zero, so near-antipodal points no longer hit a
``math domain error``.  Nothing is clamped.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = lat2_r - lat1_r
    dlon = math.radians(lon2) - math.radians(lon1)
    mid = lat1_r / 2 + lat2_r / 2

    sin_dlat, cos_dlat = math.sin(dlat / 2) ** 2, math.cos(dlat / 2) ** 2
    sin_dlon, cos_dlon = math.sin(dlon / 2) ** 2, math.cos(dlon / 2) ** 2

    a = sin_dlat * cos_dlon + math.cos(mid) ** 2 * sin_dlon
    a_complement = cos_dlat * cos_dlon + math.sin(mid) ** 2 * sin_dlon
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(a_complement))
    return EARTH_RADIUS_KM * c


def distance(p1: Coordinate, p2: Coordinate) -> float:
    return haversine_km(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
