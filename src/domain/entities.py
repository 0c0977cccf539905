"""Value objects passed between the request layer and the calculator."""

from __future__ import annotations

from dataclasses import dataclass

# Inclusive geographic bounds, only checked when range enforcement is on.
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DistanceResult:
    distance_km: float
