"""
Query-string validation for the distance endpoint.

Checks run in two passes so the error reported is deterministic:

1. every parameter must be present and non-empty, otherwise
   ``MissingParameter`` is raised without naming which one is absent;
2. values are parsed in the fixed order ``lat1, lon1, lat2, lon2`` and the
   first bad one raises ``InvalidParameter``.  Later fields are not looked at.
"""

from __future__ import annotations

import math
import re
from typing import Mapping, Optional

from src.domain.entities import LATITUDE_RANGE, LONGITUDE_RANGE, Coordinate
from src.domain.errors import InvalidParameter, MissingParameter

PARAMETERS: tuple[str, ...] = ("lat1", "lon1", "lat2", "lon2")

# Plain decimal with optional exponent; ``float()`` alone would also accept
# surrounding whitespace and digit underscores.
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_BOUNDS = {
    "lat1": LATITUDE_RANGE,
    "lat2": LATITUDE_RANGE,
    "lon1": LONGITUDE_RANGE,
    "lon2": LONGITUDE_RANGE,
}


def parse_float(field: str, raw: str) -> float:
    """Parse *raw* as a finite 64-bit float or raise ``InvalidParameter``."""
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidParameter(field)
    value = float(raw)
    if not math.isfinite(value):
        # e.g. "1e400" overflows to inf
        raise InvalidParameter(field)
    return value


def parse_coordinates(
    params: Mapping[str, Optional[str]],
    *,
    enforce_ranges: bool = False,
) -> tuple[Coordinate, Coordinate]:
    """Turn the four raw query values into a pair of ``Coordinate``s."""
    if any(not params.get(name) for name in PARAMETERS):
        raise MissingParameter(PARAMETERS)

    values: dict[str, float] = {}
    for name in PARAMETERS:
        value = parse_float(name, params[name])
        if enforce_ranges:
            lo, hi = _BOUNDS[name]
            if not lo <= value <= hi:
                raise InvalidParameter(name)
        values[name] = value

    return (
        Coordinate(values["lat1"], values["lon1"]),
        Coordinate(values["lat2"], values["lon2"]),
    )
