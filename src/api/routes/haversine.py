"""
Distance endpoints
==================

GET /haversine?lat1=&lon1=&lat2=&lon2= -- great-circle distance in km
GET /input                             -- static HTML form for manual input
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_settings
from src.api.schemas import DistanceResponse
from src.api.validation import PARAMETERS, parse_coordinates
from src.config import Settings
from src.domain.distance import distance
from src.domain.entities import DistanceResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["distance"])

INPUT_FORM_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Haversine Calculator</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 40px; }
    label { display: block; margin-top: 10px; }
    input[type="text"] { padding: 5px; width: 200px; }
    input[type="submit"] { margin-top: 20px; padding: 10px 15px; }
  </style>
</head>
<body>
  <h1>Haversine Calculator</h1>
  <p>Enter the coordinates for two points to calculate the distance between them.</p>
  <form action="/haversine" method="get">
    <label for="lat1">Latitude 1:</label>
    <input type="text" id="lat1" name="lat1" required>

    <label for="lon1">Longitude 1:</label>
    <input type="text" id="lon1" name="lon1" required>

    <label for="lat2">Latitude 2:</label>
    <input type="text" id="lat2" name="lat2" required>

    <label for="lon2">Longitude 2:</label>
    <input type="text" id="lon2" name="lon2" required>

    <br>
    <input type="submit" value="Calculate Distance">
  </form>
</body>
</html>"""


@router.get(
    "/haversine",
    response_model=DistanceResponse,
    summary="Great-circle distance between two points",
    description=(
        "Takes ``lat1``, ``lon1``, ``lat2`` and ``lon2`` in decimal degrees. "
        "Missing or unparseable values are rejected with a plain-text 400."
    ),
    responses={400: {"description": "Missing or invalid query parameter."}},
)
async def get_distance(
    request: Request,
    config: Settings = Depends(get_settings),
):
    # First occurrence wins when a key is repeated.
    raw = {
        name: next(iter(request.query_params.getlist(name)), None)
        for name in PARAMETERS
    }
    p1, p2 = parse_coordinates(
        raw, enforce_ranges=config.enforce_coordinate_ranges
    )

    result = DistanceResult(distance_km=distance(p1, p2))
    logger.debug("Distance %s -> %s = %.3f km", p1, p2, result.distance_km)
    return DistanceResponse(distance=result.distance_km)


@router.get(
    "/input",
    response_class=HTMLResponse,
    summary="HTML form for manual input",
)
async def get_input_form():
    return HTMLResponse(INPUT_FORM_HTML)
