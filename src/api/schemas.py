"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class DistanceResponse(BaseModel):
    distance: float = Field(..., ge=0, description="Great-circle distance in km.")
