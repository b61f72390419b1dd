"""Pydantic models for the inbound request and the aggregated response."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LocationQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location_id: int = Field(..., alias="locationId", gt=0, strict=True)


class AggregatedLocation(BaseModel):
    details: dict[str, Any]
    photos: list[dict[str, Any]]
    reviews: list[dict[str, Any]]
