"""Envelope models for TripAdvisor Content API responses.

Only the fields the aggregator relies on are declared. Everything else is
kept as an open string-keyed mapping and passed through untouched.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel


class Category(str, Enum):
    HOTELS = "hotels"
    ATTRACTIONS = "attractions"
    RESTAURANTS = "restaurants"
    GEOS = "geos"


class RadiusUnit(str, Enum):
    KM = "km"
    MI = "mi"
    M = "m"


DEFAULT_RADIUS = 10
DEFAULT_PAGE_LIMIT = 5


class ApiError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
    type: str | None = None
    code: int | None = None


class Paging(BaseModel):
    model_config = ConfigDict(extra="allow")

    next: str | None = None
    previous: str | None = None
    results: int | None = None
    total_results: int | None = None
    skipped: int | None = None


class LocationDetailsResponse(RootModel[dict[str, Any]]):
    pass


class _ListEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[dict[str, Any]]
    paging: Paging | None = None
    error: ApiError | None = None


class LocationPhotosResponse(_ListEnvelope):
    pass


class LocationReviewsResponse(_ListEnvelope):
    pass


class LocationSearchResponse(_ListEnvelope):
    """Nearby search and location search share this response format."""
