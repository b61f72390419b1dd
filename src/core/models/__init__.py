"""
Pydantic models for the location aggregator.
"""

from core.models.content import (
    ApiError,
    Category,
    LocationDetailsResponse,
    LocationPhotosResponse,
    LocationReviewsResponse,
    LocationSearchResponse,
    Paging,
    RadiusUnit,
)
from core.models.location import AggregatedLocation, LocationQuery

__all__ = [
    "AggregatedLocation",
    "ApiError",
    "Category",
    "LocationDetailsResponse",
    "LocationPhotosResponse",
    "LocationQuery",
    "LocationReviewsResponse",
    "LocationSearchResponse",
    "Paging",
    "RadiusUnit",
]
