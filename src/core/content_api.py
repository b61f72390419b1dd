"""TripAdvisor Content API client.

Every call follows the same template: require the API key, build the query
string, GET with fixed browser-style headers, parse the JSON body whatever the
status, then either raise ``UpstreamError`` or return the validated envelope.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.config import Config
from core.errors import ConfigurationError, NetworkError, UpstreamError
from core.models.content import (
    DEFAULT_PAGE_LIMIT,
    DEFAULT_RADIUS,
    Category,
    LocationDetailsResponse,
    LocationPhotosResponse,
    LocationReviewsResponse,
    LocationSearchResponse,
    RadiusUnit,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ContentApiClient:
    """HTTP client for the location endpoints of the content API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        base_url: str,
        origin: str,
        default_language: str = "en",
        default_currency: str = "MYR",
    ) -> None:
        self._client = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Accept": "application/json",
            "Referer": origin,
            "Origin": origin,
        }
        self._default_language = default_language
        self._default_currency = default_currency

    @classmethod
    def from_config(cls, http_client: httpx.AsyncClient, config: Config) -> "ContentApiClient":
        return cls(
            http_client,
            api_key=config.content_api_key,
            base_url=config.content_api_base_url,
            origin=config.request_origin,
            default_language=config.default_language,
            default_currency=config.default_currency,
        )

    async def fetch_location_details(
        self,
        location_id: int,
        language: str | None = None,
        currency: str | None = None,
    ) -> LocationDetailsResponse:
        params = {
            "language": language or self._default_language,
            "currency": currency or self._default_currency,
        }
        return await self._get(
            f"/{location_id}/details", params, LocationDetailsResponse, "location details", location_id
        )

    async def fetch_location_photos(
        self,
        location_id: int,
        language: str | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        source: str | None = None,
    ) -> LocationPhotosResponse:
        params: dict[str, Any] = {
            "language": language or self._default_language,
            "limit": limit,
            "offset": offset,
        }
        if source:
            params["source"] = source
        return await self._get(
            f"/{location_id}/photos", params, LocationPhotosResponse, "location photos", location_id
        )

    async def fetch_location_reviews(
        self,
        location_id: int,
        language: str | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> LocationReviewsResponse:
        params = {
            "language": language or self._default_language,
            "limit": limit,
            "offset": offset,
        }
        return await self._get(
            f"/{location_id}/reviews", params, LocationReviewsResponse, "location reviews", location_id
        )

    async def fetch_location_search(
        self,
        search_query: str,
        lat_long: str | None = None,
        category: Category | None = None,
        phone: str | None = None,
        address: str | None = None,
        radius: int = DEFAULT_RADIUS,
        radius_unit: RadiusUnit = RadiusUnit.KM,
        language: str | None = None,
    ) -> LocationSearchResponse:
        """Search locations by free text, optionally narrowed by position, category, phone or address."""
        params: dict[str, Any] = {"searchQuery": search_query}
        if lat_long:
            params["latLong"] = lat_long
        if category:
            params["category"] = Category(category).value
        if phone:
            params["phone"] = phone
        if address:
            params["address"] = address
        params["radius"] = radius
        params["radiusUnit"] = RadiusUnit(radius_unit).value
        params["language"] = language or self._default_language
        return await self._get("/search", params, LocationSearchResponse, "search result", None)

    async def _get(
        self,
        path: str,
        params: dict[str, Any],
        response_model: type[ResponseT],
        label: str,
        location_id: int | None,
    ) -> ResponseT:
        if not self._api_key:
            logger.error("Failed to fetch %s for %s: API key is missing", label, location_id)
            raise ConfigurationError("API key is missing.")

        query = {"key": self._api_key, **params}
        url = f"{self._base_url}{path}"

        try:
            response = await self._client.get(url, params=query, headers=self._headers)
        except httpx.TransportError as e:
            logger.error("Failed to fetch %s for %s: %r", label, location_id, e)
            raise NetworkError(f"Unable to reach content API at {path}: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "Failed to fetch %s for %s: non-JSON body with status %d",
                label,
                location_id,
                response.status_code,
            )
            raise UpstreamError(
                f"Invalid JSON from {path} (status {response.status_code})",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not response.is_success:
            logger.error(
                "Failed to fetch %s for %s: HTTP %d %s",
                label,
                location_id,
                response.status_code,
                body,
            )
            raise UpstreamError(
                f"HTTP error! Status: {response.status_code} Response: {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response_model.model_validate(body)
        except PydanticValidationError as e:
            logger.error("Failed to fetch %s for %s: unexpected response shape", label, location_id)
            raise UpstreamError(
                f"Unexpected response shape from {path}: {e}",
                status_code=response.status_code,
                body=body,
            ) from e
