"""HTTP handler that aggregates details, photos and reviews for one location."""

import asyncio
import base64
import binascii
import json
import logging
import traceback
from os import environ
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.clients import build_http_client
from core.config import Config, get_config
from core.content_api import ContentApiClient
from core.errors import (
    STATUS_CODES,
    USER_MESSAGES,
    AggregatorError,
    ConfigurationError,
    ErrorCode,
    RequestFormatError,
)
from core.models import AggregatedLocation, LocationQuery
from core.services.aggregation import aggregate_location

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config, config_error = _load_config()

    try:
        query = parse_request(event)
    except RequestFormatError as e:
        logger.warning("Failed to parse request: %s", e.message)
        return _error_response(e, config)

    if config is None:
        logger.error("Failed to load configuration: %s", config_error)
        return _error_response(config_error, config)

    try:
        aggregated = asyncio.run(_aggregate(config, query.location_id))
    except Exception as e:
        logger.exception("Failed to fetch data for location %d", query.location_id)
        return _error_response(e, config)

    return {"statusCode": 200, "headers": JSON_HEADERS, "body": aggregated.model_dump_json()}


def parse_request(event: dict[str, Any]) -> LocationQuery:
    body = event.get("body")
    if body is None:
        raise RequestFormatError("Request body is missing")

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body)
        except (binascii.Error, ValueError) as e:
            raise RequestFormatError(f"Request body is not valid base64: {e}") from e

    try:
        return LocationQuery.model_validate_json(body)
    except PydanticValidationError as e:
        raise RequestFormatError(f"Invalid request body: {e}") from e


def _load_config() -> tuple[Config | None, ConfigurationError | None]:
    try:
        config = get_config()
    except ConfigurationError as e:
        return None, e

    logging.getLogger().setLevel(config.log_level)
    return config, None


async def _aggregate(config: Config, location_id: int) -> AggregatedLocation:
    async with build_http_client(config) as http_client:
        client = ContentApiClient.from_config(http_client, config)
        return await aggregate_location(client, location_id)


def _error_response(error: Exception, config: Config | None) -> dict[str, Any]:
    code = error.code if isinstance(error, AggregatorError) else ErrorCode.INTERNAL_ERROR
    payload: dict[str, Any] = {"message": USER_MESSAGES[code], "code": code.value}

    # Internal detail stays out of production responses
    environment = config.environment if config else environ.get("ENVIRONMENT", "local")
    if environment != "production":
        payload["stack"] = "".join(traceback.format_exception(error))

    return {
        "statusCode": STATUS_CODES[code],
        "headers": JSON_HEADERS,
        "body": json.dumps({"error": payload}),
    }
