"""Unit tests for the details/photos/reviews aggregation."""

import asyncio
import json
import logging
import time

import httpx
import pytest

from core.content_api import ContentApiClient
from core.errors import ConfigurationError, UpstreamError
from core.services.aggregation import aggregate_location

BASE_URL = "https://content.test/api/v1/location"


def _transport(responses, delays=None, completed=None):
    """MockTransport answering by path suffix, optionally after a delay."""
    delays = delays or {}

    async def handle(request: httpx.Request) -> httpx.Response:
        suffix = request.url.path.rsplit("/", 1)[-1]
        await asyncio.sleep(delays.get(suffix, 0))
        if completed is not None:
            completed.append(suffix)
        status, payload = responses[suffix]
        return httpx.Response(status, json=payload)

    return httpx.MockTransport(handle)


def _client(http_client: httpx.AsyncClient, api_key: str = "test-key") -> ContentApiClient:
    return ContentApiClient(http_client, api_key=api_key, base_url=BASE_URL, origin="https://app.test/")


@pytest.fixture
def ok_responses(details_payload, photos_payload, reviews_payload):
    return {
        "details": (200, details_payload),
        "photos": (200, photos_payload),
        "reviews": (200, reviews_payload),
    }


@pytest.mark.asyncio
async def test_aggregate_location_merges_payloads(ok_responses, details_payload, photos_payload, reviews_payload):
    async with httpx.AsyncClient(transport=_transport(ok_responses)) as http_client:
        result = await aggregate_location(_client(http_client), 12345)

    assert result.details == details_payload
    assert result.photos == photos_payload["data"]
    assert result.reviews == reviews_payload["data"]


@pytest.mark.asyncio
async def test_upstream_calls_run_concurrently(ok_responses):
    delays = {"details": 0.3, "photos": 0.3, "reviews": 0.3}
    async with httpx.AsyncClient(transport=_transport(ok_responses, delays)) as http_client:
        started = time.perf_counter()
        await aggregate_location(_client(http_client), 12345)
        elapsed = time.perf_counter() - started

    # Sequential calls would take ~0.9s
    assert 0.3 <= elapsed < 0.6


@pytest.mark.asyncio
async def test_single_failure_fails_whole_aggregation(ok_responses):
    ok_responses["reviews"] = (500, {"error": {"message": "boom", "type": "ServerError", "code": 500}})
    async with httpx.AsyncClient(transport=_transport(ok_responses)) as http_client:
        with pytest.raises(UpstreamError) as exc_info:
            await aggregate_location(_client(http_client), 12345)

    assert exc_info.value.upstream_status == 500


@pytest.mark.asyncio
async def test_first_failure_cancels_in_flight_calls(ok_responses):
    ok_responses["photos"] = (403, {"error": {"message": "forbidden"}})
    delays = {"details": 1.0, "reviews": 1.0}
    completed: list[str] = []

    async with httpx.AsyncClient(transport=_transport(ok_responses, delays, completed)) as http_client:
        started = time.perf_counter()
        with pytest.raises(UpstreamError):
            await aggregate_location(_client(http_client), 12345)
        elapsed = time.perf_counter() - started

    assert elapsed < 0.5
    assert completed == ["photos"]


@pytest.mark.asyncio
async def test_missing_api_key_fails_aggregation(ok_responses):
    async with httpx.AsyncClient(transport=_transport(ok_responses)) as http_client:
        with pytest.raises(ConfigurationError):
            await aggregate_location(_client(http_client, api_key=""), 12345)


@pytest.mark.asyncio
async def test_successful_aggregation_logs_full_payload(ok_responses, caplog):
    caplog.set_level(logging.INFO, logger="core.services.aggregation")

    async with httpx.AsyncClient(transport=_transport(ok_responses)) as http_client:
        result = await aggregate_location(_client(http_client), 12345)

    assert "Aggregated location 12345" in caplog.text
    assert result.model_dump_json() in caplog.text
    assert json.loads(result.model_dump_json())["details"]["name"] == "Petronas Twin Towers"


@pytest.mark.asyncio
async def test_earliest_failure_is_raised(ok_responses):
    ok_responses["details"] = (500, {"error": {"message": "slow failure"}})
    ok_responses["reviews"] = (404, {"error": {"message": "fast failure"}})
    delays = {"details": 0.2, "photos": 0.5}

    async with httpx.AsyncClient(transport=_transport(ok_responses, delays)) as http_client:
        with pytest.raises(UpstreamError) as exc_info:
            await aggregate_location(_client(http_client), 12345)

    assert exc_info.value.upstream_status == 404
