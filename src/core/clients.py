"""Client factories. boto3 clients are reused across warm Lambda invocations."""

import os
from functools import lru_cache
from typing import Any

import boto3
import httpx

from core.config import Config


@lru_cache(maxsize=1)
def get_secrets_client() -> Any:
    # Called while Config is still being built, so read the region directly.
    return boto3.client("secretsmanager", region_name=os.environ.get("AWS_REGION", "us-east-1"))


def build_http_client(config: Config) -> httpx.AsyncClient:
    """New AsyncClient per invocation; each one is bound to the event loop that uses it."""
    return httpx.AsyncClient(timeout=config.upstream_timeout_seconds)
