from os import environ
from typing import Literal

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.errors import ConfigurationError

_cached_api_key: str | None = None


def _resolve_api_key() -> str:
    """Fetch the content API key at runtime, with caching."""
    global _cached_api_key
    if _cached_api_key is not None:
        return _cached_api_key

    # Local dev: use env var directly
    direct = environ.get("CONTENT_API_KEY", "")
    if direct:
        _cached_api_key = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("CONTENT_API_SECRET_ARN", "")
    if not arn:
        return ""

    from core.clients import get_secrets_client

    try:
        secret = get_secrets_client().get_secret_value(SecretId=arn)["SecretString"]
    except (BotoCoreError, ClientError) as e:
        raise ConfigurationError(f"Unable to read content API key from {arn}: {e}") from e

    _cached_api_key = secret
    return secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: str
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    content_api_base_url: str
    content_api_key: str = ""
    request_origin: str
    default_language: str = "en"
    default_currency: str = "MYR"
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config, _cached_api_key
    _cached_config = None
    _cached_api_key = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    try:
        config = Config(
            environment=environ.get("ENVIRONMENT", "local"),
            log_level=environ.get("LOG_LEVEL", "INFO"),
            content_api_base_url=environ.get(
                "CONTENT_API_BASE_URL", "https://api.content.tripadvisor.com/api/v1/location"
            ),
            content_api_key=_resolve_api_key(),
            request_origin=environ.get("REQUEST_ORIGIN", "http://localhost/"),
            default_language=environ.get("DEFAULT_LANGUAGE", "en"),
            default_currency=environ.get("DEFAULT_CURRENCY", "MYR"),
            upstream_timeout_seconds=environ.get("UPSTREAM_TIMEOUT_SECONDS", "10"),
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    _cached_config = config
    return config
