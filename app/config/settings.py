"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime and upstream configuration.

    Environment variable names map directly to field names in uppercase.
    Example: `swapi_url` reads from `SWAPI_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        swapi_url: Base URL of the upstream Star Wars API.
        upstream_timeout_seconds: Timeout applied to every upstream request.
        upstream_max_concurrency: Upper bound of concurrent per-record fetches in one request.
        upstream_user_agent: User-Agent header sent upstream.
        log_level: Root log level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=3000, ge=1, le=65535)
    swapi_url: str = Field(default="https://www.swapi.tech/api", min_length=1)
    upstream_timeout_seconds: float = Field(default=30.0, gt=0)
    upstream_max_concurrency: int = Field(default=10, ge=1, le=100)
    upstream_user_agent: str = Field(default="swapi-people-proxy/1.0 (Python/httpx)", min_length=1)
    log_level: str = Field(default="INFO")

    @field_validator("swapi_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        stripped_value = value.strip().rstrip("/")
        if not stripped_value:
            raise ValueError("value must not be blank")
        if not stripped_value.startswith(("http://", "https://")):
            raise ValueError("swapi_url must be an absolute http(s) URL")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log_level={value}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
