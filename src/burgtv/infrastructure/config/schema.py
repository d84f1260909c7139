"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _split_origins(value: Any) -> Any:
    """Accept a comma-separated string (``a.com,b.com``) as an origin list."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class PlaylistValidationConfig(BaseModel):
    """Configuration for the M3U playlist validator.

    All values configurable via YAML (validation section) or ENV vars.
    """

    head_timeout_seconds: float = Field(
        default=10.0,
        description="Deadline for the HEAD probe (seconds).",
    )
    content_timeout_seconds: float = Field(
        default=15.0,
        description="Deadline for the ranged content probe (seconds).",
    )
    prefix_bytes: int = Field(
        default=2048,
        description="Last byte offset of the content sample (Range: bytes=0-N).",
    )
    detailed: bool = Field(
        default=True,
        description="Sample and parse playlist content after the HEAD probe.",
    )

    @field_validator("head_timeout_seconds", "content_timeout_seconds")
    @classmethod
    def _validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("validation timeouts must be > 0")
        return v

    @field_validator("prefix_bytes")
    @classmethod
    def _validate_prefix_bytes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("prefix_bytes must be > 0")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/validation/cors).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="burgtv", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects log format and error detail).",
    )

    # HTTP client (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Default timeout in seconds for outgoing HTTP requests.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default="BurgTV-API/1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Playlist validator (YAML section: validation.*)
    validation: PlaylistValidationConfig = Field(
        default_factory=PlaylistValidationConfig
    )

    # CORS (YAML section: cors.*)
    cors_allowed_origins: list[str] = Field(
        default=["*"],
        validation_alias=AliasChoices(
            "cors_allowed_origins",
            AliasPath("cors", "allowed_origins"),
        ),
        description="Origins allowed for cross-origin requests ('*' = any).",
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def _validate_origins(cls, v: Any) -> Any:
        return _split_origins(v)

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "validation": self.validation.model_dump(),
            "cors": {"allowed_origins": list(self.cors_allowed_origins)},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read BURGTV_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - BURGTV_ENVIRONMENT
    - BURGTV_HTTP_USER_AGENT
    - BURGTV_LOG_LEVEL
    - BURGTV_VALIDATION_HEAD_TIMEOUT_SECONDS
    - BURGTV_CORS_ALLOWED_ORIGINS (comma-separated)
    """

    model_config = SettingsConfigDict(
        env_prefix="BURGTV_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    validation_head_timeout_seconds: Optional[float] = None
    validation_content_timeout_seconds: Optional[float] = None
    validation_prefix_bytes: Optional[int] = None
    validation_detailed: Optional[bool] = None

    # Plain string: pydantic-settings would expect JSON for a list field.
    cors_allowed_origins: Optional[str] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        data = self.model_dump(exclude_none=True)
        if "cors_allowed_origins" in data:
            data["cors_allowed_origins"] = _split_origins(data["cors_allowed_origins"])
        return data
