"""
Settings for the authz HTTP integration.

Values are read from the environment (prefix ``AUTHZ_``) or an optional
``.env`` file, and may also be passed directly to ``AuthZSettings``.
"""
from functools import lru_cache
from typing import List

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import HttpMethod


class AuthZSettings(BaseSettings):
    """Authentication and authorization settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTHZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # JWT
    secret: SecretStr = Field(..., description="JWT signing secret")
    jwt_algorithm: str = Field(default="HS256")
    expiration_time_span: int = Field(default=3600, description="Token lifetime in seconds")

    # Authentication endpoint
    authentication_path: str = Field(default="/authenticate")
    authentication_method: HttpMethod = Field(default=HttpMethod.POST)

    # IAM endpoint
    iam_endpoint_enabled: bool = Field(default=True)
    iam_path: str = Field(default="/authz/iam")
    iam_method: HttpMethod = Field(default=HttpMethod.GET)

    # Path prefixes the middleware lets through untouched
    exempt_paths: List[str] = Field(default_factory=list)

    @field_validator("secret")
    @classmethod
    def _secret_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("Authentication secret must be set")
        return value

    @field_validator("expiration_time_span")
    @classmethod
    def _positive_expiration(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"expiration_time_span must be positive, got: {value}")
        return value

    @field_validator("authentication_method", "iam_method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("authentication_path", "iam_path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/', got: {value}")
        return value


@lru_cache()
def get_settings() -> AuthZSettings:
    """Get cached settings built from the environment."""
    return AuthZSettings()
