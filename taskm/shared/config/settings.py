# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Runtime configuration, read from the environment and an optional ``.env``.

Each section is its own settings class so it can be loaded (and overridden in
tests) independently. Field names are the Python attribute names; the
environment variable names are the aliases.
"""

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_ENV_SOURCE = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)

_INSECURE_SECRETS = frozenset({"", "dev", "development", "test", "secret", "changeme"})
_HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


def _truthy(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class DatabaseConfig(BaseSettings):
    """Where users and tasks live. Any SQLAlchemy URL works; SQLite by default."""

    url: str = Field("sqlite:///taskm.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _ENV_SOURCE


class SecurityConfig(BaseSettings):
    # Comma separated in the environment; "*" lets the mobile app's dev server in.
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _ENV_SOURCE

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_flag(cls, value: str | bool) -> bool:
        return _truthy(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")

    # Session tokens
    secret_key: str = Field("dev", alias="SECRET_KEY")
    token_ttl_days: int = Field(7, ge=1, alias="TOKEN_TTL_DAYS")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")

    # Logging
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(**_ENV_SOURCE, validate_assignment=True)

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_flag(cls, value: str | bool) -> bool:
        return _truthy(value)

    @field_validator("jwt_algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        # The same SECRET_KEY signs and verifies, so only HMAC makes sense.
        if value not in _HMAC_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {', '.join(_HMAC_ALGORITHMS)}")
        return value

    @model_validator(mode="after")
    def _refuse_insecure_production(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key.strip().lower() in _INSECURE_SECRETS:
            print(
                "\n❌ Refusing to start: SECRET_KEY is a development default.\n"
                "   Anyone who knows it can mint session tokens for any user.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = self.security_warnings()
        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   - {warning}", file=sys.stderr)
            print("", file=sys.stderr)

        return self

    def security_warnings(self) -> list[str]:
        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("CORS allows any origin (ALLOWED_ORIGINS=*)")
        if not self.security.enable_hsts:
            warnings.append("HSTS is disabled (set ENABLE_HSTS=1 behind HTTPS)")
        if len(self.secret_key) < 32:
            warnings.append("SECRET_KEY is shorter than 32 characters")
        return warnings

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]
