"""Adapter configuration and application settings.

GStoreConfig is the immutable value object the adapter is constructed with;
it accepts the host's camelCase keys (projectId, assetDomain, maxAge,
uniformBucketLevelAccess) as well as snake_case names. Settings reads the
same values from GSTORE_* environment variables and .env via
pydantic-settings, for hosts that configure the adapter from the environment.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from gstore.domain.exceptions import ConfigurationError

DEFAULT_MAX_AGE = 2678400  # 31 days


class GStoreConfig(BaseModel):
    """Storage adapter configuration.

    Every optional field carries its default here, so the adapter resolves
    defaults once at construction and never re-reads them. Supplied values
    are kept as given (a numeric-string maxAge stays a string).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    bucket: str | None = None
    key: str | None = None
    project_id: str | None = Field(default=None, alias="projectId")
    asset_domain: str | None = Field(default=None, alias="assetDomain")
    insecure: bool = False
    max_age: int | str = Field(default=DEFAULT_MAX_AGE, alias="maxAge")
    uniform_bucket_level_access: bool = Field(
        default=False, alias="uniformBucketLevelAccess"
    )

    @field_validator(
        "insecure", "max_age", "uniform_bucket_level_access", mode="before"
    )
    @classmethod
    def _default_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        """An explicit null in the host block means 'use the default'."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("max_age", mode="before")
    @classmethod
    def _validate_max_age(cls, value: Any) -> Any:
        """Accept integer seconds or a numeric string; reject everything else."""
        if isinstance(value, bool):
            raise ValueError("maxAge must be an integer or numeric string")
        if isinstance(value, str) and not (value.isascii() and value.isdigit()):
            raise ValueError(f"maxAge must be numeric, got {value!r}")
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GStoreConfig":
        """Build from the host's config block; invalid values raise ConfigurationError."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid storage adapter configuration",
                {"errors": exc.errors(include_url=False)},
            ) from exc


def load_host_config(path: str | Path) -> dict[str, Any]:
    """Read a host JSON config file (e.g. Ghost's config.production.json).

    Raises:
        ConfigurationError: File missing, unreadable, or not a JSON object.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            {"path": str(config_path)},
        )
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Could not read configuration file: {config_path}",
            {"path": str(config_path), "reason": str(exc)},
        ) from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            {"path": str(config_path)},
        )
    return payload


class Settings(BaseSettings):
    """Settings loaded from GSTORE_* environment variables and .env.

    host_config_path, when set, points at a host JSON config whose storage
    block takes precedence over the individual bucket/key/... variables.
    """

    app_name: str = "gstore"
    debug: bool = False
    log_level: str = "INFO"

    host_config_path: str | None = None
    adapter_name: str = "gcs"

    bucket: str = ""
    key: str | None = None
    project_id: str | None = None
    asset_domain: str | None = None
    insecure: bool = False
    max_age: int | str = DEFAULT_MAX_AGE
    uniform_bucket_level_access: bool = False

    model_config = SettingsConfigDict(
        env_prefix="GSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    def to_storage_config(self) -> GStoreConfig:
        """Adapter configuration from the individual GSTORE_* settings."""
        return GStoreConfig.from_mapping(
            {
                "bucket": self.bucket,
                "key": self.key,
                "project_id": self.project_id,
                "asset_domain": self.asset_domain,
                "insecure": self.insecure,
                "max_age": self.max_age,
                "uniform_bucket_level_access": self.uniform_bucket_level_access,
            }
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    In tests, call get_settings.cache_clear() after changing env vars.
    """
    return Settings()
