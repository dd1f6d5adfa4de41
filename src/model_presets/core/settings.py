"""Unified settings loader for env + yaml configuration."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from model_presets.core.errors import ConfigError
from model_presets.core.log import normalize_log_level
from model_presets.core.utils import load_yaml, pick_env
from model_presets.presets.auth import AuthMode, parse_auth_mode

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "MODEL_PRESETS_"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    auth_mode: AuthMode | None = Field(default=None)
    base_url: str | None = Field(default=None)
    access_token: str | None = Field(default=None, repr=False)
    request_timeout_s: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO")
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))

    @field_validator("auth_mode", mode="before")
    @classmethod
    def _coerce_auth_mode(cls, value: Any) -> AuthMode | None:
        return parse_auth_mode(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: Any) -> str:
        return normalize_log_level(value)


class SettingsBundle:
    def __init__(self, settings: AppSettings, config: dict[str, Any]) -> None:
        self.settings = settings
        self.config = config


def _resolve_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(f"{ENV_PREFIX}DEFAULT_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> SettingsBundle:
    """Merge the YAML file, ``MODEL_PRESETS_*`` env vars and explicit overrides.

    Later sources win. ``None`` overrides are ignored so CLI flags that were
    not given fall through to env and file values.
    """
    path = _resolve_config_path(config_path)
    config = load_yaml(path)

    payload: dict[str, Any] = {"default_config_path": str(path)}
    for name in ("auth_mode", "base_url", "access_token", "request_timeout_s", "log_level"):
        value = pick_env(f"{ENV_PREFIX}{name.upper()}", config.get(name))
        if value is not None:
            payload[name] = value
    payload.update({name: value for name, value in overrides.items() if value is not None})

    try:
        settings = AppSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
    return SettingsBundle(settings=settings, config=config)
