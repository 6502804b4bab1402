"""Configuration for subclip using pydantic-settings."""

from __future__ import annotations

import functools
import os
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

INPUT_ENCODING = "utf-8-sig"  # tolerate a BOM on input
OUTPUT_ENCODING = "utf-8"

DEFAULT_CONFIG_FILE = "subclip.toml"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_METRICS_PATH = Path.home() / ".cache" / "subclip" / "metrics.jsonl"


class AppEnv(StrEnum):
    DEV = "dev"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    PLAIN = "plain"
    JSON = "json"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read ``[logging]`` and ``[metrics]`` tables from a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_file: str | Path):
        super().__init__(settings_cls)
        self.toml_file = Path(toml_file)

    def get_field_value(self, field_name: str, field_data: Any) -> tuple[Any, str, bool]:
        # Not used in this source style
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        if not self.toml_file.is_file():
            return {}

        import tomllib

        try:
            with open(self.toml_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return {}

        flattened: dict[str, Any] = {}

        logging_section = data.get("logging", {})
        if isinstance(logging_section, dict):
            if "level" in logging_section:
                flattened["log_level"] = logging_section["level"]
            if "format" in logging_section:
                flattened["log_format"] = logging_section["format"]

        metrics_section = data.get("metrics", {})
        if isinstance(metrics_section, dict):
            if "enabled" in metrics_section:
                flattened["metrics_enabled"] = metrics_section["enabled"]
            if "path" in metrics_section:
                flattened["metrics_path"] = metrics_section["path"]

        if "app_env" in data:
            flattened["app_env"] = data["app_env"]

        return flattened


def _config_file() -> Path:
    return Path(os.getenv("SUBCLIP_CONFIG_FILE") or DEFAULT_CONFIG_FILE)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SUBCLIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    app_env: AppEnv = Field(
        default=AppEnv.PRODUCTION,
        validation_alias=AliasChoices("app_env", "SUBCLIP_APP_ENV", "APP_ENV"),
    )
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: LogFormat = LogFormat.PLAIN
    metrics_enabled: bool = False
    metrics_path: Path = DEFAULT_METRICS_PATH

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_env(cls, v: Any) -> AppEnv:
        if isinstance(v, str) and v.strip().lower() in {"dev", "development", "local", "localhost"}:
            return AppEnv.DEV
        return AppEnv.PRODUCTION

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        return str(v or DEFAULT_LOG_LEVEL).strip().upper()

    @field_validator("metrics_path", mode="after")
    @classmethod
    def expand_metrics_path(cls, v: Path) -> Path:
        return v.expanduser()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlSettingsSource(settings_cls, _config_file()),
        )

    @property
    def is_dev(self) -> bool:
        return self.app_env == AppEnv.DEV


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
