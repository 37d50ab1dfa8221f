"""
Configuration management for AdTracker.

Supports loading from environment variables and YAML files.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------

class ServerSettings(BaseSettings):
    """Uvicorn / HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # Browser client assets, mounted at "/" only when the directory exists
    static_dir: str = "public"


class StorageSettings(BaseSettings):
    """JSON document persistence."""

    data_file: str = "data.json"

    @property
    def path(self) -> Path:
        return Path(self.data_file)


# ---------------------------------------------------------------------------
# Observability
# ---------------------------------------------------------------------------

class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["json", "console"] = "json"


class MonitoringSettings(BaseSettings):
    """Prometheus / monitoring configuration."""

    enabled: bool = True


# ---------------------------------------------------------------------------
# Root Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ADTRACKER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application
    app_name: str = "AdTracker"
    app_version: str = "1.0.0"
    debug: bool = False
    env: Literal["dev", "prod", "test"] = "dev"

    # Nested settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        if v not in ("dev", "prod", "test"):
            raise ValueError(f"Invalid environment: {v}")
        return v


# ---------------------------------------------------------------------------
# YAML Loader
# ---------------------------------------------------------------------------

def load_yaml_config(config_path: Path) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def merge_configs(base: dict, override: dict) -> dict:
    """Deep-merge two configuration dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


_SECTION_CLASSES: dict[str, type[BaseSettings]] = {
    "server": ServerSettings,
    "storage": StorageSettings,
    "logging": LoggingSettings,
    "monitoring": MonitoringSettings,
}


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings.

    Loads from:
    1. configs/base.yaml (base configuration)
    2. configs/{env}.yaml (environment-specific overrides)
    3. Environment variables (highest priority)
    """
    import os

    env = os.getenv("ADTRACKER_ENV", "dev")

    config_dir = Path(__file__).parent.parent.parent / "configs"

    base_config = load_yaml_config(config_dir / "base.yaml")
    env_config = load_yaml_config(config_dir / f"{env}.yaml")
    merged = merge_configs(base_config, env_config)

    flat_config: dict = {}
    if "app" in merged:
        flat_config["app_name"] = merged["app"].get("name", "AdTracker")
        flat_config["app_version"] = merged["app"].get("version", "1.0.0")
        flat_config["debug"] = merged["app"].get("debug", False)

    flat_config["env"] = env

    # pydantic-settings gives init kwargs higher priority than env vars,
    # so env-var overrides are merged into the YAML dict first.
    for section_key, settings_cls in _SECTION_CLASSES.items():
        section_data = dict(merged.get(section_key, {}))

        # ADTRACKER_SECTION__FIELD -> field
        prefix = f"ADTRACKER_{section_key.upper()}__"
        for env_key, env_value in os.environ.items():
            if env_key.startswith(prefix):
                field_name = env_key[len(prefix):].lower()
                section_data[field_name] = env_value

        flat_config[section_key] = settings_cls(**section_data)

    return Settings(**flat_config)


# Convenience alias
settings = get_settings()
