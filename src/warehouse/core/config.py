"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .enums import LogFormat


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    # Name used by Warehouse.get_instance() when none is given
    default_warehouse_name: str = "default"

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "WAREHOUSE_", "env_nested_delimiter": "__"}

    def validate_settings(self) -> None:
        """Reject settings the registry cannot work with."""
        from .errors import ConfigError

        if not self.default_warehouse_name.strip():
            raise ConfigError("default_warehouse_name must not be blank.")


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

    if overrides:
        data.update(overrides)

    settings = Settings(**data)
    settings.validate_settings()
    return settings


_settings: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = load_settings()
        return _settings


def set_settings(settings: Settings | None) -> None:
    """Replace the process-wide settings (``None`` reloads on next use)."""
    global _settings
    if settings is not None:
        settings.validate_settings()
    with _settings_lock:
        _settings = settings
