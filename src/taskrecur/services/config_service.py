"""Configuration service for the taskrecur CLI.

This module provides the ConfigService class, the single source of truth for
CLI configuration. It handles:

- Loading and saving config.json under the platform config directory
- Creating the file with defaults on first run
- Reading and writing individual settings by dotted key
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from taskrecur.models.config_models import AppConfig

_APP_NAME = "taskrecur"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self):
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a setting
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        The value is validated against the config model before saving.

        Raises:
            KeyError: If the key does not name a setting
            ValueError: If the value is not valid for the setting
        """
        self.get(key)
        parts = key.split(".")
        data = self.config.model_dump()

        current = data
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value}") from e
        self.save_config()

    def as_flat_dict(self) -> dict[str, Any]:
        """Return every setting keyed by its dotted name."""
        flat: dict[str, Any] = {}

        def walk(prefix: str, data: dict[str, Any]) -> None:
            for name, value in data.items():
                dotted = f"{prefix}.{name}" if prefix else name
                if isinstance(value, dict):
                    walk(dotted, value)
                else:
                    flat[dotted] = value

        walk("", self.config.model_dump())
        return flat


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
