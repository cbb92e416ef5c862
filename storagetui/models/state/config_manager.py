"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from storagetui.constants.defaults import (
    CONFIG_DIR_DEFAULT,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
)
from storagetui.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save ``AppSettings``.

    The file location is ``$STORAGETUI_CONFIG`` when set, otherwise
    ``~/.config/storagetui/settings.yaml``. A missing file yields defaults.
    """

    @staticmethod
    def config_path() -> Path:
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return Path(CONFIG_DIR_DEFAULT).expanduser() / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Read settings from disk.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        config_path = path or cls.config_path()
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()
        try:
            with config_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk, creating the parent directory.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        config_path = path or cls.config_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(), handle, sort_keys=True)
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.debug("Saved settings to %s", config_path)
        return config_path


__all__ = ["ConfigManager"]
