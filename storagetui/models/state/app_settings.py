"""Application settings models."""

from pydantic import BaseModel, ConfigDict

from storagetui.constants.defaults import (
    DETAILS_FOLLOW_CONTENT_DEFAULT,
    THEME_DEFAULT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Catalog source (empty means the bundled sample catalog)
    catalog_path: str = ""

    # UI preferences
    theme: str = THEME_DEFAULT
    details_follow_content: bool = DETAILS_FOLLOW_CONTENT_DEFAULT

    # Subscription ids the user switched off, restored on next start
    disabled_subscriptions: list[str] = []


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
