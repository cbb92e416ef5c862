"""Main application class for the storage explorer TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from storagetui.constants import APP_TITLE, THEME_DEFAULT
from storagetui.controllers.base import CatalogProvider
from storagetui.controllers.catalog import StaticCatalogProvider
from storagetui.controllers.navigation import SubscriptionFilterSet
from storagetui.keyboard.app import APP_BINDINGS
from storagetui.keyboard.commands import QUIT
from storagetui.models.state import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)
from storagetui.screens import ExplorerScreen

logger = logging.getLogger(__name__)


class StorageExplorerApp(App[None]):
    """Main TUI application for browsing a storage catalog."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        catalog_path: Path | None = None,
        config_path: Path | None = None,
        provider: CatalogProvider | None = None,
        *args,
        **kwargs,
    ) -> None:
        """Create the app.

        Raises:
            CatalogFormatError: The configured catalog file is malformed.
        """
        super().__init__(*args, **kwargs)
        self.catalog_path = catalog_path
        self.config_path = config_path
        self._explorer: ExplorerScreen | None = None

        # Load settings on startup
        self._load_settings()
        self.provider = provider or self._build_provider()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.catalog_path is not None:
            self.settings.catalog_path = str(Path(self.catalog_path).expanduser().absolute())

        self._apply_theme()

    def _apply_theme(self) -> None:
        """Apply the stored theme, falling back to the default for unknown names."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            theme_name = THEME_DEFAULT
        self.settings.theme = theme_name
        self.theme = theme_name

    def _build_provider(self) -> CatalogProvider:
        catalog_path = self.settings.catalog_path.strip()
        if catalog_path:
            return StaticCatalogProvider.from_yaml(Path(catalog_path))
        return StaticCatalogProvider.sample()

    @property
    def explorer(self) -> ExplorerScreen | None:
        return self._explorer

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self._explorer = ExplorerScreen(
            self.provider,
            filters=SubscriptionFilterSet(self.settings.disabled_subscriptions),
            details_follow_content=self.settings.details_follow_content,
        )
        self.push_screen(self._explorer)

    def action_show_help(self) -> None:
        """Show help notification."""
        self.notify(
            "Keybindings:\n"
            "  tab / shift+tab: Next / previous pane\n"
            "  enter / right: Expand or open\n"
            "  left: Collapse or go to parent\n"
            "  space: Enable / disable subscription\n"
            "  /: Search preview\n"
            "  escape: Clear search\n"
            "  r: Refresh\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit the application."""
        if self._explorer is not None and self.screen is self._explorer:
            self._explorer.presenter.handle(QUIT)
        else:
            self.exit()

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        if self._explorer is not None:
            self.settings.disabled_subscriptions = self._explorer.presenter.disabled_subscriptions()
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)
            self.notify(f"Failed to save settings: {e}", severity="error")


__all__ = [
    "StorageExplorerApp",
]
