"""Main application class for Version Hub."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from versionhub.constants import APP_SUB_TITLE, APP_TITLE, THEME_DEFAULT
from versionhub.controllers import InventoryController
from versionhub.keyboard.app import APP_BINDINGS
from versionhub.models.state.app_settings import AppSettings
from versionhub.models.state.config_manager import ConfigLoadError, ConfigManager
from versionhub.models.state.session_state import SessionState
from versionhub.screens import InventoryScreen

logger = logging.getLogger(__name__)


class VersionHubApp(App[None]):
    """Main TUI application for Version Hub."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        config_path: Path | None = None,
        controller: InventoryController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.api_url = api_url
        self.timeout = timeout
        self.config_path = config_path

        self._load_settings()
        self.controller = controller or InventoryController(
            self.settings.api_base_url,
            timeout=self.settings.request_timeout_seconds,
            include_all=self.settings.include_all_applications,
        )
        self.session = SessionState(
            version_ttl_seconds=self.settings.version_cache_ttl_seconds
        )

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("%s; using default settings", exc)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.api_url:
            self.settings.api_base_url = self.api_url
        if self.timeout is not None:
            self.settings.request_timeout_seconds = self.timeout

        self._apply_theme()

    def _apply_theme(self) -> None:
        """Apply stored theme preference, falling back to the default theme."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            theme_name = THEME_DEFAULT
        self.settings.theme = theme_name
        self.theme = theme_name

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(InventoryScreen(controller=self.controller, state=self.session))

    def action_show_help(self) -> None:
        """Show help notification."""
        self.notify(
            "Keybindings:\n"
            "  Enter: Expand / collapse application\n"
            "  Esc: Collapse application\n"
            "  r: Refresh clusters\n"
            "  v: Refresh versions of the expanded application\n"
            "  ?: Help\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )

    async def on_unmount(self) -> None:
        """Close the HTTP client when the app exits."""
        await self.controller.aclose()


__all__ = [
    "VersionHubApp",
]
