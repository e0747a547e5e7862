"""App-level and screen-level keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# App-level bindings (work from any screen)
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("?", "show_help", "Help"),
    Binding("q", "app.quit", "Quit", priority=True),
]

# ============================================================================
# Inventory screen bindings
# ============================================================================

INVENTORY_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh clusters"),
    Binding("v", "refresh_versions", "Refresh versions"),
    Binding("escape", "collapse", "Collapse"),
]

__all__ = [
    "APP_BINDINGS",
    "INVENTORY_SCREEN_BINDINGS",
]
