"""Keyboard bindings for Version Hub."""

from versionhub.keyboard.app import APP_BINDINGS, INVENTORY_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "INVENTORY_SCREEN_BINDINGS",
]
