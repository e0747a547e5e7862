"""Base controller classes."""

from versionhub.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
)

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
]
