"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from versionhub.constants.defaults import (
    API_BASE_URL_DEFAULT,
    INCLUDE_ALL_APPLICATIONS_DEFAULT,
    THEME_DEFAULT,
    VERSION_CACHE_TTL_SECONDS_DEFAULT,
)
from versionhub.constants.limits import REQUEST_TIMEOUT_MIN, VERSION_CACHE_TTL_MIN
from versionhub.constants.timeouts import INVENTORY_REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Inventory service
    api_base_url: str = API_BASE_URL_DEFAULT
    request_timeout_seconds: float = Field(
        default=INVENTORY_REQUEST_TIMEOUT, ge=REQUEST_TIMEOUT_MIN
    )
    include_all_applications: bool = INCLUDE_ALL_APPLICATIONS_DEFAULT

    # Version cache; 0 keeps loaded versions until the selection changes
    version_cache_ttl_seconds: int = Field(
        default=VERSION_CACHE_TTL_SECONDS_DEFAULT, ge=VERSION_CACHE_TTL_MIN
    )

    # UI preferences
    theme: str = THEME_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
