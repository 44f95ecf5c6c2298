"""Configuration management for the form-intake service.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Third-party (alphabetical)
from pydantic import Field

# Local imports (core first, then alphabetical)
from ..core.constants import (
    DEFAULT_COLLECTION,
    DEFAULT_DATABASE,
    DEFAULT_MONGODB_URI,
    SAVE_TIMEOUT_SECONDS,
    SERVER_SELECTION_TIMEOUT_MS,
)
from ..core.settings import FormIntakeSettings
from ..core.types import GatewayBackend

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Settings", "load_settings")


# =============================================================================
# Section 4: Settings
# =============================================================================
class Settings(FormIntakeSettings):
    """Runtime configuration settings."""

    environment: str = Field(
        default="development",
        description="Deployment environment name",
    )
    gateway_backend: GatewayBackend = Field(
        default="mongo",
        description="Persistence gateway implementation",
    )
    mongodb_uri: str = Field(
        default=DEFAULT_MONGODB_URI,
        description="MongoDB connection string",
    )
    mongodb_database: str = Field(
        default=DEFAULT_DATABASE,
        min_length=1,
        description="Database holding form submissions",
    )
    mongodb_collection: str = Field(
        default=DEFAULT_COLLECTION,
        min_length=1,
        description="Collection holding form submissions",
    )
    save_timeout_seconds: float = Field(
        default=SAVE_TIMEOUT_SECONDS,
        gt=0.0,
        description="Upper bound for a single persistence write",
    )
    server_selection_timeout_ms: int = Field(
        default=SERVER_SELECTION_TIMEOUT_MS,
        ge=1,
        description="How long the driver waits for a reachable server",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to post the form",
    )
    host: str = Field(default="0.0.0.0", description="Bind address for the HTTP server")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port for the HTTP server")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
