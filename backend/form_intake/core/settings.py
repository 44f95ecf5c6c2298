"""Base settings configuration.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Final

# Third-party (alphabetical)
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("FormIntakeSettings", "ENV_PREFIX")

# =============================================================================
# Section 3: Constants
# =============================================================================
ENV_PREFIX: Final[str] = "FORM_INTAKE_"


# =============================================================================
# Section 11: Classes
# =============================================================================
class FormIntakeSettings(BaseSettings):
    """Base settings with shared environment defaults."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )
