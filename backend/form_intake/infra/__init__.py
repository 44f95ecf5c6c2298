"""Infrastructure concerns for the form-intake service.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .config import Settings, load_settings
from .instrumentation import Metrics, configure_instrumentation, get_logger

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Settings",
    "load_settings",
    "configure_instrumentation",
    "get_logger",
    "Metrics",
)
