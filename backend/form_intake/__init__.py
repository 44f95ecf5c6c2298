"""Form-intake package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .api import create_app
from .core.exceptions import FormIntakeError, PersistenceError, ValidationError
from .core.models import Outcome, OutcomeStatus, Submission
from .core.protocols import PersistenceGateway
from .gateways import InMemoryGateway, MongoGateway, create_gateway
from .services import IntakeHandler

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "create_app",
    "create_gateway",
    "FormIntakeError",
    "InMemoryGateway",
    "IntakeHandler",
    "MongoGateway",
    "Outcome",
    "OutcomeStatus",
    "PersistenceError",
    "PersistenceGateway",
    "Submission",
    "ValidationError",
)
