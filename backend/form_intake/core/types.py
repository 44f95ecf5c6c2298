"""Type aliases for the form-intake service.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Callable
from datetime import datetime
from typing import Any, Literal

# Third-party (alphabetical)
from typing_extensions import TypeAliasType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "SubmissionId",
    "JsonDict",
    "Clock",
    "GatewayBackend",
    "ErrorCategory",
    "RecoveryStrategy",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
SubmissionId = TypeAliasType("SubmissionId", str)

JsonDict = TypeAliasType("JsonDict", dict[str, Any])
Clock = TypeAliasType("Clock", Callable[[], datetime])

GatewayBackend = TypeAliasType("GatewayBackend", Literal["mongo", "memory"])
ErrorCategory = TypeAliasType(
    "ErrorCategory",
    Literal["transient", "recoverable", "fatal"],
)
RecoveryStrategy = TypeAliasType(
    "RecoveryStrategy",
    Literal["retry", "report", "abort"],
)
