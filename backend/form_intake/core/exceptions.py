"""Exception hierarchy for the form-intake service.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import ErrorCategory, RecoveryStrategy

__all__ = (
    'FormIntakeError',
    'ValidationError',
    'PersistenceError',
    'GatewayConfigurationError',
    'classify_error',
)


class FormIntakeError(Exception):
    """Base exception for all form-intake errors.

    All exceptions in the service inherit from this class, enabling
    catch-all handling at application boundaries.

    Attributes:
        context: Additional context for debugging.
        recoverable: Whether the error can potentially be recovered.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None, recoverable: bool = True) -> None:
        self.context = context or {}
        self.recoverable = recoverable
        super().__init__(message)


class ValidationError(FormIntakeError):
    """Raised when a submission request fails validation.

    The message is the human-readable reason shown to the submitter.
    """

    def __init__(self, reason: str, *, field_names: Sequence[str] = ()) -> None:
        self.reason = reason
        self.field_names = tuple(field_names)
        super().__init__(reason, context={'fields': list(self.field_names)})


class PersistenceError(FormIntakeError):
    """Raised when the datastore is unreachable or rejects a write."""

    def __init__(self, operation: str, message: str, *, cause: Exception | None = None) -> None:
        self.operation = operation
        self.cause = cause
        ctx: dict[str, Any] = {'operation': operation}
        if cause:
            ctx['cause_type'] = type(cause).__name__
        super().__init__(f'{operation} failed: {message}', context=ctx)


class GatewayConfigurationError(FormIntakeError):
    """Raised when the configured gateway backend is unknown."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(
            f'Unknown persistence gateway backend: {backend}', context={'backend': backend}, recoverable=False
        )


def classify_error(exc: Exception) -> tuple[ErrorCategory, RecoveryStrategy]:
    """Classify errors into recovery categories and strategies."""
    if isinstance(exc, ValidationError):
        return 'recoverable', 'report'
    if isinstance(exc, GatewayConfigurationError):
        return 'fatal', 'abort'
    if isinstance(exc, PersistenceError):
        return 'transient', 'report'
    if isinstance(exc, FormIntakeError):
        return ('recoverable', 'report') if exc.recoverable else ('fatal', 'abort')
    return 'transient', 'retry'
