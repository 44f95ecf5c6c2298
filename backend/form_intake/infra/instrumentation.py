"""Centralized instrumentation for the form-intake service.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
import os
from typing import TYPE_CHECKING, Literal

# Third-party (alphabetical)
import logfire

if TYPE_CHECKING:
    from fastapi import FastAPI

    from ..core.models import OutcomeStatus

__all__ = ("configure_instrumentation", "get_logger", "Metrics")


class Metrics:
    """Centralized metrics recording.

    Provides methods for recording metric events consistently across the
    service. Events never carry submitter data.
    """

    @staticmethod
    def record_submission(status: OutcomeStatus, duration_ms: float) -> None:
        """Record the result of one intake call."""
        logfire.info("form_submission", status=status.value, duration_ms=duration_ms)

    @staticmethod
    def record_persistence_write(backend: str, duration_ms: float, success: bool) -> None:
        """Record one gateway write attempt."""
        logfire.info("persistence_write", backend=backend, duration_ms=duration_ms, success=success)


def configure_instrumentation(
    *,
    service_name: str = "form-intake",
    environment: str | None = None,
    send_to_logfire: bool | Literal["if-token-present"] | None = "if-token-present",
    app: FastAPI | None = None,
) -> None:
    """Configure global instrumentation settings.

    This function should be called once at process startup, before the
    server begins accepting requests.

    Args:
        service_name: Name of the service for tracing.
        environment: Deployment environment (dev, staging, prod).
        send_to_logfire: Whether to send telemetry to Logfire.
        app: FastAPI application to instrument, if any.
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")

    logfire.configure(service_name=service_name, environment=environment, send_to_logfire=send_to_logfire)

    if app is not None:
        logfire.instrument_fastapi(app)


def get_logger(component: str) -> logfire.Logfire:
    """Get a logger tagged for one part of the service.

    Args:
        component: Component name (e.g., 'services.intake', 'gateways.mongo').

    Returns:
        Logfire instance whose records carry a ``component:<name>`` tag.
    """
    return logfire.with_settings(tags=[f"component:{component}", "service:form-intake"])
