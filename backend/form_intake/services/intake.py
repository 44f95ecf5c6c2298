"""Intake handler: validate a form submission and hand it to the gateway.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

# Third-party (alphabetical)
import logfire
from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError as SchemaValidationError

# Local imports (core first, then alphabetical)
from ..core.constants import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    INVALID_FIELD_TYPE_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
    SUCCESS_MESSAGE,
)
from ..core.exceptions import PersistenceError, ValidationError
from ..core.models import Outcome, Submission, SubmissionRequest
from ..infra.instrumentation import Metrics, get_logger

if TYPE_CHECKING:
    from ..core.protocols import PersistenceGateway
    from ..core.types import Clock

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("IntakeHandler", "validate_request")

logger = get_logger("services.intake")

_REQUIRED_FIELDS = ("name", "email")


# =============================================================================
# Section 11: Classes
# =============================================================================
class IntakeHandler:
    """Validate form submissions and persist them through a gateway.

    The handler keeps no state between calls; the injected gateway is the
    only shared resource. Every call makes at most one write attempt and
    always returns an Outcome, whatever the gateway does.

    Example:
        >>> handler = IntakeHandler(InMemoryGateway())
        >>> outcome = await handler.submit({'name': 'A', 'email': 'a@b.com'})
        >>> outcome.ok
        True
    """

    def __init__(self, gateway: PersistenceGateway, *, clock: Clock | None = None) -> None:
        self._gateway = gateway
        self._clock = clock or _utc_now

    @property
    def gateway(self) -> PersistenceGateway:
        return self._gateway

    async def submit(self, request: Mapping[str, Any]) -> Outcome:
        """Validate ``request`` and persist it as a new Submission.

        Not idempotent: two identical requests produce two Submissions.

        Args:
            request: Mapping with ``name``, ``email`` and optional ``message``.

        Returns:
            Outcome describing success, a validation failure, or a
            persistence failure.
        """
        started = time.perf_counter()
        with logfire.span("intake.submit") as span:
            outcome = await self._process(request)
            span.set_attribute("status", outcome.status.value)
        Metrics.record_submission(outcome.status, (time.perf_counter() - started) * 1000)
        return outcome

    async def _process(self, request: Mapping[str, Any]) -> Outcome:
        try:
            parsed = validate_request(request)
        except ValidationError as e:
            logger.info("submission_rejected", reason=e.reason, fields=list(e.field_names))
            return Outcome.validation_failure(e.reason)

        try:
            submission = Submission(
                name=parsed.name,
                email=parsed.email,
                message=parsed.message or "",
                created_at=self._clock(),
            )
        except SchemaValidationError as e:
            logger.exception("submission_build_failed", error_count=e.error_count())
            return Outcome.persistence_failure(GENERIC_FAILURE_MESSAGE)

        try:
            await self._gateway.save(submission)
        except PersistenceError as e:
            logger.warning("submission_persistence_failed", error=str(e), **e.context)
            return Outcome.persistence_failure(GENERIC_FAILURE_MESSAGE)
        except Exception as e:
            logger.exception("submission_persistence_crashed", error_type=type(e).__name__)
            return Outcome.persistence_failure(GENERIC_FAILURE_MESSAGE)

        logger.info("submission_saved", submission_id=submission.id)
        return Outcome.success(submission, SUCCESS_MESSAGE)


# =============================================================================
# Section 12: Functions
# =============================================================================
def validate_request(request: object) -> SubmissionRequest:
    """Turn a raw request mapping into a checked SubmissionRequest.

    Raises:
        ValidationError: If ``name`` or ``email`` is missing or blank, if a
            field is not text, or if the email is not a valid address.
    """
    if not isinstance(request, Mapping):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, field_names=_REQUIRED_FIELDS)

    try:
        parsed = SubmissionRequest.model_validate(dict(request))
    except SchemaValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        if any(name in fields for name in _REQUIRED_FIELDS):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, field_names=fields) from e
        raise ValidationError(INVALID_FIELD_TYPE_MESSAGE, field_names=fields) from e

    missing = [name for name in _REQUIRED_FIELDS if not getattr(parsed, name)]
    if missing:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, field_names=missing)

    try:
        address = validate_email(parsed.email or "", check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(INVALID_EMAIL_MESSAGE, field_names=("email",)) from e

    return parsed.model_copy(update={"email": address.normalized})


def _utc_now() -> datetime:
    return datetime.now(UTC)
