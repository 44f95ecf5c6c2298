"""Core domain models for the form-intake service.

These models represent the request, the persisted entity, and the result
value exchanged between the intake handler and its callers.

All models are immutable (frozen=True) so a persisted Submission can never
be mutated after the fact.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .exceptions import FormIntakeError, PersistenceError, ValidationError
from .types import JsonDict, SubmissionId

__all__ = [
    'OutcomeStatus',
    'SubmissionRequest',
    'Submission',
    'Outcome',
]


# =============================================================================
# Enumerations
# =============================================================================
class OutcomeStatus(str, Enum):
    """Result of a single intake call."""

    SUCCESS = 'success'
    VALIDATION_ERROR = 'validation_error'
    PERSISTENCE_ERROR = 'persistence_error'


# =============================================================================
# Request Models
# =============================================================================
class SubmissionRequest(BaseModel):
    """Typed view of an incoming form body.

    Every field is optional at this stage; presence rules are enforced by
    the intake handler so that missing fields produce a user-facing reason
    instead of a schema error. Unknown keys are dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        str_strip_whitespace=True,
    )

    name: str | None = Field(default=None, description='Submitter name')
    email: str | None = Field(default=None, description='Submitter email address')
    message: str | None = Field(default=None, description='Free-text message')


# =============================================================================
# Entity Models
# =============================================================================
class Submission(BaseModel):
    """One validated form entry.

    ``created_at`` is assigned by the intake handler, never by the client.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )

    id: SubmissionId = Field(
        default_factory=lambda: uuid.uuid4().hex,
        min_length=1,
        description='System-assigned identifier',
    )
    name: str = Field(..., min_length=1, description='Trimmed submitter name')
    email: str = Field(..., min_length=3, description='Trimmed submitter email')
    message: str = Field(default='', description='Free-text message')
    created_at: datetime = Field(..., description='UTC time the submission was accepted')

    @field_validator('created_at')
    @classmethod
    def require_aware_timestamp(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError('created_at must be timezone-aware')
        return value

    def to_document(self) -> JsonDict:
        """Return the persisted record layout."""
        return {
            '_id': self.id,
            'name': self.name,
            'email': self.email,
            'message': self.message,
            'createdAt': self.created_at,
        }


# =============================================================================
# Result Models
# =============================================================================
class Outcome(BaseModel):
    """Success or failure of an intake call, with a user-facing message."""

    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    message: str
    submission: Submission | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def error(self) -> type[FormIntakeError] | None:
        """Exception kind behind a failed outcome."""
        if self.status is OutcomeStatus.VALIDATION_ERROR:
            return ValidationError
        if self.status is OutcomeStatus.PERSISTENCE_ERROR:
            return PersistenceError
        return None

    @classmethod
    def success(cls, submission: Submission, message: str) -> Outcome:
        return cls(status=OutcomeStatus.SUCCESS, message=message, submission=submission)

    @classmethod
    def validation_failure(cls, reason: str) -> Outcome:
        return cls(status=OutcomeStatus.VALIDATION_ERROR, message=reason)

    @classmethod
    def persistence_failure(cls, message: str) -> Outcome:
        return cls(status=OutcomeStatus.PERSISTENCE_ERROR, message=message)
