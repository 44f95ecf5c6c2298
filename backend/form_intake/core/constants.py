"""Module-level constants for the form-intake service.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # User-facing messages
    'SUCCESS_MESSAGE',
    'REQUIRED_FIELDS_MESSAGE',
    'INVALID_EMAIL_MESSAGE',
    'GENERIC_FAILURE_MESSAGE',
    'INVALID_FIELD_TYPE_MESSAGE',
    # Persistence
    'DEFAULT_MONGODB_URI',
    'DEFAULT_DATABASE',
    'DEFAULT_COLLECTION',
    'SAVE_TIMEOUT_SECONDS',
    'SERVER_SELECTION_TIMEOUT_MS',
    # HTTP
    'SUBMIT_PATH',
    'LEGACY_SUBMIT_PATH',
    'SERVICE_NAME',
]

# =============================================================================
# Section 2: User-Facing Messages
# =============================================================================
SUCCESS_MESSAGE: Final[str] = 'Form submitted successfully.'
REQUIRED_FIELDS_MESSAGE: Final[str] = 'Name and Email are required.'
INVALID_EMAIL_MESSAGE: Final[str] = 'Please provide a valid email address.'
GENERIC_FAILURE_MESSAGE: Final[str] = 'Something went wrong.'
INVALID_FIELD_TYPE_MESSAGE: Final[str] = 'Form fields must be text.'

# =============================================================================
# Section 3: Persistence Constants
# =============================================================================
DEFAULT_MONGODB_URI: Final[str] = 'mongodb://localhost:27017'
DEFAULT_DATABASE: Final[str] = 'form_intake'
DEFAULT_COLLECTION: Final[str] = 'submissions'
SAVE_TIMEOUT_SECONDS: Final[float] = 5.0
SERVER_SELECTION_TIMEOUT_MS: Final[int] = 5000

# =============================================================================
# Section 4: HTTP Constants
# =============================================================================
SUBMIT_PATH: Final[str] = '/api/submit'
LEGACY_SUBMIT_PATH: Final[str] = '/submit'
SERVICE_NAME: Final[str] = 'form-intake'
