"""Application services."""
from __future__ import annotations

from .intake import IntakeHandler, validate_request

__all__ = [
    'IntakeHandler',
    'validate_request',
]
