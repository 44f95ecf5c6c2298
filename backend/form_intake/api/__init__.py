"""HTTP surface for the form-intake service."""
from __future__ import annotations

from .app import STATUS_CODES, SubmitResponse, create_app, to_response

__all__ = [
    'create_app',
    'SubmitResponse',
    'STATUS_CODES',
    'to_response',
]
