"""FastAPI application for the contact-form intake endpoint.

Decodes the posted form, hands it to the intake handler, and turns the
resulting Outcome into an HTTP response.
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import logfire
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from .._version import __version__
from ..core.constants import LEGACY_SUBMIT_PATH, SUBMIT_PATH
from ..core.models import Outcome, OutcomeStatus
from ..core.protocols import PersistenceGateway
from ..gateways import create_gateway
from ..infra.config import Settings, load_settings
from ..services.intake import IntakeHandler

__all__ = ['create_app', 'SubmitResponse', 'STATUS_CODES', 'to_response']

STATUS_CODES: dict[OutcomeStatus, int] = {
    OutcomeStatus.SUCCESS: 201,
    OutcomeStatus.VALIDATION_ERROR: 400,
    OutcomeStatus.PERSISTENCE_ERROR: 500,
}

_FORM_CONTENT_TYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')


class SubmitResponse(BaseModel):
    """Acknowledgement body returned for every submission."""

    message: str


def to_response(outcome: Outcome) -> JSONResponse:
    """Map an Outcome onto status code and JSON body."""
    body = SubmitResponse(message=outcome.message)
    return JSONResponse(status_code=STATUS_CODES[outcome.status], content=body.model_dump())


def create_app(settings: Settings | None = None, gateway: PersistenceGateway | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    When ``gateway`` is given it is used as-is and left open on shutdown;
    otherwise a gateway is built from ``settings`` at startup and closed
    when the application stops.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned: PersistenceGateway | None = None
        if getattr(app.state, 'intake', None) is None:
            owned = create_gateway(settings)
            app.state.intake = IntakeHandler(owned)
            logfire.info('gateway_opened', backend=settings.gateway_backend)
        try:
            yield
        finally:
            if owned is not None:
                await owned.close()
                app.state.intake = None
                logfire.info('gateway_closed', backend=settings.gateway_backend)

    app = FastAPI(
        title='Form Intake',
        description='Contact form submission intake service',
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.intake = IntakeHandler(gateway) if gateway is not None else None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['*'],
    )

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Report that the service is up."""
        return {'status': 'healthy'}

    @app.post(
        SUBMIT_PATH,
        response_model=SubmitResponse,
        status_code=201,
        responses={400: {'model': SubmitResponse}, 500: {'model': SubmitResponse}},
    )
    @app.post(LEGACY_SUBMIT_PATH, include_in_schema=False)
    async def submit_form(
        payload: dict[str, Any] = Depends(read_payload),
        intake: IntakeHandler = Depends(get_intake_handler),
    ) -> JSONResponse:
        """Accept one contact-form submission."""
        outcome = await intake.submit(payload)
        return to_response(outcome)

    return app


def get_intake_handler(request: Request) -> IntakeHandler:
    """Return the handler bound to the running application."""
    intake = getattr(request.app.state, 'intake', None)
    if intake is None:
        raise RuntimeError('Intake handler is not initialised; is the application lifespan running?')
    return intake


async def read_payload(request: Request) -> dict[str, Any]:
    """Decode a JSON body or an HTML form post into a flat mapping.

    Both form encodings go through the framework's form parser; uploaded
    files are dropped since only text fields are accepted. Bodies that
    cannot be decoded, or that are not an object, become an empty mapping
    so the handler reports missing fields.
    """
    content_type = request.headers.get('content-type', '')

    if content_type.startswith(_FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (HTTPException, MultiPartException) as e:
            logfire.warning('form_body_undecodable', content_type=content_type, error_type=type(e).__name__)
            return {}
        return {key: value for key, value in form.items() if isinstance(value, str)}

    try:
        decoded = await request.json()
    except ValueError:
        logfire.warning('json_body_undecodable', content_type=content_type)
        return {}
    return decoded if isinstance(decoded, dict) else {}
