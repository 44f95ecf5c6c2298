"""Tests for the intake FastAPI application.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from form_intake.api import STATUS_CODES, SubmitResponse, create_app, to_response
from form_intake.core.models import Outcome, OutcomeStatus
from form_intake.gateways import InMemoryGateway
from form_intake.infra.config import Settings
from tests.conftest import SECRET_DB_ERROR, FailingGateway

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = ()

pytestmark = pytest.mark.anyio


@pytest.fixture
def settings() -> Settings:
    """Settings using the in-memory backend."""
    return Settings(gateway_backend="memory", cors_origins=["https://example.com"])


@pytest.fixture
def app(settings: Settings, memory_gateway: InMemoryGateway) -> FastAPI:
    """Create the app around an injected in-memory gateway."""
    return create_app(settings, gateway=memory_gateway)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestCreateApp:
    """Tests for the create_app factory function."""

    def test_creates_fastapi_app(self, app: FastAPI) -> None:
        """Should create a FastAPI application."""
        assert app.title == "Form Intake"
        assert app.version == "0.1.0"

    def test_keeps_settings(self, app: FastAPI, settings: Settings) -> None:
        """Settings should be reachable from application state."""
        assert app.state.settings is settings


class TestToResponse:
    """Tests for Outcome to HTTP translation."""

    def test_status_codes(self) -> None:
        """Every outcome status should have an HTTP status."""
        assert STATUS_CODES == {
            OutcomeStatus.SUCCESS: 201,
            OutcomeStatus.VALIDATION_ERROR: 400,
            OutcomeStatus.PERSISTENCE_ERROR: 500,
        }

    def test_body_only_carries_message(self) -> None:
        """The response body should only carry the outcome message."""
        response = to_response(Outcome.persistence_failure("Something went wrong."))

        assert response.status_code == 500
        assert response.body == b'{"message":"Something went wrong."}'

    def test_submit_response_model(self) -> None:
        """The acknowledgement model should hold the message."""
        assert SubmitResponse(message="ok").model_dump() == {"message": "ok"}


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_check(self, client: TestClient) -> None:
        """Health endpoint should return healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestSubmitEndpoint:
    """Tests for the /api/submit endpoint."""

    def test_json_submission(self, client: TestClient, memory_gateway: InMemoryGateway) -> None:
        """A valid JSON body should be accepted and stored."""
        response = client.post(
            "/api/submit",
            json={
                "name": "Gaurav",
                "email": "gaurav@example.com",
                "message": "Hello, I love your website!",
            },
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Form submitted successfully."}
        assert memory_gateway.count == 1
        assert memory_gateway.submissions[0].name == "Gaurav"

    def test_html_form_submission(self, client: TestClient, memory_gateway: InMemoryGateway) -> None:
        """A URL-encoded HTML form post should be accepted."""
        response = client.post(
            "/api/submit",
            data={"name": "Ada", "email": "ada@example.com", "message": "Hi there"},
        )

        assert response.status_code == 201
        assert memory_gateway.submissions[0].message == "Hi there"

    def test_multipart_form_submission(self, client: TestClient, memory_gateway: InMemoryGateway) -> None:
        """A multipart form post should be accepted and non-text parts ignored."""
        response = client.post(
            "/api/submit",
            data={"name": "A", "email": "a@b.com", "message": "with file"},
            files={"attachment": ("note.txt", b"x", "text/plain")},
        )

        assert response.status_code == 201
        assert memory_gateway.count == 1
        stored = memory_gateway.submissions[0]
        assert stored.name == "A"
        assert stored.message == "with file"

    def test_legacy_path(self, client: TestClient, memory_gateway: InMemoryGateway) -> None:
        """The bare /submit path should behave the same."""
        response = client.post("/submit", json={"name": "A", "email": "a@b.com"})

        assert response.status_code == 201
        assert memory_gateway.submissions[0].message == ""

    def test_missing_fields(self, client: TestClient, memory_gateway: InMemoryGateway) -> None:
        """Missing name should be reported as bad input."""
        response = client.post("/api/submit", json={"name": "", "email": "a@b.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Name and Email are required."}
        assert memory_gateway.count == 0

    def test_invalid_email(self, client: TestClient) -> None:
        """Malformed emails should be reported as bad input."""
        response = client.post("/api/submit", json={"name": "A", "email": "nope"})

        assert response.status_code == 400
        assert response.json() == {"message": "Please provide a valid email address."}

    @pytest.mark.parametrize(
        ("content", "content_type"),
        [
            (b"{not json", "application/json"),
            (b"[1, 2, 3]", "application/json"),
            (b"", "application/json"),
            (b"\xff\xfe", "application/x-www-form-urlencoded"),
        ],
    )
    def test_undecodable_body(self, client: TestClient, content: bytes, content_type: str) -> None:
        """Bodies that are not an object should be treated as empty."""
        response = client.post("/api/submit", content=content, headers={"content-type": content_type})

        assert response.status_code == 400
        assert response.json() == {"message": "Name and Email are required."}

    def test_persistence_failure(self, settings: Settings) -> None:
        """Store failures should return a generic server error."""
        client = TestClient(create_app(settings, gateway=FailingGateway()))

        response = client.post("/api/submit", json={"name": "A", "email": "a@b.com"})

        assert response.status_code == 500
        assert response.json() == {"message": "Something went wrong."}
        assert SECRET_DB_ERROR not in response.text

    def test_cors_preflight(self, client: TestClient) -> None:
        """Configured origins should pass CORS preflight."""
        response = client.options(
            "/api/submit",
            headers={
                "origin": "https://example.com",
                "access-control-request-method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://example.com"


class TestLifespan:
    """Tests for gateway lifecycle management."""

    def test_builds_gateway_from_settings(self, settings: Settings) -> None:
        """Without an injected gateway, startup should build one."""
        app = create_app(settings)

        with TestClient(app) as client:
            response = client.post("/api/submit", json={"name": "A", "email": "a@b.com"})
            assert response.status_code == 201
            assert isinstance(app.state.intake.gateway, InMemoryGateway)

        assert app.state.intake is None

    def test_injected_gateway_survives_shutdown(self, app: FastAPI, memory_gateway: InMemoryGateway) -> None:
        """An injected gateway should stay bound after shutdown."""
        with TestClient(app):
            pass

        assert app.state.intake.gateway is memory_gateway
