"""Shared test fixtures and helpers for form-intake tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from typing import TYPE_CHECKING, Any, TypeVar

import pytest

from form_intake.core.exceptions import PersistenceError
from form_intake.gateways import InMemoryGateway

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

    from form_intake.core.models import Submission

    T = TypeVar("T")

    def IsInstance(arg: type[T]) -> T: ...
    def IsDatetime(*args: Any, **kwargs: Any) -> datetime: ...
    def IsNow(*args: Any, **kwargs: Any) -> datetime: ...
    def IsStr(*args: Any, **kwargs: Any) -> str: ...
else:
    from dirty_equals import IsDatetime, IsInstance, IsStr
    from dirty_equals import IsNow as _IsNow

    def IsNow(*args: Any, **kwargs: Any):
        """IsNow with increased delta for test stability."""
        if "delta" not in kwargs:
            kwargs["delta"] = 10
        return _IsNow(*args, **kwargs)


__all__ = (
    "IsDatetime",
    "IsNow",
    "IsStr",
    "IsInstance",
    "TestEnv",
    "FailingGateway",
    "CrashingGateway",
    "SECRET_DB_ERROR",
)

SECRET_DB_ERROR = "connection refused by db-internal-7.cluster.local:27017"


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


class FailingGateway:
    """Gateway whose every write is rejected by the store."""

    def __init__(self, detail: str = SECRET_DB_ERROR) -> None:
        self.detail = detail
        self.calls: list[Submission] = []

    async def save(self, submission: Submission) -> None:
        self.calls.append(submission)
        raise PersistenceError("insert", self.detail, cause=ConnectionError(self.detail))

    async def close(self) -> None:
        return None


class CrashingGateway(FailingGateway):
    """Gateway that breaks its contract by raising a non-persistence error."""

    async def save(self, submission: Submission) -> None:
        self.calls.append(submission)
        raise RuntimeError(self.detail)


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def memory_gateway() -> InMemoryGateway:
    """Provide an empty in-memory gateway."""
    return InMemoryGateway()


@pytest.fixture
def failing_gateway() -> FailingGateway:
    """Provide a gateway that rejects every write."""
    return FailingGateway()


@pytest.fixture
def crashing_gateway() -> CrashingGateway:
    """Provide a gateway that raises an unexpected error."""
    return CrashingGateway()


@pytest.fixture
def valid_request() -> dict[str, str]:
    """Provide a complete, valid form body."""
    return {
        "name": "Gaurav",
        "email": "gaurav@example.com",
        "message": "Hello, I love your website!",
    }
