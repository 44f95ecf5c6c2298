"""MongoDB persistence gateway.

This gateway writes each Submission as one document into a MongoDB
collection using pymongo's asyncio client.
"""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import logfire
from pydantic import BaseModel
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from ..core.constants import (
    DEFAULT_COLLECTION,
    DEFAULT_DATABASE,
    DEFAULT_MONGODB_URI,
    SAVE_TIMEOUT_SECONDS,
    SERVER_SELECTION_TIMEOUT_MS,
)
from ..core.exceptions import PersistenceError
from ..infra.instrumentation import Metrics

if TYPE_CHECKING:
    from ..core.models import Submission
    from ..infra.config import Settings

__all__ = ['MongoGateway', 'MongoConfig']


class MongoConfig(BaseModel):
    """Configuration for the MongoDB gateway."""

    uri: str = DEFAULT_MONGODB_URI
    database: str = DEFAULT_DATABASE
    collection: str = DEFAULT_COLLECTION
    save_timeout_seconds: float = SAVE_TIMEOUT_SECONDS
    server_selection_timeout_ms: int = SERVER_SELECTION_TIMEOUT_MS

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoConfig:
        return cls(
            uri=settings.mongodb_uri,
            database=settings.mongodb_database,
            collection=settings.mongodb_collection,
            save_timeout_seconds=settings.save_timeout_seconds,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )


@dataclass
class MongoGateway:
    """MongoDB persistence gateway.

    Implements the PersistenceGateway protocol. The client is created once
    and shared by every concurrent ``save``; pooling is left to the driver.
    A pre-built collection may be passed in, in which case no client is
    created and ``close`` leaves the collection's owner alone.

    Example:
        >>> config = MongoConfig(uri='mongodb://localhost:27017')
        >>> async with MongoGateway(config) as gateway:
        ...     await gateway.save(submission)
    """

    config: MongoConfig = field(default_factory=MongoConfig)
    collection: Any = None
    _client: AsyncMongoClient[dict[str, Any]] | None = field(default=None, init=False, repr=False)

    backend_name = 'mongo'

    def __post_init__(self) -> None:
        if self.collection is None:
            self._client = AsyncMongoClient(
                self.config.uri,
                serverSelectionTimeoutMS=self.config.server_selection_timeout_ms,
                tz_aware=True,
                connect=False,
            )
            self.collection = self._client[self.config.database][self.config.collection]

    async def __aenter__(self) -> MongoGateway:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def save(self, submission: Submission) -> None:
        """Insert one submission document.

        Raises:
            PersistenceError: On driver errors or when the write outlives
                ``save_timeout_seconds``.
        """
        with logfire.span('gateway.mongo.save', collection=self.config.collection):
            started = time.perf_counter()
            try:
                await asyncio.wait_for(
                    self.collection.insert_one(submission.to_document()),
                    timeout=self.config.save_timeout_seconds,
                )
            except TimeoutError as e:
                self._record(started, success=False)
                raise PersistenceError(
                    'insert',
                    f'write exceeded {self.config.save_timeout_seconds}s',
                    cause=e,
                ) from e
            except PyMongoError as e:
                self._record(started, success=False)
                raise PersistenceError('insert', str(e), cause=e) from e
            self._record(started, success=True)

    async def close(self) -> None:
        """Close the client if this gateway created it."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    def _record(self, started: float, *, success: bool) -> None:
        duration_ms = (time.perf_counter() - started) * 1000
        Metrics.record_persistence_write(self.backend_name, duration_ms, success)
