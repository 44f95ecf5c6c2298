"""Persistence gateway implementations."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.exceptions import GatewayConfigurationError
from .memory import InMemoryGateway
from .mongo import MongoConfig, MongoGateway

if TYPE_CHECKING:
    from ..core.protocols import PersistenceGateway
    from ..infra.config import Settings

__all__ = [
    'InMemoryGateway',
    'MongoConfig',
    'MongoGateway',
    'create_gateway',
]


def create_gateway(settings: Settings) -> PersistenceGateway:
    """Build the gateway selected by ``settings.gateway_backend``."""
    backend = settings.gateway_backend
    if backend == 'memory':
        return InMemoryGateway()
    if backend == 'mongo':
        return MongoGateway(MongoConfig.from_settings(settings))
    raise GatewayConfigurationError(backend)
