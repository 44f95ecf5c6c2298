"""Protocol definitions for persistence gateways.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Submission

__all__ = ("PersistenceGateway",)


@runtime_checkable
class PersistenceGateway(Protocol):
    """Protocol for persistence gateways.

    A gateway durably records Submissions in a document store. The intake
    handler depends only on this protocol; the concrete gateway is built
    once at startup and injected. Implementations must be async-first and
    safe for concurrent ``save`` calls.

    Example Implementation:
        >>> class ListGateway:
        ...     def __init__(self) -> None:
        ...         self.rows: list[Submission] = []
        ...
        ...     async def save(self, submission: Submission) -> None:
        ...         self.rows.append(submission)
        ...
        ...     async def close(self) -> None:
        ...         return None
    """

    @abstractmethod
    async def save(self, submission: Submission) -> None:
        """Persist one submission.

        The write is atomic from the caller's perspective: it either
        completes or raises, with no partial record left behind.

        Args:
            submission: Validated submission to record.

        Raises:
            PersistenceError: If the store is unreachable or rejects the write.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection resource."""
        ...
