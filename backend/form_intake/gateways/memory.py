"""In-memory persistence gateway.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.exceptions import PersistenceError

if TYPE_CHECKING:
    from ..core.models import Submission

__all__ = ("InMemoryGateway",)


class InMemoryGateway:
    """List-backed gateway for local development and tests.

    Records live only as long as the process. Each write either appends the
    whole submission or raises, so readers never observe a partial record.
    """

    def __init__(self) -> None:
        self._records: list[Submission] = []
        self._ids: set[str] = set()

    @property
    def submissions(self) -> tuple[Submission, ...]:
        """Snapshot of every stored submission in write order."""
        return tuple(self._records)

    @property
    def count(self) -> int:
        return len(self._records)

    async def save(self, submission: Submission) -> None:
        """Persist one submission."""
        with logfire.span("gateway.memory.save"):
            if submission.id in self._ids:
                raise PersistenceError("insert", f"duplicate submission id {submission.id}")
            self._records.append(submission)
            self._ids.add(submission.id)

    async def close(self) -> None:
        return None
