"""Repository interfaces (ports) for the application layer."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from domain.aggregates.want import Want

WantMutator = Callable[[Want], Awaitable[None]]


class WantRepository(ABC):
    """Interface for the Want entity store.

    Implementations only translate between the aggregate and the store's
    document shape and expose the store's transaction primitive. Store
    failures are raised unchanged.
    """

    @abstractmethod
    async def get(self, want_id: str) -> Want | None:
        """Return the stored Want, or ``None`` when no document has that id."""

    @abstractmethod
    async def create(self, want: Want) -> str:
        """Insert a new Want and return the id assigned by the store."""

    @abstractmethod
    async def transactional_update(self, want_id: str, mutator: WantMutator) -> None:
        """Run a read-modify-write of one Want inside a store transaction.

        The current document is read inside the transaction, handed to
        ``mutator`` and written back only if ``mutator`` returns normally.
        If ``mutator`` raises, nothing is written and the exception propagates.

        Raises:
            AggregateNotFoundError: If the Want does not exist when the
                transaction reads it.

        """
