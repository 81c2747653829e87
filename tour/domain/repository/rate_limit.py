"""Rate limit store interface.

The counting algorithm lives in ``RateLimitService``; stores only hold
entries. An in-memory store serves a single process; a shared cache backend
implementing the same interface is required once the API runs as several
instances.
"""

from abc import ABC, abstractmethod

from tour.domain.value import RateLimitEntry


class RateLimitStore(ABC):
    """Key/value store of rate limit windows keyed by client identifier.

    Implementations are synchronous: every operation is a map lookup.
    """

    @abstractmethod
    def get(self, key: str, now: int) -> RateLimitEntry | None:
        """Return the live entry for ``key``.

        An entry whose ``reset_at <= now`` is treated as absent and dropped.

        Args:
            key: Client identifier
            now: Current time in epoch milliseconds

        Returns:
            The entry if present and unexpired, None otherwise
        """
        pass

    @abstractmethod
    def set(self, key: str, entry: RateLimitEntry) -> None:
        """Store or replace the entry for ``key``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the entry for ``key``; no error if absent."""
        pass

    @abstractmethod
    def sweep(self, now: int) -> int:
        """Remove every entry whose window has passed.

        Returns:
            Number of removed entries
        """
        pass

    @abstractmethod
    def destroy(self) -> None:
        """Stop background work and drop all entries.

        The store must stay usable afterwards, behaving as a fresh empty store.
        """
        pass
