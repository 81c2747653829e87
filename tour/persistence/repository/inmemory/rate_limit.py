"""In-memory rate limit store.

Serves a single process only. Entries live in a dict guarded by a lock and
a daemon thread sweeps expired windows at a fixed interval.
"""

import threading
from typing import Callable

import logfire

from tour.domain.repository.rate_limit import RateLimitStore
from tour.domain.value import RateLimitEntry


class InMemoryRateLimitStore(RateLimitStore):
    """Dict-backed rate limit store with an optional background sweep."""

    def __init__(
        self,
        clock: Callable[[], int],
        sweep_interval_seconds: float | None = 60.0,
    ) -> None:
        """Initialize the store.

        Args:
            clock: Source of epoch milliseconds used by the sweep
            sweep_interval_seconds: Seconds between sweeps; None disables the
                background thread (sweep can still be called directly)
        """
        self._clock = clock
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()
        self._sweep_interval = sweep_interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if sweep_interval_seconds:
            self._start_sweeper()

    def _start_sweeper(self) -> None:
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run_sweeper, name="rate-limit-sweeper", daemon=True
        )
        self._thread.start()

    def _run_sweeper(self) -> None:
        while not self._stop.wait(self._sweep_interval):
            removed = self.sweep(self._clock())
            if removed:
                logfire.debug("Rate limit entries swept", removed=removed)

    @property
    def is_sweeping(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str, now: int) -> RateLimitEntry | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.reset_at <= now:
                del self._entries[key]
                return None
            return entry

    def set(self, key: str, entry: RateLimitEntry) -> None:
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def sweep(self, now: int) -> int:
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.reset_at <= now]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def destroy(self) -> None:
        """Stop the sweep thread and drop all entries."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        with self._lock:
            self._entries.clear()
