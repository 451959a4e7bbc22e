# salon/services/sessions/store.py
"""
Token stores with time-based expiry.

Value stored per token: created_at (unix timestamp).
A token is live while  now - created_at < ttl_seconds.
"""

import heapq
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable

Clock = Callable[[], float]


class SessionStore(ABC):
    """Token → created_at mapping that forgets tokens older than ttl_seconds."""

    def __init__(self, ttl_seconds: int, clock: Clock | None = None):
        self.ttl_seconds = ttl_seconds
        self.clock = clock or time.time

    @abstractmethod
    def put(self, token: str, created_at: float | None = None) -> None:
        """Store token (overwrites an existing entry)."""

    @abstractmethod
    def get(self, token: str) -> float | None:
        """Return created_at of a live token, None if missing or expired."""

    @abstractmethod
    def delete(self, token: str) -> None:
        """Remove token. Missing tokens are ignored."""

    @abstractmethod
    def sweep(self) -> int:
        """Evict every expired token. Returns number of evicted tokens."""

    def __contains__(self, token: str) -> bool:
        return self.get(token) is not None

    def is_expired(self, created_at: float, now: float) -> bool:
        return now - created_at >= self.ttl_seconds


class MemorySessionStore(SessionStore):
    """
    Process-local store.

    _entries  token → created_at
    _expiry   heap of (expires_at, token); entries whose token was deleted
              or re-put are stale and skipped on sweep.
    """

    def __init__(self, ttl_seconds: int, clock: Clock | None = None):
        super().__init__(ttl_seconds, clock)
        self._entries: dict[str, float] = {}
        self._expiry: list[tuple[float, str]] = []
        self._lock = threading.Lock()

    def put(self, token: str, created_at: float | None = None) -> None:
        created_at = self.clock() if created_at is None else created_at
        with self._lock:
            self._entries[token] = created_at
            heapq.heappush(self._expiry, (created_at + self.ttl_seconds, token))
        self.sweep()

    def get(self, token: str) -> float | None:
        self.sweep()
        with self._lock:
            created_at = self._entries.get(token)
            if created_at is None:
                return None
            if self.is_expired(created_at, self.clock()):
                del self._entries[token]
                return None
            return created_at

    def delete(self, token: str) -> None:
        with self._lock:
            self._entries.pop(token, None)

    def sweep(self) -> int:
        now = self.clock()
        evicted = 0
        with self._lock:
            while self._expiry and self._expiry[0][0] <= now:
                expires_at, token = heapq.heappop(self._expiry)
                created_at = self._entries.get(token)
                if created_at is not None and created_at + self.ttl_seconds == expires_at:
                    del self._entries[token]
                    evicted += 1
        return evicted

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
