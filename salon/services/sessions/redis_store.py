# salon/services/sessions/redis_store.py
"""
Redis-backed token store.

Key format: {prefix}:{token}
Value: created_at (unix timestamp), key expires after ttl_seconds.

Expiry is enforced by Redis; get() re-checks the age so that a store
shared by hosts with skewed clocks still honours the TTL.
"""

import logging

from redis import Redis

from .store import Clock, SessionStore

logger = logging.getLogger(__name__)


class RedisSessionStore(SessionStore):

    def __init__(
        self,
        redis: Redis,
        prefix: str,
        ttl_seconds: int,
        clock: Clock | None = None,
    ):
        super().__init__(ttl_seconds, clock)
        self.redis = redis
        self.prefix = prefix

    def _key(self, token: str) -> str:
        return f"{self.prefix}:{token}"

    def put(self, token: str, created_at: float | None = None) -> None:
        created_at = self.clock() if created_at is None else created_at
        remaining = int(created_at + self.ttl_seconds - self.clock())
        if remaining <= 0:
            self.delete(token)
            return
        self.redis.set(self._key(token), repr(created_at), ex=remaining)

    def get(self, token: str) -> float | None:
        raw = self.redis.get(self._key(token))
        if raw is None:
            return None

        if isinstance(raw, bytes):
            raw = raw.decode()
        try:
            created_at = float(raw)
        except ValueError:
            logger.warning(f"Dropping malformed token entry under {self.prefix}")
            self.delete(token)
            return None

        if self.is_expired(created_at, self.clock()):
            self.delete(token)
            return None
        return created_at

    def delete(self, token: str) -> None:
        self.redis.delete(self._key(token))

    def sweep(self) -> int:
        # Redis expires keys on its own
        return 0
