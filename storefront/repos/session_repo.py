# storefront/repos/session_repo.py
import json
import secrets
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

import redis

from storefront.data.models import ShopSession
from storefront.utils.logging import get_logger
from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, SESSION_TTL_SECONDS

logger = get_logger(__name__)


def _to_document(session: ShopSession) -> str:
    return session.model_dump_json()


def _from_document(session_id: str, raw: str) -> ShopSession:
    return ShopSession.model_validate({"id": session_id, **json.loads(raw)})


class SessionRepo(ABC):
    """
    Stores one document per browser session.
    Every save pushes the expiry forward by the TTL.
    """

    def __init__(self, ttl: int = SESSION_TTL_SECONDS):
        self.ttl = ttl

    def new_session(self) -> ShopSession:
        session = ShopSession(id=secrets.token_urlsafe(32))
        logger.info(f"New session {session.id[:8]}")
        return session

    @abstractmethod
    def load(self, session_id: str) -> ShopSession | None:
        pass

    @abstractmethod
    def save(self, session: ShopSession) -> None:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        pass


class MemorySessionRepo(SessionRepo):
    def __init__(self, ttl: int = SESSION_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        super().__init__(ttl)
        self.clock = clock
        self._docs: Dict[str, Tuple[float, str]] = {}

    def load(self, session_id: str) -> ShopSession | None:
        entry = self._docs.get(session_id)
        if entry is None:
            return None

        expires_at, raw = entry
        if expires_at <= self.clock():
            logger.info(f"Session {session_id[:8]} expired")
            del self._docs[session_id]
            return None

        return _from_document(session_id, raw)

    def save(self, session: ShopSession) -> None:
        now = self.clock()
        self._purge_expired(now)
        self._docs[session.id] = (now + self.ttl, _to_document(session))

    def delete(self, session_id: str) -> None:
        self._docs.pop(session_id, None)

    def _purge_expired(self, now: float) -> None:
        # abandoned sessions are never loaded again, drop them here
        expired = [sid for sid, (expires_at, _) in self._docs.items() if expires_at <= now]
        for sid in expired:
            del self._docs[sid]
        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")


class RedisSessionRepo(SessionRepo):
    def __init__(self, url: str | None = None, ttl: int = SESSION_TTL_SECONDS, client: redis.Redis | None = None):
        super().__init__(ttl)
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(session_id: str) -> str:
        return f"session:{session_id}"

    @redis_retry()
    def load(self, session_id: str) -> ShopSession | None:
        raw = self.redis.get(self._key(session_id))
        if raw is None:
            return None
        return _from_document(session_id, raw)

    @redis_retry()
    def save(self, session: ShopSession) -> None:
        # EX: redis drops the key when the session expires
        self.redis.set(name=self._key(session.id), value=_to_document(session), ex=self.ttl)

    @redis_retry()
    def delete(self, session_id: str) -> None:
        self.redis.delete(self._key(session_id))
