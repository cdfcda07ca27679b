import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=24)
TOKEN_BYTES = 16


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenStore:
    """In-memory registry of active bearer tokens and their expiry times.

    Expired tokens are evicted lazily: an entry is only dropped when
    ``validate`` looks it up after its expiry. There is no background sweep.
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._tokens: Dict[str, datetime] = {}

    def generate(self) -> str:
        """Return a new random token. The store is not modified."""
        return secrets.token_hex(TOKEN_BYTES)

    def add(self, token: str) -> None:
        """Register a token, overwriting any existing expiry"""
        with self._lock:
            self._tokens[token] = self._clock() + self.ttl

    def validate(self, token: str) -> bool:
        """Check a token, evicting it if it has expired"""
        # validate may delete, so it always holds the exclusive lock
        with self._lock:
            expiry = self._tokens.get(token)
            if expiry is None:
                return False
            if self._clock() > expiry:
                del self._tokens[token]
                logger.debug("Evicted expired token %s...", token[:8])
                return False
            return True

    def remove(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._tokens
