import math
import time
from typing import Dict

from limits import RateLimitItem, parse
from limits.storage import Storage, storage_from_string
from limits.strategies import MovingWindowRateLimiter
from slowapi import Limiter
from slowapi.util import get_remote_address

from tasklist.core.config import settings
from tasklist.core.exceptions import RateLimitExceeded
from tasklist.core.logging import logger

# Rate Limiter Configuration
# Two layers:
#  - slowapi keys anonymous traffic by IP address and applies the default
#    limits from settings (plus a tighter limit on the auth routes).
#  - UserRateLimiter keys mutations by the authenticated user's id, one named
#    limit per action, and reports how long the caller has to wait.

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=list(settings.RATE_LIMIT_DEFAULT),
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
)


class UserRateLimiter:
    """Named per-user limits backed by a moving window."""

    def __init__(self, limits: Dict[str, str], storage_uri: str = "memory://"):
        self._storage: Storage = storage_from_string(storage_uri)
        self._strategy = MovingWindowRateLimiter(self._storage)
        self._limits: Dict[str, RateLimitItem] = {
            name: parse(value) for name, value in limits.items()
        }

    def limit_for(self, name: str) -> RateLimitItem:
        try:
            return self._limits[name]
        except KeyError:
            raise ValueError(f"Unknown rate limit: {name}") from None

    def check(self, name: str, key: str | int) -> None:
        """
        Consume one unit of the named limit for `key`.

        Raises:
            RateLimitExceeded: with the number of seconds until a slot frees up
        """
        item = self.limit_for(name)
        if self._strategy.hit(item, name, str(key)):
            return

        stats = self._strategy.get_window_stats(item, name, str(key))
        retry_after = max(1, math.ceil(stats.reset_time - time.time()))
        logger.warning("rate_limit_exceeded", limit=name, key=str(key), retry_after=retry_after)
        raise RateLimitExceeded(retry_after=retry_after, limit_name=name)

    def reset(self) -> None:
        self._storage.reset()


user_limiter = UserRateLimiter(
    settings.RATE_LIMIT_ENDPOINTS, storage_uri=settings.RATE_LIMIT_STORAGE_URI
)
