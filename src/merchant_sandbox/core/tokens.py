"""
Access token caching with a refresh policy and single-flight fetching.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Optional

from .payloads import AccessTokenResponse

__all__ = ["AccessTokenProvider", "CachedToken", "RefreshPolicy"]


@dataclass(frozen=True)
class CachedToken:
    value: str
    fetched_at: float
    expires_in: Optional[float] = None

    def age(self, now: float) -> float:
        return now - self.fetched_at


@dataclass(frozen=True)
class RefreshPolicy:
    """
    Decide when a cached token must be fetched again.

    The default never expires a token. ``max_age`` caps the age in seconds;
    with ``honor_expires_in`` the server's ``expires_in`` (minus ``leeway``)
    caps it too.
    """

    max_age: Optional[float] = None
    honor_expires_in: bool = False
    leeway: float = 0.0

    def is_stale(self, token: CachedToken, now: float) -> bool:
        age = token.age(now)
        if self.max_age is not None and age >= self.max_age:
            return True
        if self.honor_expires_in and token.expires_in is not None:
            return age >= token.expires_in - self.leeway
        return False


class AccessTokenProvider:
    """
    Hand out a cached access token, fetching it at most once at a time.

    ``fetch`` returns an :class:`AccessTokenResponse` or ``None`` on failure.
    Callers arriving while a fetch is in flight wait for that fetch instead
    of starting their own. Failed fetches are not cached.
    """

    def __init__(
        self,
        fetch: Callable[[], Optional[AccessTokenResponse]],
        *,
        refresh_policy: Optional[RefreshPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetch = fetch
        self.refresh_policy = refresh_policy or RefreshPolicy()
        self._clock = clock
        self._lock = threading.Lock()
        self._cached: Optional[CachedToken] = None
        self._pending: Optional[Future] = None

    @property
    def cached(self) -> Optional[CachedToken]:
        return self._cached

    def invalidate(self) -> None:
        with self._lock:
            self._cached = None

    def get(self) -> Optional[str]:
        with self._lock:
            cached = self._cached
            if cached is not None and not self.refresh_policy.is_stale(cached, self._clock()):
                return cached.value
            pending = self._pending
            if pending is None:
                pending = self._pending = Future()
                owner = True
            else:
                owner = False

        if not owner:
            return pending.result()

        token: Optional[str] = None
        try:
            response = self._fetch()
            if response is not None:
                token = response.access_token
                with self._lock:
                    self._cached = CachedToken(
                        value=token,
                        fetched_at=self._clock(),
                        expires_in=response.expires_in,
                    )
        finally:
            with self._lock:
                self._pending = None
            pending.set_result(token)
        return token
