"""
Time-boxed fetch cache shared by the catalog service and the storefront client.

A cache instance owns at most one entry. ``get`` serves the entry while it is
fresh and otherwise calls the upstream fetch under a timeout, replacing the
entry only when the fetch succeeds. Failures are returned to the caller inside
a ``FetchResult``; a stale entry is never served in place of an error.
"""

import asyncio
import time
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Generic, List, Optional, Sequence, TypeVar

from shared.errors import FetchDecodeError, FetchError, FetchTimeoutError, UnknownFetchError
from shared.logging import get_logger

T = TypeVar("T")

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0

UpstreamFetch = Callable[[], Awaitable[Sequence[T]]]


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached payload with its expiry. Replaced wholesale, never mutated."""

    value: List[T]
    fetched_at: float
    expires_at: float
    # Only set for sliding expiration
    absolute_expires_at: Optional[float] = None

    def is_fresh(self, now: float) -> bool:
        return now < self.expires_at


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a cache ``get``: either a value or a typed error."""

    value: Optional[List[T]] = None
    error: Optional[FetchError] = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[T]:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value if self.value is not None else []


class TimeBoxedFetchCache(Generic[T]):
    """Single-entry cache in front of an async upstream fetch.

    With ``absolute_ttl_seconds`` unset, an entry expires ``ttl_seconds`` after
    the fetch that produced it. With it set, ``ttl_seconds`` becomes a sliding
    window renewed on every hit, capped at ``absolute_ttl_seconds`` after the
    fetch.
    """

    def __init__(
        self,
        fetch: UpstreamFetch,
        ttl_seconds: float,
        *,
        absolute_ttl_seconds: Optional[float] = None,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if absolute_ttl_seconds is not None and absolute_ttl_seconds < ttl_seconds:
            raise ValueError("absolute_ttl_seconds must not be shorter than ttl_seconds")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._fetch = fetch
        self.ttl_seconds = ttl_seconds
        self.absolute_ttl_seconds = absolute_ttl_seconds
        self.timeout_seconds = timeout_seconds
        self.name = name
        self._clock = clock
        self._entry: Optional[CacheEntry[T]] = None
        # Bumped by invalidate(); fetches started before it must not store
        self._generation = 0
        self.logger = get_logger(f"{name}.fetch_cache")

    @property
    def entry(self) -> Optional[CacheEntry[T]]:
        return self._entry

    @property
    def sliding(self) -> bool:
        return self.absolute_ttl_seconds is not None

    def is_fresh(self) -> bool:
        entry = self._entry
        return entry is not None and entry.is_fresh(self._clock())

    async def get(self, force_refresh: bool = False) -> FetchResult[T]:
        """Serve the cached value when fresh, otherwise fetch from upstream."""
        if not force_refresh:
            entry = self._entry
            now = self._clock()
            if entry is not None and entry.is_fresh(now):
                if self.sliding:
                    entry = self._slide(entry, now)
                    self._entry = entry
                self.logger.info("Cache HIT", cache=self.name, expires_in=round(entry.expires_at - now, 3))
                return FetchResult(value=list(entry.value), from_cache=True)

        generation = self._generation
        try:
            records = await self._fetch_with_timeout()
        except FetchError as exc:
            self.logger.warning(
                "Cache fetch failed",
                cache=self.name,
                kind=exc.kind.value,
                error=exc.message,
                force_refresh=force_refresh,
            )
            return FetchResult(error=exc)

        entry = self._new_entry(records, self._clock())
        stored = generation == self._generation
        if stored:
            self._entry = entry
        self.logger.info(
            "Cache MISS",
            cache=self.name,
            force_refresh=force_refresh,
            stored=stored,
            records=len(entry.value),
        )
        return FetchResult(value=list(entry.value))

    def invalidate(self) -> None:
        """Drop the cached entry. Safe to call repeatedly."""
        self._entry = None
        self._generation += 1
        self.logger.info("Cache CLEARED", cache=self.name)

    async def _fetch_with_timeout(self) -> Sequence[T]:
        try:
            records = await asyncio.wait_for(self._fetch(), timeout=self.timeout_seconds)
            if records is None:
                raise FetchDecodeError()
            return records
        except (asyncio.TimeoutError, TimeoutError):
            raise FetchTimeoutError(self.timeout_seconds)
        except FetchError:
            raise
        except Exception as exc:
            self.logger.error("Unexpected upstream error", cache=self.name, error=str(exc), exc_info=True)
            raise UnknownFetchError(str(exc)) from exc

    def _new_entry(self, records: Sequence[T], now: float) -> CacheEntry[T]:
        absolute = now + self.absolute_ttl_seconds if self.sliding else None
        return CacheEntry(
            value=list(records),
            fetched_at=now,
            expires_at=now + self.ttl_seconds,
            absolute_expires_at=absolute,
        )

    def _slide(self, entry: CacheEntry[T], now: float) -> CacheEntry[T]:
        return replace(entry, expires_at=min(now + self.ttl_seconds, entry.absolute_expires_at))
