"""Result caching for nearby-hotel queries.

Two independent layers:

- ``HotelCache``: TTL cache keyed by the query centre rounded to four
  decimals (about 11 m) and the radius.
- ``DistanceGate``: remembers the last successful query and tells a
  consumer to skip fetching when the new centre is close to it.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config import HOTEL_CACHE_TTL_SECONDS, HOTEL_REFETCH_DISTANCE_M
from utils.geo import haversine_m

if TYPE_CHECKING:
    from .hotels import HotelRecord

logger = logging.getLogger(__name__)

CacheKey = tuple[float, float, int]


def cache_key(latitude: float, longitude: float, radius: int) -> CacheKey:
    """Quantize a query into its cache bucket."""
    return (round(latitude, 4), round(longitude, 4), radius)


@dataclass(frozen=True)
class CacheEntry:
    """Deduplicated hotels for one bucket and when they were fetched."""

    hotels: list[HotelRecord]
    timestamp: float


class HotelCache:
    """TTL cache of deduplicated hotel lists.

    Expired entries are never removed, only ignored until overwritten.

    Args:
        ttl: Entry lifetime in seconds.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        ttl: float = HOTEL_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}

    def get(self, latitude: float, longitude: float, radius: int) -> list[HotelRecord] | None:
        """Return cached hotels for the bucket, or None if absent or expired."""
        entry = self._entries.get(cache_key(latitude, longitude, radius))
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self._ttl:
            return None
        return entry.hotels

    def put(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        hotels: list[HotelRecord],
    ) -> None:
        """Store hotels for the bucket, stamped with the current time."""
        self._entries[cache_key(latitude, longitude, radius)] = CacheEntry(
            hotels=hotels,
            timestamp=self._clock(),
        )

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class NearbyQuery:
    """Parameters of one nearby-hotels request."""

    latitude: float
    longitude: float
    radius: int
    exclude_id: str | None = None


class DistanceGate:
    """Skip re-fetching when the query centre has barely moved.

    Args:
        threshold_m: Distance in meters within which a new query counts
            as the same as the last one.
    """

    def __init__(self, threshold_m: float = HOTEL_REFETCH_DISTANCE_M) -> None:
        self._threshold_m = threshold_m
        self._last: NearbyQuery | None = None

    @property
    def last_query(self) -> NearbyQuery | None:
        return self._last

    def should_skip(self, query: NearbyQuery) -> bool:
        """Whether ``query`` is close enough to the last successful one."""
        last = self._last
        if last is None:
            return False
        if query.radius != last.radius or query.exclude_id != last.exclude_id:
            return False
        distance = haversine_m(last.latitude, last.longitude, query.latitude, query.longitude)
        if distance <= self._threshold_m:
            logger.debug("Skipping hotel fetch: centre moved %.0fm", distance)
            return True
        return False

    def record(self, query: NearbyQuery) -> None:
        """Remember a query that completed successfully."""
        self._last = query

    def reset(self) -> None:
        self._last = None
