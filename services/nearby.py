"""Nearby-hotels lookups for callers.

``HotelSearchService.get_hotels_nearby`` is the plain async read: bucket
cache first, provider on a miss, deduplicated before caching.

``NearbyHotelsQuery`` is the stateful consumer used by map overlays. It
holds ``results``, ``loading`` and ``error``, applies the distance gate,
keeps previous results on failure, and ignores responses that arrive after
a newer request was issued or after ``close()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config import DEFAULT_SEARCH_RADIUS_M

from .cache import DistanceGate, HotelCache, NearbyQuery
from .hotels import HotelDetails, HotelRecord, dedupe_hotels

if TYPE_CHECKING:
    from .providers import HotelProvider

logger = logging.getLogger(__name__)


class HotelSearchService:
    """Cached, deduplicated hotel search around a point.

    Args:
        provider: Source of hotel records.
        cache: Bucket cache; a fresh one is created if omitted.
    """

    def __init__(self, provider: HotelProvider, cache: HotelCache | None = None) -> None:
        self._provider = provider
        self._cache = cache if cache is not None else HotelCache()

    async def get_hotels_nearby(
        self,
        latitude: float,
        longitude: float,
        radius: int = DEFAULT_SEARCH_RADIUS_M,
        exclude_id: str | None = None,
    ) -> list[HotelRecord]:
        """Get deduplicated hotels near a point.

        The cache stores the full list; ``exclude_id`` is applied on the way
        out so every exclusion shares one cache entry.

        Args:
            latitude: Latitude of the search centre.
            longitude: Longitude of the search centre.
            radius: Search radius in meters.
            exclude_id: Hotel id to leave out (e.g. the hotel being viewed).

        Returns:
            Deduplicated hotels.

        Raises:
            LiteAPIClientError: If the provider call fails.
        """
        hotels = self._cache.get(latitude, longitude, radius)
        if hotels is None:
            raw_hotels = await self._provider.search_hotels(latitude, longitude, radius)
            hotels = dedupe_hotels(raw_hotels)
            self._cache.put(latitude, longitude, radius, hotels)
            logger.info(
                "Fetched %d hotels (%d after dedupe) at %.4f,%.4f r=%dm",
                len(raw_hotels), len(hotels), latitude, longitude, radius,
            )
        else:
            logger.debug("Hotel cache hit at %.4f,%.4f r=%dm", latitude, longitude, radius)

        if exclude_id:
            return [hotel for hotel in hotels if hotel.id != exclude_id]
        return list(hotels)

    async def get_hotel(self, hotel_id: str) -> HotelDetails | None:
        """Get details for one hotel, or None if the provider doesn't know it."""
        return await self._provider.get_hotel(hotel_id)


@dataclass(frozen=True)
class NearbyHotelsState:
    """Snapshot of a NearbyHotelsQuery."""

    results: list[HotelRecord]
    loading: bool
    error: Exception | None


class NearbyHotelsQuery:
    """Live nearby-hotels result set for one consumer.

    Each ``update()`` or ``refetch()`` issues a new request generation; only
    the latest generation may write state. Failures set ``error`` and leave
    ``results`` as they were.

    Args:
        service: Search service to read from.
        gate: Distance gate; one with the configured threshold is created
            if omitted.
    """

    def __init__(self, service: HotelSearchService, gate: DistanceGate | None = None) -> None:
        self._service = service
        self._gate = gate if gate is not None else DistanceGate()
        self._query: NearbyQuery | None = None
        self._generation = 0
        self._closed = False
        self.results: list[HotelRecord] = []
        self.loading = False
        self.error: Exception | None = None

    @property
    def closed(self) -> bool:
        return self._closed

    def state(self) -> NearbyHotelsState:
        return NearbyHotelsState(results=list(self.results), loading=self.loading, error=self.error)

    async def update(
        self,
        latitude: float,
        longitude: float,
        radius: int = DEFAULT_SEARCH_RADIUS_M,
        enabled: bool = True,
        exclude_id: str | None = None,
    ) -> None:
        """Point the query at new parameters, fetching if needed.

        Disabled queries, or a zero/missing coordinate, clear the results
        without fetching.
        """
        if self._closed:
            return

        if not enabled or not latitude or not longitude:
            self._generation += 1
            self._query = None
            self._gate.reset()
            self.results = []
            self.loading = False
            return

        query = NearbyQuery(latitude, longitude, radius, exclude_id)
        self._query = query
        if self._gate.should_skip(query):
            # Supersede any request still in flight for older parameters
            self._generation += 1
            self.loading = False
            return

        await self._fetch(query)

    async def refetch(self) -> None:
        """Fetch the current parameters again, ignoring the distance gate."""
        if self._closed or self._query is None:
            return
        await self._fetch(self._query)

    def close(self) -> None:
        """Stop accepting responses; in-flight requests are discarded."""
        self._closed = True
        self._generation += 1

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def _fetch(self, query: NearbyQuery) -> None:
        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        try:
            hotels = await self._service.get_hotels_nearby(
                query.latitude, query.longitude, query.radius, query.exclude_id,
            )
        except Exception as e:  # noqa: BLE001
            if self._is_current(generation):
                logger.warning("Nearby hotels fetch failed: %s", e)
                self.error = e
                self.loading = False
            return

        if not self._is_current(generation):
            logger.debug("Discarding stale hotels response for %s", query)
            return

        self.results = hotels
        self.loading = False
        self._gate.record(query)
