"""Shared fixtures: a scriptable hotel provider and a controllable clock."""

from __future__ import annotations

import asyncio

import pytest

from services import HotelDetails, HotelProvider, HotelRecord, RateQuery, RoomRate


class FakeProvider(HotelProvider):
    """Provider that records calls and returns canned or generated hotels."""

    name = "fake"

    def __init__(self) -> None:
        self.hotels: list[HotelRecord] | None = None
        self.error: Exception | None = None
        self.details: dict[str, HotelDetails] = {}
        self.rates: list[RoomRate] = []
        self.rate_calls: list[tuple[str, RateQuery]] = []
        self.calls: list[tuple[float, float, int]] = []
        self.closed = False
        self._holds: dict[float, asyncio.Event] = {}

    def hold(self, latitude: float) -> asyncio.Event:
        """Block searches at ``latitude`` until the returned event is set."""
        event = asyncio.Event()
        self._holds[latitude] = event
        return event

    async def search_hotels(
        self,
        latitude: float,
        longitude: float,
        radius: int,
    ) -> list[HotelRecord]:
        self.calls.append((latitude, longitude, radius))
        event = self._holds.get(latitude)
        if event is not None:
            await event.wait()
        if self.error is not None:
            raise self.error
        if self.hotels is not None:
            return list(self.hotels)
        return [
            HotelRecord(
                id=f"hotel-{latitude}",
                name=f"Hotel at {latitude}",
                latitude=latitude,
                longitude=longitude,
            )
        ]

    async def get_hotel(self, hotel_id: str) -> HotelDetails | None:
        if self.error is not None:
            raise self.error
        return self.details.get(hotel_id)

    async def get_rates(self, hotel_id: str, query: RateQuery) -> list[RoomRate]:
        self.rate_calls.append((hotel_id, query))
        if self.error is not None:
            raise self.error
        return list(self.rates)

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def anyio_backend() -> str:
    """Restrict anyio tests to the asyncio backend."""

    return "asyncio"


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
