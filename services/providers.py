"""Hotel search providers.

A provider turns a lat/lng/radius query into normalized hotel records
and prices stays at a single hotel.
``LiteAPIHotelProvider`` talks to LiteAPI; ``StaticHotelProvider`` serves
fixed sample hotels and is used when no API key is configured.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from config import MAX_HOTELS_PER_QUERY
from liteapi import AsyncLiteAPIClient

from .hotels import (
    HotelDetails,
    HotelRecord,
    normalize_hotel_details,
    normalize_hotels,
)
from .rates import RateQuery, RoomRate, flatten_room_rates


class HotelProvider(ABC):
    """Source of raw hotel data for a location."""

    name: ClassVar[str]

    @abstractmethod
    async def search_hotels(
        self,
        latitude: float,
        longitude: float,
        radius: int,
    ) -> list[HotelRecord]:
        """Return hotels within ``radius`` meters of the point.

        Raises:
            LiteAPIClientError: If the upstream request fails.
        """

    @abstractmethod
    async def get_hotel(self, hotel_id: str) -> HotelDetails | None:
        """Return details for one hotel, or None if unknown."""

    @abstractmethod
    async def get_rates(self, hotel_id: str, query: RateQuery) -> list[RoomRate]:
        """Return bookable rates for one hotel and stay."""

    async def close(self) -> None:  # noqa: B027
        """Release network resources."""


class LiteAPIHotelProvider(HotelProvider):
    """Provider backed by the LiteAPI data endpoints."""

    name = "liteapi"

    def __init__(self, client: AsyncLiteAPIClient, *, limit: int = MAX_HOTELS_PER_QUERY) -> None:
        self._client = client
        self._limit = limit

    async def search_hotels(
        self,
        latitude: float,
        longitude: float,
        radius: int,
    ) -> list[HotelRecord]:
        raw_hotels = await self._client.search_hotels(latitude, longitude, radius)
        return normalize_hotels(raw_hotels, limit=self._limit)

    async def get_hotel(self, hotel_id: str) -> HotelDetails | None:
        raw = await self._client.get_hotel(hotel_id)
        if raw is None:
            return None
        return normalize_hotel_details(raw, hotel_id)

    async def get_rates(self, hotel_id: str, query: RateQuery) -> list[RoomRate]:
        room_types = await self._client.get_rates(
            hotel_id,
            query.checkin,
            query.checkout,
            query.occupancies(),
            currency=query.currency,
            guest_nationality=query.guest_nationality,
        )
        return flatten_room_rates(room_types)

    async def close(self) -> None:
        await self._client.close()


class StaticHotelProvider(HotelProvider):
    """Two sample Highland hotels placed next to whatever point is queried."""

    name = "static"

    OFFSET_DEGREES = 0.01

    async def search_hotels(
        self,
        latitude: float,
        longitude: float,
        radius: int,
    ) -> list[HotelRecord]:
        return [
            HotelRecord(
                id="mock-hotel-1",
                name="Mountain View Hotel",
                address="123 Mountain Road",
                city="Highland",
                country="Scotland",
                latitude=latitude + self.OFFSET_DEGREES,
                longitude=longitude + self.OFFSET_DEGREES,
                rating=4.5,
                images=["https://via.placeholder.com/150"],
                star_rating=4,
            ),
            HotelRecord(
                id="mock-hotel-2",
                name="Highland Lodge",
                address="456 Valley Street",
                city="Highland",
                country="Scotland",
                latitude=latitude - self.OFFSET_DEGREES,
                longitude=longitude - self.OFFSET_DEGREES,
                rating=4.2,
                images=["https://via.placeholder.com/150"],
                star_rating=3,
            ),
        ]

    async def get_hotel(self, hotel_id: str) -> HotelDetails | None:
        return HotelDetails(
            id=hotel_id,
            name="Mountain View Hotel",
            address="123 Mountain Road",
            city="Highland",
            country="Scotland",
            latitude=56.819817,
            longitude=-5.105218,
            rating=4.5,
            star_rating=4,
            description=(
                "A beautiful hotel with stunning mountain views. "
                "Perfect for hikers and nature lovers."
            ),
            thumbnail="https://via.placeholder.com/150?text=Hotel",
            images=[
                "https://via.placeholder.com/800x600?text=Hotel+Exterior",
                "https://via.placeholder.com/800x600?text=Hotel+Room",
            ],
            amenities=["Free WiFi", "Restaurant", "Bar", "Parking"],
            check_in_time="15:00",
            check_out_time="11:00",
            email="info@mountainviewhotel.example",
            phone="+44 1234 567890",
            website="https://www.mountainviewhotel.example",
        )

    async def get_rates(self, hotel_id: str, query: RateQuery) -> list[RoomRate]:
        return [
            RoomRate(offer_id="mock-offer-1", name="Standard Double Room", max_occupancy=2, price=120.0),
            RoomRate(offer_id="mock-offer-2", name="Family Suite", max_occupancy=4, price=210.0),
        ]
