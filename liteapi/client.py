"""LiteAPI (travel data) v3.0 Client.

Provides an async interface to the LiteAPI static hotel data endpoints
and the live room rates endpoint.
Uses httpx for HTTP requests with API key header authentication.

API Documentation: https://docs.liteapi.travel/
"""

import logging
import time
from typing import Any, Self, cast

import httpx

from .exceptions import (
    LiteAPIAuthError,
    LiteAPIConnectionError,
    LiteAPIHttpError,
    LiteAPIInvalidJsonError,
    LiteAPIRequestError,
    LiteAPITimeoutError,
)
from .types import Occupancy, RawHotel, RawHotelDetails, RawRoomType

logger = logging.getLogger(__name__)

BASE_URL = "https://api.liteapi.travel/v3.0"

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_BAD_REQUEST = 400


def _extract_hotel_list(data: Any) -> list[RawHotel]:
    """Pull the hotel list out of a response envelope.

    The hotel list endpoint answers with ``{"data": [...]}``; older payloads
    and proxies have used ``hotels``, ``results`` or a bare list.

    Args:
        data: Decoded JSON body.

    Returns:
        List of raw hotel objects (possibly empty).
    """
    if isinstance(data, list):
        return cast("list[RawHotel]", data)
    if not isinstance(data, dict):
        return []
    for key in ("data", "hotels", "results"):
        hotels = data.get(key)
        if isinstance(hotels, list):
            return cast("list[RawHotel]", hotels)
    return []


class AsyncLiteAPIClient:
    """LiteAPI v3.0 Client (Async).

    Args:
        api_key: LiteAPI key, sent as the ``X-API-Key`` header.
        base_url: API root, override for sandbox or tests.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async LiteAPI client with credentials."""
        self._timeout = httpx.Timeout(timeout)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=self._timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "X-API-Key": api_key,
            },
        )

    async def close(self) -> None:
        """Close the async HTTP client connection."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context manager and close connection."""
        await self.close()

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async request to LiteAPI.

        Args:
            method: HTTP method.
            endpoint: API endpoint path.
            params: Query string parameters.
            payload: JSON body to send.

        Returns:
            Decoded JSON body.

        Raises:
            LiteAPITimeoutError: If the request times out.
            LiteAPIConnectionError: If connection fails.
            LiteAPIRequestError: If the request fails.
            LiteAPIAuthError: If the key is rejected (401/403).
            LiteAPIHttpError: If API returns an error status code.
            LiteAPIInvalidJsonError: If response is not valid JSON.
        """
        start_time = time.perf_counter()
        try:
            response = await self._client.request(method, endpoint, params=params, json=payload)
        except httpx.TimeoutException as e:
            elapsed = time.perf_counter() - start_time
            logger.warning("[LiteAPI] %s - TIMEOUT after %.2fs", endpoint, elapsed)
            raise LiteAPITimeoutError from e
        except httpx.ConnectError as e:
            elapsed = time.perf_counter() - start_time
            logger.warning("[LiteAPI] %s - CONNECTION ERROR after %.2fs", endpoint, elapsed)
            raise LiteAPIConnectionError(e) from e
        except httpx.RequestError as e:
            elapsed = time.perf_counter() - start_time
            logger.warning("[LiteAPI] %s - REQUEST ERROR after %.2fs", endpoint, elapsed)
            raise LiteAPIRequestError(e) from e

        elapsed = time.perf_counter() - start_time
        logger.debug("[LiteAPI] %s - %d in %.2fs", endpoint, response.status_code, elapsed)

        if response.status_code in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN):
            raise LiteAPIAuthError(response.status_code)
        if response.status_code >= HTTP_BAD_REQUEST:
            raise LiteAPIHttpError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise LiteAPIInvalidJsonError(e) from e

    async def search_hotels(
        self,
        latitude: float,
        longitude: float,
        radius: int,
    ) -> list[RawHotel]:
        """Search for hotels around a point.

        Args:
            latitude: Latitude of the search centre.
            longitude: Longitude of the search centre.
            radius: Search radius in meters.

        Returns:
            List of raw hotel objects.
        """
        params: dict[str, Any] = {
            "longitude": longitude,
            "latitude": latitude,
            "radius": radius,
        }
        data = await self._request("GET", "/data/hotels", params=params)
        return _extract_hotel_list(data)

    async def get_hotel(self, hotel_id: str) -> RawHotelDetails | None:
        """Get full details for one hotel.

        Args:
            hotel_id: LiteAPI hotel identifier.

        Returns:
            Raw hotel details, or None if the API has no such hotel.
        """
        try:
            data = await self._request("GET", "/data/hotel", params={"hotelId": hotel_id})
        except LiteAPIHttpError as e:
            if e.status_code == HTTP_NOT_FOUND:
                return None
            raise
        if not isinstance(data, dict):
            return None
        hotel = data.get("data")
        if not isinstance(hotel, dict) or not hotel:
            return None
        return cast("RawHotelDetails", hotel)

    async def get_rates(
        self,
        hotel_id: str,
        checkin: str,
        checkout: str,
        occupancies: list[Occupancy],
        currency: str = "USD",
        guest_nationality: str = "US",
    ) -> list[RawRoomType]:
        """Get bookable room offers for one hotel and stay.

        Args:
            hotel_id: LiteAPI hotel identifier.
            checkin: Check-in date (YYYY-MM-DD).
            checkout: Check-out date (YYYY-MM-DD).
            occupancies: Guests per room.
            currency: Price currency (ISO 4217).
            guest_nationality: Guest nationality (ISO 3166-1 alpha-2).

        Returns:
            Room offers of the hotel; empty when nothing is available.
        """
        payload: dict[str, Any] = {
            "hotelIds": [hotel_id],
            "checkin": checkin,
            "checkout": checkout,
            "currency": currency,
            "guestNationality": guest_nationality,
            "occupancies": occupancies,
        }
        data = await self._request("POST", "/hotels/rates", payload=payload)
        if not isinstance(data, dict):
            return []
        hotels = data.get("data")
        if not isinstance(hotels, list) or not hotels or not isinstance(hotels[0], dict):
            return []
        room_types = hotels[0].get("roomTypes")
        if not isinstance(room_types, list):
            return []
        return cast("list[RawRoomType]", room_types)
