"""LiteAPI travel data client package."""

from .client import AsyncLiteAPIClient
from .exceptions import (
    LiteAPIAuthError,
    LiteAPIClientError,
    LiteAPIConnectionError,
    LiteAPIError,
    LiteAPIHttpError,
    LiteAPIInvalidJsonError,
    LiteAPINetworkError,
    LiteAPIRequestError,
    LiteAPITimeoutError,
)
from .types import Occupancy, RawHotel, RawHotelDetails, RawRate, RawRoomType

__all__ = [
    "AsyncLiteAPIClient",
    "LiteAPIClientError",
    "LiteAPIAuthError",
    "LiteAPIError",
    "LiteAPIHttpError",
    "LiteAPIInvalidJsonError",
    "LiteAPINetworkError",
    "LiteAPITimeoutError",
    "LiteAPIConnectionError",
    "LiteAPIRequestError",
    "Occupancy",
    "RawHotel",
    "RawHotelDetails",
    "RawRate",
    "RawRoomType",
]
