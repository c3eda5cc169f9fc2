"""Business logic services for nearby-hotel search."""

from .cache import (
    CacheEntry,
    DistanceGate,
    HotelCache,
    NearbyQuery,
    cache_key,
)
from .hotels import (
    HotelDetails,
    HotelRecord,
    completeness_score,
    dedupe_hotels,
    location_key,
    merge_hotels,
    normalize_hotel,
    normalize_hotel_details,
    normalize_hotels,
)
from .nearby import (
    HotelSearchService,
    NearbyHotelsQuery,
    NearbyHotelsState,
)
from .providers import HotelProvider, LiteAPIHotelProvider, StaticHotelProvider
from .rates import RateQuery, RoomRate, flatten_room_rates

__all__ = [
    "CacheEntry",
    "DistanceGate",
    "HotelCache",
    "HotelDetails",
    "HotelProvider",
    "HotelRecord",
    "HotelSearchService",
    "LiteAPIHotelProvider",
    "NearbyHotelsQuery",
    "NearbyHotelsState",
    "NearbyQuery",
    "RateQuery",
    "RoomRate",
    "StaticHotelProvider",
    "cache_key",
    "completeness_score",
    "dedupe_hotels",
    "flatten_room_rates",
    "location_key",
    "merge_hotels",
    "normalize_hotel",
    "normalize_hotel_details",
    "normalize_hotels",
]
