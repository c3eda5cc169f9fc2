"""Hotel records, normalization, completeness scoring and deduplication."""

from __future__ import annotations

import math
import uuid
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from config import MAX_HOTELS_PER_QUERY

if TYPE_CHECKING:
    from liteapi import RawHotel, RawHotelDetails

MIN_DESCRIPTION_LENGTH = 20

# ISO codes LiteAPI returns that we show as full names
COUNTRY_NAMES: dict[str, str] = {
    "gb": "United Kingdom",
}

LocationKey = tuple[str, float, float]


class HotelRecord(BaseModel):
    """Snapshot of a hotel as seen from the search provider.

    Records are immutable: merging two of them builds a new record.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    latitude: float
    longitude: float
    address: str | None = None
    city: str | None = None
    country: str | None = None
    rating: float | None = None
    star_rating: float | None = None
    description: str | None = None
    thumbnail: str | None = None
    images: list[str] = Field(default_factory=list)


class HotelDetails(HotelRecord):
    """Hotel record enriched with the details endpoint's extra fields."""

    latitude: float | None = None  # type: ignore[assignment]
    longitude: float | None = None  # type: ignore[assignment]
    amenities: list[str] = Field(default_factory=list)
    check_in_time: str | None = None
    check_out_time: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None


# Fields considered when gap-filling a merge winner from the loser
MERGE_FIELDS: tuple[str, ...] = tuple(HotelRecord.model_fields)


# =============================================================================
# Normalization
# =============================================================================


def parse_float(value: Any) -> float | None:
    """Parse a number that may arrive as a string, returning None if invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    return number if math.isfinite(number) else None


def _country_name(code: str | None) -> str | None:
    if not code:
        return None
    return COUNTRY_NAMES.get(code.lower(), code)


def normalize_hotel(raw: RawHotel) -> HotelRecord | None:
    """Convert a raw LiteAPI hotel into a HotelRecord.

    Args:
        raw: Hotel object from the hotel list endpoint.

    Returns:
        Normalized record, or None when the hotel has no usable coordinates.
    """
    latitude = parse_float(raw.get("latitude"))
    longitude = parse_float(raw.get("longitude"))
    if latitude is None or longitude is None:
        return None

    main_photo = raw.get("main_photo")
    return HotelRecord(
        id=str(raw.get("id") or f"hotel-{uuid.uuid4().hex[:8]}"),
        name=raw.get("name") or "Unknown Hotel",
        latitude=latitude,
        longitude=longitude,
        address=raw.get("address") or None,
        city=raw.get("city") or None,
        country=_country_name(raw.get("country")),
        rating=parse_float(raw.get("rating")),
        star_rating=parse_float(raw.get("stars")),
        description=raw.get("hotelDescription") or None,
        thumbnail=raw.get("thumbnail") or None,
        images=[main_photo] if main_photo else [],
    )


def normalize_hotels(
    raw_hotels: list[RawHotel],
    limit: int = MAX_HOTELS_PER_QUERY,
) -> list[HotelRecord]:
    """Normalize a provider response, dropping unusable records.

    LiteAPI has no limit parameter on the hotel list endpoint, so the result
    is truncated here.
    """
    hotels: list[HotelRecord] = []
    for raw in raw_hotels:
        if not isinstance(raw, dict):
            continue
        hotel = normalize_hotel(raw)
        if hotel is not None:
            hotels.append(hotel)
    return hotels[:limit]


def _image_urls(raw: RawHotelDetails) -> list[str]:
    images = raw.get("hotelImages")
    if isinstance(images, list):
        urls = []
        for image in images:
            if isinstance(image, dict):
                url = image.get("urlHd") or image.get("url")
            else:
                url = image if isinstance(image, str) else None
            if url:
                urls.append(url)
        return urls
    main_photo = raw.get("main_photo")
    return [main_photo] if main_photo else []


def _amenity_names(raw: RawHotelDetails) -> list[str]:
    facilities = raw.get("facilities") or raw.get("hotelFacilities") or []
    names = []
    for facility in facilities:
        name = facility.get("name") if isinstance(facility, dict) else facility
        if name:
            names.append(str(name))
    return names


def normalize_hotel_details(raw: RawHotelDetails, hotel_id: str) -> HotelDetails:
    """Convert the details endpoint payload into HotelDetails."""
    images = _image_urls(raw)
    times = raw.get("checkinCheckoutTimes") or {}
    # LiteAPI reports 0 for unknown coordinates
    latitude = parse_float(raw.get("latitude")) or None
    longitude = parse_float(raw.get("longitude")) or None

    return HotelDetails(
        id=hotel_id,
        name=raw.get("name") or "Unknown Hotel",
        latitude=latitude,
        longitude=longitude,
        address=raw.get("address") or None,
        city=raw.get("city") or None,
        country=_country_name(raw.get("country")),
        rating=parse_float(raw.get("rating")),
        star_rating=parse_float(raw.get("stars")),
        description=raw.get("hotelDescription") or None,
        thumbnail=(images[0] if images else None) or raw.get("thumbnail") or None,
        images=images,
        amenities=_amenity_names(raw),
        check_in_time=times.get("checkin") or None,
        check_out_time=times.get("checkout") or None,
        email=raw.get("email") or None,
        phone=raw.get("phone") or None,
        website=raw.get("website") or None,
    )


# =============================================================================
# Completeness scoring and deduplication
# =============================================================================


def completeness_score(hotel: HotelRecord) -> float:
    """Score how filled-in a hotel record is.

    Score components:
    - Description longer than 20 characters: +2
    - Thumbnail: +2
    - At least one image: +1
    - Star rating: + star count
    - Rating above zero: +1
    - Address: +1

    Only meaningful for comparing two records of the same hotel.
    """
    score = 0.0
    if hotel.description and len(hotel.description) > MIN_DESCRIPTION_LENGTH:
        score += 2
    if hotel.thumbnail:
        score += 2
    if hotel.images:
        score += 1
    if hotel.star_rating and hotel.star_rating > 0:
        score += hotel.star_rating
    if hotel.rating and hotel.rating > 0:
        score += 1
    if hotel.address:
        score += 1
    return score


def location_key(hotel: HotelRecord) -> LocationKey:
    """Identity used for deduplication: normalized name and ~100m grid cell.

    Provider ids are not stable across queries, so they are not used.
    """
    return (
        hotel.name.strip().lower(),
        round(hotel.latitude, 3),
        round(hotel.longitude, 3),
    )


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, int | float) and not isinstance(value, bool) and value == 0


def merge_hotels(winner: HotelRecord, loser: HotelRecord) -> HotelRecord:
    """Fill the winner's missing (None or zero) fields from the loser."""
    updates: dict[str, Any] = {}
    for field in MERGE_FIELDS:
        if _is_missing(getattr(winner, field)):
            value = getattr(loser, field)
            updates[field] = list(value) if isinstance(value, list) else value
    if not updates:
        return winner
    # deep, so the merged record does not share the winner's lists
    return winner.model_copy(update=updates, deep=True)


def dedupe_hotels(hotels: list[HotelRecord]) -> list[HotelRecord]:
    """Collapse records describing the same physical hotel.

    On a key collision the more complete record wins and has its gaps
    filled from the other. Equal scores keep the record seen first.
    Output follows the order in which each key first appeared.

    Args:
        hotels: Normalized records, possibly with duplicates.

    Returns:
        One merged record per location key.
    """
    merged: dict[LocationKey, HotelRecord] = {}
    for hotel in hotels:
        key = location_key(hotel)
        existing = merged.get(key)
        if existing is None:
            merged[key] = hotel
            continue

        if completeness_score(hotel) > completeness_score(existing):
            merged[key] = merge_hotels(hotel, existing)
        else:
            merged[key] = merge_hotels(existing, hotel)

    return list(merged.values())
