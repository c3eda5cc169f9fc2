"""LiteAPI type definitions (request and response types).

Only the fields this service reads are declared. LiteAPI returns numbers as
either JSON numbers or strings depending on the endpoint, so numeric fields
are typed loosely and parsed during normalization.
"""

from typing import NotRequired, TypedDict

# =============================================================================
# Request Types
# =============================================================================


class Occupancy(TypedDict):
    """One room's guests for a rates request."""

    adults: int
    children: NotRequired[list[int]]  # Ages of children (0-17)


# =============================================================================
# Response Types: Hotel list (/data/hotels)
# =============================================================================


class RawHotel(TypedDict, total=False):
    """Hotel object from the lat/lng/radius search."""

    id: str
    name: str
    address: str
    city: str
    country: str  # ISO 3166-1 alpha-2, lowercase ("gb")
    latitude: float | str
    longitude: float | str
    rating: float | str | None
    stars: float | str | None
    main_photo: str | None
    thumbnail: str | None
    hotelDescription: str | None


# =============================================================================
# Response Types: Hotel details (/data/hotel)
# =============================================================================


class HotelImage(TypedDict, total=False):
    """Image entry in hotel details."""

    url: str
    urlHd: str
    caption: str


class Facility(TypedDict, total=False):
    """Facility entry in hotel details."""

    facilityId: int
    name: str


class CheckinCheckoutTimes(TypedDict, total=False):
    """Check-in and check-out times."""

    checkin: str
    checkout: str


class RawHotelDetails(RawHotel, total=False):
    """Full hotel object from the details endpoint."""

    hotelImages: list[HotelImage]
    facilities: list[Facility | str]
    hotelFacilities: list[str]
    checkinCheckoutTimes: CheckinCheckoutTimes
    email: str
    phone: str
    website: str


# =============================================================================
# Response Types: Room rates (/hotels/rates)
# =============================================================================


class Amount(TypedDict, total=False):
    """Price in one currency."""

    amount: float
    currency: str


class RetailRate(TypedDict, total=False):
    """Retail price breakdown of a rate."""

    total: list[Amount]


class RawRate(TypedDict, total=False):
    """Bookable rate within a room offer."""

    rateId: str
    name: str
    maxOccupancy: int
    retailRate: RetailRate


class RawRoomType(TypedDict, total=False):
    """Room offer grouping one or more rates."""

    roomTypeId: str
    offerId: str
    rates: list[RawRate]
