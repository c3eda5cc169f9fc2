"""Room rate lookup for a single hotel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .hotels import parse_float

if TYPE_CHECKING:
    from liteapi import Occupancy, RawRoomType

# Age sent for each child; the booking form only collects a child count
DEFAULT_CHILD_AGE = 10


@dataclass(frozen=True)
class RateQuery:
    """Stay and guests to price."""

    checkin: str
    checkout: str
    adults: int
    children: int = 0
    currency: str = "USD"
    guest_nationality: str = "US"

    def occupancies(self) -> list[Occupancy]:
        """All guests in one room."""
        return [{"adults": self.adults, "children": [DEFAULT_CHILD_AGE] * max(self.children, 0)}]


class RoomRate(BaseModel):
    """One bookable rate, serialized in camelCase for the booking page."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    offer_id: str | None = None
    name: str | None = None
    max_occupancy: int | None = None
    price: float | None = None


def flatten_room_rates(room_types: list[RawRoomType]) -> list[RoomRate]:
    """Turn room offers into one entry per rate.

    The offer id lives on the room offer and is copied onto each of its
    rates. Offers without rates contribute nothing.
    """
    rooms: list[RoomRate] = []
    for room_type in room_types:
        if not isinstance(room_type, dict):
            continue
        for rate in room_type.get("rates") or []:
            totals = (rate.get("retailRate") or {}).get("total") or []
            rooms.append(
                RoomRate(
                    offer_id=room_type.get("offerId"),
                    name=rate.get("name"),
                    max_occupancy=rate.get("maxOccupancy"),
                    price=parse_float(totals[0].get("amount")) if totals else None,
                )
            )
    return rooms
