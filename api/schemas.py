"""API response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services import HotelDetails, HotelRecord, RoomRate


class HotelListResponse(BaseModel):
    """Hotels around a point."""

    hotels: list[HotelRecord] = Field(description="Hotels found near the requested point")


class HotelDetailsResponse(BaseModel):
    """Full details of one hotel."""

    hotel: HotelDetails = Field(description="Hotel details")


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint."""

    error: str = Field(description="Short error message")
    details: str | None = Field(default=None, description="Underlying cause, if known")


class HealthResponse(BaseModel):
    """Service health."""

    status: str = Field(description="Always 'ok' when the app is serving")
    provider: str = Field(description="Name of the active hotel provider")


class RatesRequest(BaseModel):
    """Stay to price, as sent by the booking page.

    Required fields are optional here so a missing one gets a 400 with a
    readable message instead of a validation error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    checkin: str | None = Field(default=None, description="Check-in date (YYYY-MM-DD)")
    checkout: str | None = Field(default=None, description="Check-out date (YYYY-MM-DD)")
    adults: int | None = Field(default=None, ge=0, description="Number of adults")
    children: int | None = Field(default=None, ge=0, description="Number of children")
    currency: str | None = Field(default=None, description="Price currency (ISO 4217)")
    guest_nationality: str | None = Field(default=None, description="Guest nationality (ISO 3166-1 alpha-2)")


class RoomRatesResponse(BaseModel):
    """Bookable rooms of one hotel."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    available_rooms: list[RoomRate] = Field(description="One entry per bookable rate")
