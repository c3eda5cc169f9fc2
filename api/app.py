"""FastAPI application factory."""

import logging
from typing import Annotated

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import (
    CORS_ORIGINS,
    DEFAULT_SEARCH_RADIUS_M,
    HOTEL_CACHE_TTL_SECONDS,
    LITEAPI_BASE_URL,
    LITEAPI_KEY,
    LITEAPI_REQUEST_TIMEOUT,
    MAX_HOTELS_PER_QUERY,
)
from liteapi import AsyncLiteAPIClient, LiteAPIClientError, LiteAPIHttpError
from services import (
    HotelCache,
    HotelProvider,
    HotelSearchService,
    LiteAPIHotelProvider,
    RateQuery,
    StaticHotelProvider,
)
from utils.geo import radius_for_zoom

from .schemas import (
    ErrorResponse,
    HealthResponse,
    HotelDetailsResponse,
    HotelListResponse,
    RatesRequest,
    RoomRatesResponse,
)

logger = logging.getLogger(__name__)

HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_ERROR = 500


def build_provider() -> HotelProvider:
    """Create the provider selected by configuration."""
    if not LITEAPI_KEY:
        logger.warning("LITEAPI_KEY is not set, serving static sample hotels")
        return StaticHotelProvider()
    client = AsyncLiteAPIClient(
        LITEAPI_KEY,
        base_url=LITEAPI_BASE_URL,
        timeout=LITEAPI_REQUEST_TIMEOUT,
    )
    return LiteAPIHotelProvider(client, limit=MAX_HOTELS_PER_QUERY)


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    provider: HotelProvider | None = None,
    cache: HotelCache | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        provider: Hotel provider; built from configuration if omitted.
        cache: Bucket cache shared by all nearby requests.
    """
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    hotel_provider = provider if provider is not None else build_provider()
    hotel_cache = cache if cache is not None else HotelCache(ttl=HOTEL_CACHE_TTL_SECONDS)
    search_service = HotelSearchService(hotel_provider, hotel_cache)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await hotel_provider.close()

    @app.exception_handler(LiteAPIClientError)
    async def provider_error_handler(request: Request, exc: LiteAPIClientError) -> JSONResponse:
        logger.error("Hotel provider error on %s: %s", request.url.path, exc)
        return _error(HTTP_INTERNAL_ERROR, "Failed to fetch hotel data", str(exc))

    @app.get("/health")
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", provider=hotel_provider.name)

    @app.get("/hotels", response_model=HotelListResponse)
    async def list_hotels(
        latitude: Annotated[float | None, Query(ge=-90, le=90)] = None,
        longitude: Annotated[float | None, Query(ge=-180, le=180)] = None,
        radius: Annotated[int, Query(gt=0, description="Search radius in meters")] = DEFAULT_SEARCH_RADIUS_M,
    ) -> HotelListResponse | JSONResponse:
        """Raw provider results around a point, normalized but not deduplicated."""
        if latitude is None or longitude is None:
            return _error(HTTP_BAD_REQUEST, "Missing required parameters: latitude and longitude")

        logger.info("Hotel request for lat=%s, lng=%s, radius=%s", latitude, longitude, radius)
        hotels = await hotel_provider.search_hotels(latitude, longitude, radius)
        return HotelListResponse(hotels=hotels)

    @app.get("/hotels/nearby")
    async def nearby_hotels(
        latitude: Annotated[float, Query(ge=-90, le=90)],
        longitude: Annotated[float, Query(ge=-180, le=180)],
        radius: Annotated[int | None, Query(gt=0)] = None,
        zoom: Annotated[float | None, Query(ge=0, le=24)] = None,
        exclude_id: str | None = None,
    ) -> HotelListResponse:
        """Deduplicated, cached hotels around a point.

        ``radius`` wins over ``zoom``; with neither the default radius is used.
        """
        if radius is None:
            radius = radius_for_zoom(zoom) if zoom is not None else DEFAULT_SEARCH_RADIUS_M
        hotels = await search_service.get_hotels_nearby(latitude, longitude, radius, exclude_id)
        return HotelListResponse(hotels=hotels)

    @app.get("/hotels/{hotel_id}", response_model=HotelDetailsResponse)
    async def hotel_details(hotel_id: str) -> HotelDetailsResponse | JSONResponse:
        logger.info("Hotel details request for hotel_id=%s", hotel_id)
        hotel = await search_service.get_hotel(hotel_id)
        if hotel is None:
            return _error(HTTP_NOT_FOUND, "Hotel not found")
        return HotelDetailsResponse(hotel=hotel)

    @app.post("/hotels/{hotel_id}/rates", response_model=RoomRatesResponse)
    async def hotel_rates(hotel_id: str, body: RatesRequest) -> RoomRatesResponse | JSONResponse:
        """Bookable rooms for a stay, one entry per rate."""
        if not body.checkin or not body.checkout or not body.adults:
            return _error(HTTP_BAD_REQUEST, "Missing required parameters: checkin, checkout, adults")

        query = RateQuery(
            checkin=body.checkin,
            checkout=body.checkout,
            adults=body.adults,
            children=body.children or 0,
            currency=body.currency or "USD",
            guest_nationality=body.guest_nationality or "US",
        )
        logger.info("Rates request for hotel_id=%s, %s to %s", hotel_id, query.checkin, query.checkout)
        try:
            rooms = await hotel_provider.get_rates(hotel_id, query)
        except LiteAPIHttpError as e:
            logger.error("LiteAPI rejected rates request for %s: %s", hotel_id, e)
            return _error(e.status_code, "Failed to fetch rates from LiteAPI", e.response_text)
        return RoomRatesResponse(available_rooms=rooms)

    return app
