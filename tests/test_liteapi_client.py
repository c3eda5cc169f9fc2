"""Tests for the LiteAPI client and the LiteAPI-backed provider."""

import json

import httpx
import pytest

from liteapi import (
    AsyncLiteAPIClient,
    LiteAPIAuthError,
    LiteAPIConnectionError,
    LiteAPIError,
    LiteAPIHttpError,
    LiteAPIInvalidJsonError,
    LiteAPINetworkError,
    LiteAPITimeoutError,
)
from services import LiteAPIHotelProvider, RateQuery, RoomRate, flatten_room_rates

RATES_BODY = {
    "data": [
        {
            "hotelId": "lp19c4a",
            "roomTypes": [
                {
                    "offerId": "offer-1",
                    "rates": [
                        {
                            "name": "Double Room",
                            "maxOccupancy": 2,
                            "retailRate": {"total": [{"amount": 142.5, "currency": "GBP"}]},
                        },
                        {
                            "name": "Double Room, breakfast",
                            "maxOccupancy": 2,
                            "retailRate": {"total": [{"amount": "171.00", "currency": "GBP"}]},
                        },
                    ],
                },
                {"offerId": "offer-2", "rates": []},
                {"offerId": "offer-3"},
            ],
        },
    ],
}

RAW_HOTEL = {
    "id": "lp19c4a",
    "name": "Glen Coe Hotel",
    "address": "Main Street",
    "city": "Glencoe",
    "country": "gb",
    "latitude": 56.6823,
    "longitude": -5.1025,
    "rating": 7.9,
    "stars": 3,
    "main_photo": "https://img.example/glencoe.jpg",
}


def _client(handler) -> AsyncLiteAPIClient:
    return AsyncLiteAPIClient("test-key", transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_search_hotels_sends_query_and_key():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [RAW_HOTEL], "hotelIds": ["lp19c4a"], "total": 1})

    async with _client(handler) as client:
        hotels = await client.search_hotels(56.68, -5.1, 5000)

    assert hotels == [RAW_HOTEL]
    request = seen[0]
    assert request.url.path == "/v3.0/data/hotels"
    assert request.url.params["latitude"] == "56.68"
    assert request.url.params["longitude"] == "-5.1"
    assert request.url.params["radius"] == "5000"
    assert request.headers["X-API-Key"] == "test-key"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "body",
    [{"hotels": [RAW_HOTEL]}, {"results": [RAW_HOTEL]}, [RAW_HOTEL]],
)
async def test_search_hotels_accepts_alternative_envelopes(body):
    async with _client(lambda request: httpx.Response(200, json=body)) as client:
        assert await client.search_hotels(56.68, -5.1, 5000) == [RAW_HOTEL]


@pytest.mark.anyio
async def test_search_hotels_unknown_envelope_is_empty():
    async with _client(lambda request: httpx.Response(200, json={"total": 0})) as client:
        assert await client.search_hotels(56.68, -5.1, 5000) == []


@pytest.mark.anyio
@pytest.mark.parametrize("status", [401, 403])
async def test_rejected_key_raises_auth_error(status):
    async with _client(lambda request: httpx.Response(status, text="denied")) as client:
        with pytest.raises(LiteAPIAuthError) as exc_info:
            await client.search_hotels(56.68, -5.1, 5000)
    assert exc_info.value.status_code == status


@pytest.mark.anyio
async def test_server_error_raises_http_error():
    async with _client(lambda request: httpx.Response(502, text="bad gateway")) as client:
        with pytest.raises(LiteAPIHttpError) as exc_info:
            await client.search_hotels(56.68, -5.1, 5000)
    assert exc_info.value.status_code == 502
    assert "bad gateway" in str(exc_info.value)


@pytest.mark.anyio
async def test_malformed_json_raises_invalid_json_error():
    async with _client(lambda request: httpx.Response(200, text="<html>oops</html>")) as client:
        with pytest.raises(LiteAPIInvalidJsonError):
            await client.search_hotels(56.68, -5.1, 5000)


@pytest.mark.anyio
@pytest.mark.parametrize(
    "response",
    [httpx.Response(500, text="boom"), httpx.Response(200, text="not json")],
)
async def test_api_errors_share_a_base_apart_from_network_errors(response):
    async with _client(lambda request: response) as client:
        with pytest.raises(LiteAPIError) as exc_info:
            await client.search_hotels(56.68, -5.1, 5000)
    assert not isinstance(exc_info.value, LiteAPINetworkError)

@pytest.mark.anyio
async def test_timeout_raises_timeout_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    async with _client(handler) as client:
        with pytest.raises(LiteAPITimeoutError):
            await client.search_hotels(56.68, -5.1, 5000)


@pytest.mark.anyio
async def test_connection_failure_raises_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(LiteAPIConnectionError):
            await client.search_hotels(56.68, -5.1, 5000)


@pytest.mark.anyio
async def test_get_hotel_returns_details():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["hotelId"] == "lp19c4a"
        return httpx.Response(200, json={"data": {**RAW_HOTEL, "phone": "+44 1855 811245"}})

    async with _client(handler) as client:
        hotel = await client.get_hotel("lp19c4a")

    assert hotel is not None
    assert hotel["phone"] == "+44 1855 811245"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "response",
    [httpx.Response(404, text="not found"), httpx.Response(200, json={"data": {}})],
)
async def test_get_hotel_missing_returns_none(response):
    async with _client(lambda request: response) as client:
        assert await client.get_hotel("nope") is None


@pytest.mark.anyio
async def test_provider_normalizes_and_limits():
    raw = [{**RAW_HOTEL, "id": f"lp{i}"} for i in range(5)]
    raw.append({"id": "broken", "name": "No coordinates"})
    client = _client(lambda request: httpx.Response(200, json={"data": raw}))
    provider = LiteAPIHotelProvider(client, limit=3)

    hotels = await provider.search_hotels(56.68, -5.1, 5000)
    await provider.close()

    assert [hotel.id for hotel in hotels] == ["lp0", "lp1", "lp2"]
    assert hotels[0].country == "United Kingdom"
    assert hotels[0].star_rating == 3


@pytest.mark.anyio
async def test_provider_get_hotel_normalizes_details():
    client = _client(lambda request: httpx.Response(200, json={"data": RAW_HOTEL}))
    provider = LiteAPIHotelProvider(client)

    details = await provider.get_hotel("lp19c4a")
    await provider.close()

    assert details is not None
    assert details.id == "lp19c4a"
    assert details.images == ["https://img.example/glencoe.jpg"]


@pytest.mark.anyio
async def test_get_rates_posts_stay_and_occupancy():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=RATES_BODY)

    async with _client(handler) as client:
        room_types = await client.get_rates(
            "lp19c4a", "2026-11-02", "2026-11-04", [{"adults": 2, "children": [10]}], currency="GBP",
        )

    assert [room["offerId"] for room in room_types] == ["offer-1", "offer-2", "offer-3"]
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v3.0/hotels/rates"
    assert request.headers["X-API-Key"] == "test-key"
    assert json.loads(request.content) == {
        "hotelIds": ["lp19c4a"],
        "checkin": "2026-11-02",
        "checkout": "2026-11-04",
        "currency": "GBP",
        "guestNationality": "US",
        "occupancies": [{"adults": 2, "children": [10]}],
    }


@pytest.mark.anyio
@pytest.mark.parametrize("body", [{"data": []}, {"data": [{"hotelId": "lp19c4a"}]}, {"error": "none"}])
async def test_get_rates_without_rooms_is_empty(body):
    async with _client(lambda request: httpx.Response(200, json=body)) as client:
        assert await client.get_rates("lp19c4a", "2026-11-02", "2026-11-04", [{"adults": 1}]) == []


@pytest.mark.anyio
async def test_get_rates_error_status_raises_http_error():
    async with _client(lambda request: httpx.Response(400, text="invalid dates")) as client:
        with pytest.raises(LiteAPIHttpError) as exc_info:
            await client.get_rates("lp19c4a", "2026-11-04", "2026-11-02", [{"adults": 1}])
    assert exc_info.value.status_code == 400


def test_flatten_room_rates_copies_offer_id_onto_each_rate():
    rooms = flatten_room_rates(RATES_BODY["data"][0]["roomTypes"])

    assert rooms == [
        RoomRate(offer_id="offer-1", name="Double Room", max_occupancy=2, price=142.5),
        RoomRate(offer_id="offer-1", name="Double Room, breakfast", max_occupancy=2, price=171.0),
    ]


def test_flatten_room_rates_tolerates_missing_price():
    rooms = flatten_room_rates([{"offerId": "offer-9", "rates": [{"name": "Dorm bed"}]}])

    assert rooms == [RoomRate(offer_id="offer-9", name="Dorm bed")]


def test_rate_query_puts_all_guests_in_one_room():
    query = RateQuery(checkin="2026-11-02", checkout="2026-11-04", adults=2, children=2)

    assert query.occupancies() == [{"adults": 2, "children": [10, 10]}]


@pytest.mark.anyio
async def test_provider_get_rates_flattens_offers():
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json=RATES_BODY)

    provider = LiteAPIHotelProvider(_client(handler))
    query = RateQuery(checkin="2026-11-02", checkout="2026-11-04", adults=1, currency="EUR", guest_nationality="DE")

    rooms = await provider.get_rates("lp19c4a", query)
    await provider.close()

    assert [room.price for room in rooms] == [142.5, 171.0]
    assert seen[0]["currency"] == "EUR"
    assert seen[0]["guestNationality"] == "DE"
    assert seen[0]["occupancies"] == [{"adults": 1, "children": []}]
