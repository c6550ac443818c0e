"""Tests for booking CRUD, filter and utility endpoints."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MISSING_ID = "000000000000000000000000"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _payload(**overrides) -> dict:
    payload = {
        "bookingId": "B5555",
        "customerName": "Sneha",
        "hotelName": "Hotel Paradise",
        "status": "Pending",
        "checkInDate": "2024-07-01",
        "checkOutDate": "2024-07-05",
    }
    payload.update(overrides)
    return payload


async def _create(client: AsyncClient, **overrides) -> str:
    response = await client.post("/api/v1/bookings", json=_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["id"]


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


class TestCreateBooking:
    async def test_create_success(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/bookings", json=_payload())
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Booking created successfully"
        assert "id" in data

        fetched = await client.get(f"/api/v1/bookings/{data['id']}")
        assert fetched.status_code == 200
        booking = fetched.json()
        assert booking["id"] == data["id"]
        assert booking["bookingId"] == "B5555"
        assert booking["hotelName"] == "Hotel Paradise"
        assert booking["createdAt"] == date.today().isoformat()

    async def test_client_created_at_is_ignored(self, client: AsyncClient) -> None:
        booking_id = await _create(client, createdAt="2001-01-01")
        booking = (await client.get(f"/api/v1/bookings/{booking_id}")).json()
        assert booking["createdAt"] == date.today().isoformat()

    async def test_fields_are_not_validated(self, client: AsyncClient) -> None:
        booking_id = await _create(client, status="whatever", checkInDate="soon")
        booking = (await client.get(f"/api/v1/bookings/{booking_id}")).json()
        assert booking["status"] == "whatever"
        assert booking["checkInDate"] == "soon"

    async def test_empty_body_is_accepted(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/bookings", json={})
        assert response.status_code == 201


class TestReadBookings:
    async def test_list_all(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings")
        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == sample_bookings

    async def test_list_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/bookings")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize("booking_id", [MISSING_ID, "not-an-object-id"])
    async def test_get_not_found(self, client: AsyncClient, booking_id: str) -> None:
        response = await client.get(f"/api/v1/bookings/{booking_id}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Booking not found"


class TestUpdateBooking:
    @pytest.mark.parametrize("method", ["PUT", "PATCH"])
    async def test_full_replace(self, client: AsyncClient, method: str) -> None:
        booking_id = await _create(client)

        response = await client.request(method, f"/api/v1/bookings/{booking_id}", json={"status": "Confirmed"})

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == booking_id
        assert data["status"] == "Confirmed"
        assert data["customerName"] is None
        assert data["createdAt"] == date.today().isoformat()

    @pytest.mark.parametrize("method", ["PUT", "PATCH"])
    async def test_update_not_found(self, client: AsyncClient, method: str) -> None:
        response = await client.request(method, f"/api/v1/bookings/{MISSING_ID}", json=_payload())
        assert response.status_code == 404


class TestDeleteBooking:
    async def test_delete(self, client: AsyncClient) -> None:
        booking_id = await _create(client)

        response = await client.delete(f"/api/v1/bookings/{booking_id}")
        assert response.status_code == 200
        assert response.json()["message"] == "Booking deleted successfully"

        assert (await client.get(f"/api/v1/bookings/{booking_id}")).status_code == 404
        assert (await client.delete(f"/api/v1/bookings/{booking_id}")).status_code == 404


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestFilters:
    async def test_by_status(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-status", params={"status": "pend"})
        assert response.status_code == 200
        assert [b["bookingId"] for b in response.json()] == ["B1002"]

    @pytest.mark.parametrize("params", [{}, {"status": ""}, {"status": "   "}])
    async def test_by_status_blank_is_empty(self, client: AsyncClient, sample_bookings, params) -> None:
        response = await client.get("/api/v1/bookings/by-status", params=params)
        assert response.status_code == 200
        assert response.json() == []

    async def test_by_hotel(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-hotel", params={"hotel": "TAJ"})
        assert {b["bookingId"] for b in response.json()} == {"B1001", "B1003"}

    async def test_by_hotel_blank_is_empty(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-hotel", params={"hotel": " "})
        assert response.json() == []

    async def test_by_date(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-date", params={"from": "2024-03-05", "to": "2024-03-20"})
        assert response.status_code == 200
        assert [b["createdAt"] for b in response.json()] == ["2024-03-05", "2024-03-05", "2024-03-10", "2024-03-20"]

    async def test_by_day(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-day", params={"date": "2024-03-10"})
        assert [b["bookingId"] for b in response.json()] == ["B1003"]

    async def test_by_day_missing_date_is_empty(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/by-day")
        assert response.json() == []

    async def test_upcoming(self, client: AsyncClient) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        yesterday = (date.today() - timedelta(days=1)).isoformat()
        await _create(client, bookingId="old", checkInDate=yesterday)
        await _create(client, bookingId="soon", checkInDate=tomorrow)

        response = await client.get("/api/v1/bookings/upcoming")
        assert [b["bookingId"] for b in response.json()] == ["soon"]

    async def test_combined_filter(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get(
            "/api/v1/bookings/filter",
            params={"status": "confirmed", "hotel": "royal", "from": "2024-03-01", "to": "2024-03-31"},
        )
        assert response.status_code == 200
        assert [b["bookingId"] for b in response.json()] == ["B1005"]

    async def test_combined_filter_without_params(self, client: AsyncClient, sample_bookings) -> None:
        response = await client.get("/api/v1/bookings/filter")
        dates = [b["createdAt"] for b in response.json()]
        assert len(dates) == 5
        assert dates == sorted(dates, reverse=True)


class TestPagination:
    async def test_pages(self, client: AsyncClient, store, make_booking) -> None:
        ids = await store.insert_many([make_booking(bookingId=f"B{3000 + i}") for i in range(15)])

        first = await client.get("/api/v1/bookings/paged", params={"page": 1, "pageSize": 10})
        second = await client.get("/api/v1/bookings/paged", params={"page": 2, "pageSize": 10})

        assert [b["id"] for b in first.json()] == ids[:10]
        assert [b["id"] for b in second.json()] == ids[10:]

    async def test_defaults(self, client: AsyncClient, store, make_booking) -> None:
        await store.insert_many([make_booking() for _ in range(12)])
        response = await client.get("/api/v1/bookings/paged")
        assert len(response.json()) == 10

    async def test_page_zero_is_first_page(self, client: AsyncClient, store, make_booking) -> None:
        ids = await store.insert_many([make_booking() for _ in range(3)])
        response = await client.get("/api/v1/bookings/paged", params={"page": 0, "pageSize": 2})
        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == ids[:2]


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


class TestGenerate:
    async def test_generate_inserts_count(self, client: AsyncClient, store) -> None:
        response = await client.post("/api/v1/bookings/generate", params={"count": 25})
        assert response.status_code == 200
        assert response.json()["message"] == "25 random bookings inserted successfully"
        assert await store.count() == 25

    async def test_generate_default_count(self, client: AsyncClient, store) -> None:
        response = await client.post("/api/v1/bookings/generate")
        assert response.status_code == 200
        assert await store.count() == 50

    async def test_generate_zero(self, client: AsyncClient, store) -> None:
        response = await client.post("/api/v1/bookings/generate", params={"count": 0})
        assert response.status_code == 200
        assert await store.count() == 0
