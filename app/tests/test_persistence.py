import asyncio

import pytest
from sqlalchemy.future import select

from app.models.itinerary import SavedItinerary
from app.models.trip import TripQuote, TripRequest
from app.schemas.itinerary import SaveItineraryRequest
from app.core.cache import MemoryCache
from app.core.config import settings
from app.core.errors import NotFoundError
from app.schemas.trip import TripRequestIn
from app.services import itineraries, trips

pytestmark = pytest.mark.persistence


class TestTripPersistence:

    @pytest.mark.asyncio
    async def test_quote_is_stored(self, test_client, setup_db, valid_trip_data):
        response = await test_client.post("/api/v1/trips/quote", json=valid_trip_data)
        assert response.status_code == 200
        trip_id = response.json()["trip_request_id"]
        assert trip_id.isdigit()

        async with setup_db() as session:
            trip = (await session.execute(select(TripRequest))).scalars().one()
            quote = (await session.execute(select(TripQuote))).scalars().one()

        assert str(trip.id) == trip_id
        assert trip.customer_email == "awa.diop@example.com"
        assert trip.vehicle_type == "standard"
        assert quote.trip_request_id == trip.id
        assert quote.total_price == 10500
        assert quote.vehicle_info["price_per_km"] == 500

    @pytest.mark.asyncio
    async def test_driver_lists_and_reads_trips(self, test_client, setup_db, valid_trip_data, driver_headers):
        first = (await test_client.post("/api/v1/trips/quote", json=valid_trip_data)).json()
        payload = dict(valid_trip_data, destination="Thiès")
        second = (await test_client.post("/api/v1/trips/quote", json=payload)).json()

        response = await test_client.get("/api/v1/trips", headers=driver_headers)
        assert response.status_code == 200
        listed = response.json()
        assert [str(t["id"]) for t in listed] == [second["trip_request_id"], first["trip_request_id"]]
        assert listed[0]["quote"]["total_price"] == 42000

        response = await test_client.get(f"/api/v1/trips/{first['trip_request_id']}", headers=driver_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["destination"] == "Aéroport Léopold Sédar Senghor"
        assert data["quote"]["route"][0]["distance"] == "3.2 km"

    @pytest.mark.asyncio
    async def test_pagination(self, test_client, setup_db, valid_trip_data, driver_headers):
        for _ in range(3):
            await test_client.post("/api/v1/trips/quote", json=valid_trip_data)

        response = await test_client.get("/api/v1/trips", params={"limit": 2, "offset": 2}, headers=driver_headers)
        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_unknown_trip(self, test_client, setup_db, driver_headers):
        response = await test_client.get("/api/v1/trips/999", headers=driver_headers)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_failed_write_falls_back_to_demo_id(self, setup_db, valid_trip_data, monkeypatch):
        async def broken_write(*args, **kwargs):
            raise RuntimeError("disk full")

        monkeypatch.setattr(trips, "_write_trip", broken_write)
        async with setup_db() as session:
            quote = await trips.generate_quote(TripRequestIn(**valid_trip_data), session)

        assert quote.trip_request_id.startswith("demo-")
        assert quote.total_price == 10500

    @pytest.mark.asyncio
    async def test_slow_write_times_out_to_demo_id(self, setup_db, valid_trip_data, monkeypatch):
        async def slow_write(*args, **kwargs):
            await asyncio.sleep(5)
            return "1"

        monkeypatch.setattr(trips, "_write_trip", slow_write)
        monkeypatch.setattr(settings, "DB_WRITE_TIMEOUT", 0.05)
        async with setup_db() as session:
            quote = await trips.generate_quote(TripRequestIn(**valid_trip_data), session)

        assert quote.trip_request_id.startswith("demo-")
        assert quote.total_price == 10500

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client, setup_db):
        data = (await test_client.get("/health")).json()
        assert data["dependencies"]["database"] == "connected"

        response = await test_client.get("/readiness")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"


class TestItineraryPersistence:

    @pytest.mark.asyncio
    async def test_itinerary_is_stored(self, test_client, setup_db, valid_itinerary_data):
        response = await test_client.post("/api/v1/itineraries", json=valid_itinerary_data)
        saved = response.json()

        assert saved["persisted"] is True
        assert saved["itinerary_id"].isdigit()

        response = await test_client.get(f"/api/v1/itineraries/{saved['itinerary_id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Dakar + Saint-Louis + Lompoul (8j)"
        assert data["client_name"] == "Marie"
        assert data["budget_max"] == 600000
        assert data["itinerary_data"]["itinerary"]["duration"] == 10

        async with setup_db() as session:
            row = (await session.execute(select(SavedItinerary))).scalars().one()
        assert row.group_size == 3

    @pytest.mark.asyncio
    async def test_failed_write_keeps_itinerary_in_memory(self, setup_db, valid_itinerary_data, monkeypatch):
        async def broken_write(*args, **kwargs):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(itineraries, "_write_itinerary", broken_write)
        async with setup_db() as session:
            saved = await itineraries.save_itinerary(SaveItineraryRequest(**valid_itinerary_data), session)
            assert saved.persisted is False
            assert saved.itinerary_id.startswith("demo-")

            stored = await itineraries.get_itinerary(saved.itinerary_id, session)
        assert stored.title == saved.title

    @pytest.mark.asyncio
    async def test_slow_write_times_out_to_memory(self, setup_db, valid_itinerary_data, monkeypatch):
        async def slow_write(*args, **kwargs):
            await asyncio.sleep(5)
            return "1"

        monkeypatch.setattr(itineraries, "_write_itinerary", slow_write)
        monkeypatch.setattr(settings, "DB_WRITE_TIMEOUT", 0.05)
        async with setup_db() as session:
            saved = await itineraries.save_itinerary(SaveItineraryRequest(**valid_itinerary_data), session)

        assert saved.persisted is False
        assert saved.itinerary_id.startswith("demo-")
        stored = await itineraries.get_itinerary(saved.itinerary_id)
        assert stored.title == "Dakar + Saint-Louis + Lompoul (8j)"


class TestFallbackStore:

    @pytest.mark.asyncio
    async def test_oldest_itineraries_are_evicted(self, valid_itinerary_data, monkeypatch):
        monkeypatch.setattr(itineraries, "_fallback_store", MemoryCache(max_size=3))
        request = SaveItineraryRequest(**valid_itinerary_data)
        ids = [(await itineraries.save_itinerary(request)).itinerary_id for _ in range(5)]

        assert len(itineraries._fallback_store) == 3
        for itinerary_id in ids[:2]:
            with pytest.raises(NotFoundError):
                await itineraries.get_itinerary(itinerary_id)
        assert (await itineraries.get_itinerary(ids[-1])).id == ids[-1]

    @pytest.mark.asyncio
    async def test_itineraries_expire(self, valid_itinerary_data, monkeypatch):
        now = [1000.0]
        monkeypatch.setattr(itineraries, "_fallback_store", MemoryCache(clock=lambda: now[0]))
        monkeypatch.setattr(settings, "ITINERARY_FALLBACK_TTL", 60)

        saved = await itineraries.save_itinerary(SaveItineraryRequest(**valid_itinerary_data))
        assert (await itineraries.get_itinerary(saved.itinerary_id)).title == saved.title

        now[0] += 61
        with pytest.raises(NotFoundError):
            await itineraries.get_itinerary(saved.itinerary_id)
