import pytest
from datetime import date, timedelta
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db import session as db_session
from app.core.cache import memory_cache
from app.core.config import settings
from app.core.rate_limit import reset_limiters
from app.core.security import create_access_token, hash_password
from app.services.itineraries import clear_fallback_store

TEST_DATABASE_URL = "sqlite+aiosqlite://"
DRIVER_PASSWORD = "teranga-2025"


@pytest.fixture(autouse=True)
def reset_state():
    reset_limiters()
    memory_cache.clear()
    clear_fallback_store()
    yield
    reset_limiters()
    memory_cache.clear()
    clear_fallback_store()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep a developer's .env from switching on real vendors during tests."""
    for key in ("GEMINI_API_KEY", "HUGGINGFACE_API_KEY", "OPENAI_API_KEY", "GROQ_API_KEY",
                "AI_PROVIDER", "RESEND_API_KEY", "DRIVER_EMAIL", "REDIS_URL", "DATABASE_URL"):
        monkeypatch.setattr(settings, key, None)
    monkeypatch.setattr(settings, "AI_FALLBACK_PROVIDER", "demo")
    monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", True)
    monkeypatch.setattr(settings, "ENVIRONMENT", "test")
    return settings


@pytest.fixture
async def test_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def setup_db():
    """In-memory SQLite standing in for Postgres; torn down after each test."""
    sessionmaker = db_session.init_db(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db_session.create_tables()
    yield sessionmaker
    await db_session.close_db()


@pytest.fixture
def driver_token():
    return create_access_token(settings.DRIVER_USERNAME)


@pytest.fixture
def driver_headers(driver_token):
    return {"Authorization": f"Bearer {driver_token}"}


@pytest.fixture
def driver_password(monkeypatch):
    monkeypatch.setattr(settings, "DRIVER_PASSWORD_HASH", hash_password(DRIVER_PASSWORD))
    return DRIVER_PASSWORD


@pytest.fixture
def future_date():
    return (date.today() + timedelta(days=30)).isoformat()


@pytest.fixture
def valid_trip_data(future_date):
    return {
        "departure": "Dakar",
        "destination": "Aéroport Léopold Sédar Senghor",
        "date": future_date,
        "time": "08:00",
        "passengers": 2,
        "duration_days": 1,
        "vehicle_type": "standard",
        "customer_name": "Awa Diop",
        "customer_phone": "+221 77 123 45 67",
        "customer_email": "Awa.Diop@example.com",
        "special_requests": "Siège enfant",
    }


@pytest.fixture
def valid_itinerary_data():
    return {
        "recommendation": {
            "itinerary": {
                "duration": 10,
                "destinations": [
                    {"id": "dakar", "name": "Dakar", "region": "Dakar"},
                    {"id": "saint-louis", "name": "Saint-Louis", "region": "Saint-Louis"},
                    {"id": "lompoul", "name": "Lompoul", "region": "Louga"},
                    {"id": "saly", "name": "Saly", "region": "Thiès"},
                ],
                "totalCost": {"min": 450000, "max": 600000, "currency": "FCFA"},
            }
        },
        "extracted_info": {"dates": {"duration": 8}, "groupInfo": {"size": 3}},
        "conversational_response": "Voici votre circuit entre ville, désert et plage.",
        "client_name": "Marie",
        "client_phone": "+33612345678",
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "rate_limit: marks tests related to rate limiting"
    )
    config.addinivalue_line(
        "markers", "ai: marks tests related to AI provider selection"
    )
    config.addinivalue_line(
        "markers", "persistence: marks tests that use the database"
    )
