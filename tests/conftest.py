# tests/conftest.py
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from donation_api.core.config import Settings
from donation_api.main import create_app
from donation_api.repos.inmemory import InMemoryDonationStore


@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"


@pytest.fixture
def settings():
    # never dialed: tests hand the app an in-memory store
    return Settings(mongo_uri="mongodb://unused.invalid:27017")


@pytest.fixture
def store():
    return InMemoryDonationStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
async def test_client(app):
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


def alice(**overrides):
    body = {
        "donor_name": "Alice",
        "donation_type": "food",
        "amount": 12,
        "donated_at": "2024-01-05",
    }
    body.update(overrides)
    return body
