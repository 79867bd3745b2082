import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.database import get_db
from app.main import app


@pytest.fixture
def storage_outage():
    """Point every request at a database file that cannot be opened."""
    engine = create_async_engine(
        "sqlite+aiosqlite:////nonexistent-dir/fuelcontrol.sqlite3", poolclass=NullPool
    )
    broken_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _broken_db():
        async with broken_session() as session:
            yield session

    app.dependency_overrides[get_db] = _broken_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/api/vehicle", None),
        ("POST", "/api/vehicle", {"name": "Clio"}),
        ("GET", "/api/stations", None),
        ("POST", "/api/stations", {"name": "BP", "logo_url": None}),
        ("PUT", "/api/stations/1", {"name": "BP", "logo_url": None}),
        ("DELETE", "/api/stations/1", None),
        ("GET", "/api/logs", None),
        ("POST", "/api/logs", {"date": "2024-01-01", "company": "Shell"}),
        ("PUT", "/api/logs/1", {"date": "2024-01-01", "company": "Shell"}),
        ("DELETE", "/api/logs/1", None),
    ],
)
async def test_storage_outage_returns_500(storage_outage, method, path, body):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(method, path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}


@pytest.mark.asyncio
async def test_greeting_does_not_touch_storage(storage_outage):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api")

    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path, body",
    [
        ("POST", "/api/logs", {"date": "2024-01-01", "liters": "quarenta"}),
        ("POST", "/api/logs", {"date": "ontem"}),
        ("POST", "/api/vehicle", {"year": "dois mil"}),
        ("PUT", "/api/stations/abc", {"name": "BP", "logo_url": None}),
        ("PUT", "/api/logs/abc", {"date": "2024-01-01"}),
        ("DELETE", "/api/stations/abc", None),
        ("DELETE", "/api/logs/abc", None),
    ],
)
async def test_rejected_values_return_500(method, path, body):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(method, path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}
