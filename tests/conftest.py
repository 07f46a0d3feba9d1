# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Sets up a throwaway in-memory garden database and a pretend web client for every test.
#
# 🧪 Purpose (Technical Summary):
# Shared pytest fixtures: SQLite (aiosqlite, StaticPool) engine with the schema created,
# a raw AsyncSession for service tests, an httpx AsyncClient over ASGITransport for API
# tests, and Bearer headers for two distinct owners.
#
# 🔗 Dependencies:
# pytest, pytest-asyncio, httpx, aiosqlite, SQLAlchemy
#
# 🔄 Connected Modules / Calls From:
# every test module

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-garden-planner"
os.environ["LOG_FORMAT"] = "text"

from typing import AsyncGenerator, Dict  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from garden_planner.main import app as fastapi_app  # noqa: E402
from garden_planner.modules.garden_layout.infrastructure.database import models  # noqa: E402,F401
from garden_planner.shared.config.database import DatabaseBase  # noqa: E402
from garden_planner.shared.core.security import create_access_token  # noqa: E402
from garden_planner.shared.infrastructure.database import (  # noqa: E402
    close_database,
    init_database,
    initialize_sessions,
)

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session for service-level tests; rolled back afterwards."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    await init_database(engine)
    initialize_sessions(engine)

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await close_database()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(OWNER_ID)}"}


@pytest.fixture
def other_user_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(OTHER_OWNER_ID)}"}


# =============================================================================
# API HELPERS
# =============================================================================

class GardenApi:
    """Thin wrapper over the HTTP API for building scenarios in tests."""

    def __init__(self, client: AsyncClient, headers: Dict[str, str]):
        self.client = client
        self.headers = headers

    async def garden(self, width: int = 120, height: int = 120, cell: int = 12) -> dict:
        response = await self.client.put(
            "/api/v1/garden",
            json={"widthInches": width, "heightInches": height, "cellInches": cell},
            headers=self.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def bed(self, name: str, width: int = 48, height: int = 96, cell: int = 12) -> dict:
        response = await self.client.post(
            "/api/v1/beds",
            json={"name": name, "widthInches": width, "heightInches": height, "cellInches": cell},
            headers=self.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def plant(self, name: str, spacing: int = 12) -> dict:
        response = await self.client.post(
            "/api/v1/plants",
            json={"name": name, "spacingInches": spacing},
            headers=self.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def position(self, bed_id: int, x, y):
        return await self.client.post(
            f"/api/v1/beds/{bed_id}/position",
            json={"gardenX": x, "gardenY": y},
            headers=self.headers,
        )

    async def place(self, bed_id: int, plant_id: int, x, y):
        return await self.client.post(
            f"/api/v1/beds/{bed_id}/place",
            json={"plantId": plant_id, "x": x, "y": y},
            headers=self.headers,
        )

    async def clear(self, bed_id: int, x, y):
        return await self.client.post(
            f"/api/v1/beds/{bed_id}/clear",
            json={"x": x, "y": y},
            headers=self.headers,
        )


@pytest.fixture
def api(client: AsyncClient, auth_headers: Dict[str, str]) -> GardenApi:
    return GardenApi(client, auth_headers)


@pytest.fixture
def other_api(client: AsyncClient, other_user_headers: Dict[str, str]) -> GardenApi:
    return GardenApi(client, other_user_headers)
