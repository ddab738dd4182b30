"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

# Test settings must be in place before the application modules import them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.models import Base


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

RegisterUser = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client on the module-level app (no overrides)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
) -> FastAPI:
    """
    Create an app wired to the test database.

    Services get a Unit of Work factory bound to the in-memory database and
    the test auth provider; authentication itself is real.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_auth_service,
        get_post_service,
        get_profile_service,
    )
    from domain.services.auth_service import AuthService
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_auth_service] = lambda: AuthService(
        test_uow_factory, auth_provider=auth_provider
    )
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(test_uow_factory)
    app.dependency_overrides[get_post_service] = lambda: PostService(test_uow_factory)
    return app


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client against the test-database app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(api_client: AsyncClient) -> RegisterUser:
    """Register a user through the API and return its auth headers."""

    async def _register(
        name: str = "Test User",
        email: str = "test@example.com",
        password: str = "secret123",
    ) -> dict[str, str]:
        response = await api_client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest.fixture
async def auth_headers(register_user: RegisterUser) -> dict[str, str]:
    """Headers for a freshly registered default user."""
    return await register_user()
