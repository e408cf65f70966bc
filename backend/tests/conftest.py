"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from inventory.main import app
from inventory.models.base import Base
from inventory.db.session import enable_sqlite_foreign_keys, get_db
from inventory.dao.category import CategoryDAO
from inventory.dao.product import ProductDAO
from inventory.services.category_service import CategoryService
from inventory.services.product_service import ProductService
from tests.factories import CategoryFactory


# Test database URL
# WHY: In-memory SQLite keeps tests fast and free of external services.
# StaticPool shares the single in-memory connection across the test.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    Create a test database engine.

    WHY: Function scope ensures each test gets a fresh database state,
    preventing test pollution and ensuring test isolation. Foreign keys
    are enforced exactly as in the application engine.
    """
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    WHY: AsyncClient allows testing FastAPI endpoints without running
    a real server. The app's get_db dependency is pointed at the test session.

    Yields:
        AsyncClient: HTTP client for making test requests
    """

    async def override_get_db():
        """Override database dependency with test session."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def category_service(db_session: AsyncSession) -> CategoryService:
    """CategoryService wired to the test session."""
    return CategoryService(CategoryDAO(db_session), ProductDAO(db_session))


@pytest.fixture
def product_service(db_session: AsyncSession) -> ProductService:
    """ProductService wired to the test session."""
    return ProductService(ProductDAO(db_session), CategoryDAO(db_session))


@pytest_asyncio.fixture
async def test_category(db_session: AsyncSession):
    """
    Create a test category.

    WHY: Every product needs an existing category to reference.
    """
    return await CategoryFactory.create(db_session, name="Electronics")


@pytest.fixture
def sample_product_data(test_category) -> dict:
    """
    Sample product payload for tests.

    WHY: Centralizing test data ensures consistency across tests
    and makes it easy to update test data in one place.
    """
    return {
        "name": "Laptop",
        "description": "Gaming laptop",
        "price": 1000,
        "stock": 10,
        "category_id": test_category.id,
    }
