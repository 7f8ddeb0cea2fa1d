"""API test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test DB
    - db_manager patched so nothing touches the configured database
    - fake_store swaps the whole DataStore for error-path tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.infrastructure.database import get_db, DatabaseSessionManager
from postboard.infrastructure.repositories import get_store
import postboard.infrastructure.database as db_module
from postboard.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def fake_store():
    """Returns a function installing a store object in place of DataStore.

    The returned client does not re-raise app exceptions, so catch-all
    handler responses can be asserted.
    """
    clients = []

    def install(store):
        app.dependency_overrides[get_store] = lambda: store
        c = AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield install

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
