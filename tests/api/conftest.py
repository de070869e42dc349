"""API test fixtures — FastAPI app over a fresh store + httpx test client.

Invariants:
    - Every test gets its own TaskStore (no state leaks between tests)
    - Requests go through the full ASGI stack, including error handlers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.main import create_app


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
