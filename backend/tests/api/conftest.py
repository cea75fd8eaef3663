"""API test fixtures — FastAPI app behind an in-process HTTP client.

Invariants:
    - Requests go through the ASGI app, no network
    - Settings cache is cleared around each test so env overrides apply
"""

import pytest
from httpx import ASGITransport, AsyncClient

from talentgate.config import get_settings
from talentgate.main import app


@pytest.fixture
async def client():
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()
