import pytest
from httpx import ASGITransport, AsyncClient

from ratelimit_explain.api.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
