"""
Shared test fixtures.

The API has no external infrastructure, so the only thing replaced here is
configuration:
- Settings → a test instance with a small quantum and cycle limit
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Run without Docker or a running server
- Run in milliseconds
- Don't depend on env vars or a local .env file
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_settings
from config.settings import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by the API under test. Tests can mutate the fields they care about."""
    return Settings(
        ROUND_ROBIN_TIME_QUANTUM=2,
        MAX_SIMULATION_CYCLES=1_000,
        _env_file=None,
    )


@pytest_asyncio.fixture
async def client(test_settings):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the real get_settings,
    use this test version." This is how endpoints pick up test configuration.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
