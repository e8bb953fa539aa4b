"""API test fixtures — FastAPI test client with an in-memory icon registry.

Invariants:
    - get_icon_registry dependency overridden: no icon library file needed
    - Overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from logo_engine.infrastructure.icon_registry import StaticIconRegistry, get_icon_registry
from logo_engine.main import app


@pytest.fixture
def registry():
    return StaticIconRegistry(
        theme_icon_ids=["arcane", "emerald"],
        library={
            "lorc/sword": {
                "name": "Sword", "artist": "lorc", "tags": ["weapon"], "path": "lorc/sword",
            },
        },
    )


@pytest.fixture
async def client(registry):
    app.dependency_overrides[get_icon_registry] = lambda: registry
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
