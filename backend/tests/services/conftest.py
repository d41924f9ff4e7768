"""Service test fixtures — engine settings + FastAPI test client.

Invariants:
    - Every test starts with no open form sessions
    - get_settings dependency overridden with deterministic English settings
    - Route tests go through the real app (error handlers included)

Design Decisions:
    - httpx ASGITransport: in-process, no server, lifespan not triggered
    - Settings built explicitly instead of read from the environment
"""

import pytest
from httpx import ASGITransport, AsyncClient

from invoice_forms.api.routes import form_sessions as form_sessions_routes
from invoice_forms.config import Settings, get_settings
from invoice_forms.core.domain_types import Locale
from invoice_forms.main import app


@pytest.fixture
def settings():
    return Settings(
        default_locale=Locale.EN,
        strict_messages=False,
        rule_timeout_seconds=1.0,
    )


@pytest.fixture
async def client(settings):
    """FastAPI test client with settings dependency overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    form_sessions_routes._form_sessions.clear()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    form_sessions_routes._form_sessions.clear()


@pytest.fixture
async def form_id(client):
    """Id of a freshly opened person form."""
    resp = await client.post("/api/v1/form-sessions", json={"form_type": "person"})
    assert resp.status_code == 201
    return resp.json()["id"]
