import pytest
from httpx import ASGITransport, AsyncClient

from trip_proxy.core.config import Settings, get_settings
from trip_proxy.dependencies import get_invoker
from trip_proxy.main import app as proxy_app


class FakeInvoker:
    """Stands in for the Gemini client and records every spec it is asked to send."""

    def __init__(self):
        self.response = {}
        self.error = None
        self.calls = []

    async def invoke(self, spec):
        self.calls.append(spec)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", _env_file=None)


@pytest.fixture
def invoker():
    return FakeInvoker()


@pytest.fixture
async def proxy_client(settings, invoker):
    """Async client for the proxy app with settings and the upstream invoker overridden."""
    proxy_app.dependency_overrides[get_settings] = lambda: settings
    proxy_app.dependency_overrides[get_invoker] = lambda: invoker
    async with AsyncClient(transport=ASGITransport(app=proxy_app), base_url="http://test") as ac:
        yield ac
    proxy_app.dependency_overrides.clear()
