import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bearer_api_client.client import create_api_client  # noqa: E402
from bearer_api_client.config import load_settings  # noqa: E402
from bearer_api_client.utils.http import RetryPolicy  # noqa: E402

BASE_URI = "https://api.example.com"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables the Settings class reads."""
    monkeypatch.setenv("BASE_URI", BASE_URI)
    monkeypatch.setenv("USUARIO", "integracao")
    monkeypatch.setenv("SENHA", "s3cr3t")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("ENDPOINTS", raising=False)
    yield


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def sleeps():
    """Delays requested by the retry policy, in order."""
    return []


@pytest.fixture
def retry_policy(sleeps):
    """Default retry policy that records its backoff instead of sleeping."""

    async def fake_sleep(delay):
        sleeps.append(delay)

    return RetryPolicy(sleep=fake_sleep)


@pytest.fixture
def make_api_client(retry_policy):
    """Build an ApiClient whose transport is served by ``handler``."""

    def _make(handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return create_api_client(http_client=http_client, retry_policy=retry_policy)

    return _make
