"""Root conftest — shared settings, ASGI test client, and SearchClient wired in-process.

Invariants:
    - Every test sees the fixture dataset and TEST_TOKEN, regardless of the shell env
    - get_settings dependency overridden per test and cleared afterwards
    - search_client talks to the app through ASGITransport (no sockets)
"""

import os
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DATASET_PATH = FIXTURES_DIR / "dataset.xml"
TEST_TOKEN = "test-access-token"

os.environ.setdefault("ACCESS_TOKEN", TEST_TOKEN)
os.environ.setdefault("DATASET_PATH", str(DATASET_PATH))

from usersearch.config import Settings, get_settings  # noqa: E402
from usersearch.infrastructure.search_client import SearchClient  # noqa: E402
from usersearch.main import app  # noqa: E402


@pytest.fixture
def dataset_path() -> Path:
    return DATASET_PATH


@pytest.fixture
def access_token() -> str:
    return TEST_TOKEN


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        access_token=TEST_TOKEN,
        dataset_path=str(DATASET_PATH),
    )


@pytest.fixture
def test_app(settings):
    """App with get_settings overridden; tests may swap `settings` via override."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Raw HTTP client against the app."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def search_client(test_app) -> SearchClient:
    """SearchClient authenticated with TEST_TOKEN, served by the in-process app."""
    return SearchClient(
        url="http://test",
        access_token=TEST_TOKEN,
        transport=ASGITransport(app=test_app),
    )
