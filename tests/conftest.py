"""Shared fixtures: a recording fake registry behind `httpx.MockTransport`."""

from __future__ import annotations

import httpx
import pytest

from adapters.blockstack_client import BlockstackClient
from core.config import AppSettings
from core.domain.models import Credentials
from tests.helpers.fake_registry import APP_ID, APP_SECRET, FakeRegistry


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(app_id=APP_ID, app_secret=APP_SECRET)


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def http_client(registry: FakeRegistry) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(registry))


@pytest.fixture
def client(credentials: Credentials, http_client: httpx.AsyncClient) -> BlockstackClient:
    return BlockstackClient(credentials, http_client=http_client)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Settings isolated from `.env` files and BLOCKSTACK_D2_* variables."""

    for name in ("APP_ID", "APP_SECRET", "API_BASE_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT"):
        monkeypatch.delenv(f"BLOCKSTACK_D2_{name}", raising=False)
    return AppSettings(_env_file=None)
