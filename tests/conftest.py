"""Shared test fixtures."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator, Callable

import httpx
import pytest

from adapters.service_performer import ServicePerformer
from core.config import AppSettings

BASE_URL = "https://api.example.test/"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from any .env file on the machine."""
    return AppSettings(_env_file=None, base_url=BASE_URL, http_timeout_seconds=5.0)


@pytest.fixture
def mock_performer(settings: AppSettings):
    """Build a ServicePerformer whose transport is an httpx.MockTransport.

    Usage::

        async with mock_performer(handler) as performer:
            outcome = await performer.perform_get_all(...)
    """

    @contextlib.asynccontextmanager
    async def _factory(handler: Handler) -> AsyncIterator[ServicePerformer]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            yield ServicePerformer(settings, client=client)

    return _factory


@pytest.fixture
def patch_transport(monkeypatch: pytest.MonkeyPatch):
    """Route every client the application builds through a mock handler."""

    def _patch(handler: Handler) -> None:
        def _build(settings: AppSettings | None = None, **_: object) -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(handler))

        monkeypatch.setattr("adapters.service_performer.build_async_client", _build)

    return _patch
