"""Shared test fixtures for ecwid_api.

Provides an isolated environment (no ``ECWID_*`` variables leaking in from
the developer's shell), a recording mock transport, and a reset of the
global output manager between tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from ecwid_api.client.store_client import StoreClient
from ecwid_api.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time;
    pytest's capture swaps that stream per test.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear ECWID_* environment variables and chdir into tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    for var in [
        "ECWID_STORE_ID",
        "ECWID_BASE_URL",
        "ECWID_ORDER_SECRET_KEY",
        "ECWID_PRODUCT_SECRET_KEY",
        "ECWID_TIMEOUT",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled.

    The responder may be replaced between requests via :attr:`responder`.
    """

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self.responder = responder
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response with a JSON body."""
    return httpx.Response(
        status_code,
        headers={"content-type": "application/json"},
        content=json.dumps(data).encode("utf-8"),
    )


@pytest.fixture
def transport() -> RecordingTransport:
    """A recording transport answering every request with ``{"ok": true}``."""
    return RecordingTransport(lambda request: json_response({"ok": True}))


@pytest.fixture
def client(transport: RecordingTransport) -> StoreClient:
    """A StoreClient for store 12345 with both secret keys, backed by *transport*."""
    store = StoreClient(
        store_id="12345",
        order_secret_key="ORDER_SECRET_KEY",
        product_secret_key="PRODUCT_SECRET_KEY",
        transport=transport,
    )
    yield store
    store.close()
