import json
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

import httpx
import pytest

from dbip_client import api
from tests.common import MockClient, MockResponse


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[dict[str, Any]]]:
    """Patch httpx.Client to answer every GET with a fixed response.

    Returns a function taking either a JSON-serializable payload or a raw body
    string; it installs the stub and hands back the list of recorded requests.
    """

    def _install(payload: Any = None, *, body: str | None = None, status_code: int = HTTPStatus.OK) -> list[dict[str, Any]]:
        calls: list[dict[str, Any]] = []
        text = body if body is not None else json.dumps(payload)
        response = MockResponse(status_code=status_code, text=text)
        monkeypatch.setattr(httpx, "Client", lambda *args, **kwargs: MockClient(response, calls, **kwargs))
        return calls

    return _install


@pytest.fixture(autouse=True)
def _isolated_default_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts without a default key or a cached default client."""
    monkeypatch.delenv(api.API_KEY_ENV, raising=False)
    monkeypatch.delenv(api.BASE_URL_ENV, raising=False)
    monkeypatch.setattr(api, "_default_api_key", None)
    api.reset_default_client()
