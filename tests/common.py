from http import HTTPStatus
from typing import Any

import httpx


class MockResponse:
    def __init__(self, status_code: int = HTTPStatus.OK, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class MockClient:
    """Minimal context-manager mock for httpx.Client that records every GET."""

    def __init__(self, response: MockResponse, calls: list[dict[str, Any]], **kwargs: Any) -> None:
        self._response = response
        self._calls = calls
        self.kwargs = kwargs

    def __enter__(self) -> "MockClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def get(self, url: str, headers: dict[str, str] | None = None) -> MockResponse:
        self._calls.append({"url": url, "headers": dict(headers or {}), "client_kwargs": self.kwargs})
        return self._response


class FailingClient:
    """Client that raises a RequestError on GET to simulate an unreachable endpoint."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        pass

    def __enter__(self) -> "FailingClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def get(self, url: str, headers: dict[str, str] | None = None) -> MockResponse:
        raise httpx.ConnectError("Network failure", request=httpx.Request("GET", url))
