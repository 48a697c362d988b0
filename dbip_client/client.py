import logging
from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

import httpx

from dbip_client.decoder import decode_response
from dbip_client.errors import FetchError
from dbip_client.models.common import DEFAULT_BASE_URL, ClientSettings
from dbip_client.request_builder import build_path, build_url, redact_url

logger = logging.getLogger("dbip.client")


class Client:
    """Client for the http://api.db-ip.com/v2/ IP geolocation API.

    Every call is a single blocking GET on a fresh httpx.Client. Responses are
    returned as plain dicts since the set of fields depends on the API plan.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        language: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._settings = ClientSettings(api_key=api_key, base_url=base_url, language=language)
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: ClientSettings, timeout_seconds: float | None = None) -> "Client":
        return cls(settings.api_key, settings.base_url, settings.language, timeout_seconds)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def configure(self, api_key: str, base_url: str | None = None) -> None:
        """Replace the API key and, optionally, the base endpoint. No request is made."""
        update: dict[str, Any] = {"api_key": api_key}
        if base_url is not None:
            update["base_url"] = base_url
        self._settings = ClientSettings(**{**self._settings.model_dump(), **update})

    def set_preferred_language(self, language: str | None) -> None:
        """Send `language` as Accept-Language on subsequent calls; None clears it."""
        self._settings = ClientSettings(**{**self._settings.model_dump(), "language": language})

    def lookup_address(self, address: str | Sequence[str]) -> dict[str, Any]:
        """Look up one address, or several at once when given a list."""
        return self._request(build_path(address))

    def get_key_info(self) -> dict[str, Any]:
        """Fetch account and quota information for the configured API key."""
        return self._request()

    def _request(self, path: str = "") -> dict[str, Any]:
        settings = self._settings
        url = build_url(settings.base_url, settings.api_key, path)
        headers = {"Accept-Language": settings.language} if settings.language else {}

        safe_url = redact_url(url, settings.base_url, settings.api_key)
        logger.debug(f"GET {safe_url} language={settings.language}")
        try:
            with httpx.Client(timeout=self._timeout_seconds) as client:
                response = client.get(url, headers=headers)
        except httpx.RequestError as exc:
            raise FetchError(f"unable to fetch URL: {url}", url=url) from exc

        if not (HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES) or not response.text:
            logger.debug(f"Unusable response from {safe_url} status={response.status_code}")
            raise FetchError(f"unable to fetch URL: {url}", url=url)

        return decode_response(response.text, url=url)
