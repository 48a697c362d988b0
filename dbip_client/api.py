"""Module-level helpers backed by a lazily created default Client.

    from dbip_client import api

    api.set_default_api_key("my-key")
    api.lookup("1.1.1.1")
    api.key_info()

Code that needs more than one configuration should build its own Client.
"""

import os
from collections.abc import Sequence
from typing import Any

from dbip_client.client import Client
from dbip_client.errors import ConfigurationError
from dbip_client.models.common import DEFAULT_BASE_URL

API_KEY_ENV = "DBIP_API_KEY"
BASE_URL_ENV = "DBIP_BASE_URL"

_default_api_key: str | None = None
_default_client: Client | None = None


def set_default_api_key(api_key: str) -> None:
    """Set the key used by the default client; takes effect on the next call."""
    global _default_api_key
    _default_api_key = api_key
    reset_default_client()


def reset_default_client() -> None:
    """Forget the cached default client; the next call builds a fresh one."""
    global _default_client
    _default_client = None


def get_default_client() -> Client:
    """Return the process-wide client, creating it on first use.

    The key comes from set_default_api_key() or, failing that, DBIP_API_KEY.
    DBIP_BASE_URL overrides the endpoint when set.
    """
    global _default_client
    if _default_client is None:
        api_key = _default_api_key or os.getenv(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(f"No DB-IP API key configured; call set_default_api_key() or set {API_KEY_ENV}.")
        _default_client = Client(api_key, base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL)
    return _default_client


def lookup(address: str | Sequence[str]) -> dict[str, Any]:
    """Look up one address, or a list of addresses, with the default client."""
    return get_default_client().lookup_address(address)


def key_info() -> dict[str, Any]:
    """Account and quota information for the default API key."""
    return get_default_client().get_key_info()
