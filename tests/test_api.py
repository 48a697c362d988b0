from collections.abc import Callable
from typing import Any

import pytest

from dbip_client import api
from dbip_client.errors import ConfigurationError

FakeHttp = Callable[..., list[dict[str, Any]]]


def test_default_client_requires_a_key() -> None:
    with pytest.raises(ConfigurationError):
        api.lookup("1.1.1.1")


def test_lookup_uses_default_api_key(fake_http: FakeHttp) -> None:
    calls = fake_http({"ipAddress": "1.1.1.1", "countryCode": "AU"})

    api.set_default_api_key("defaultkey")
    result = api.lookup("1.1.1.1")

    assert result == {"ipAddress": "1.1.1.1", "countryCode": "AU"}
    assert calls[0]["url"] == "http://api.db-ip.com/v2/defaultkey/1.1.1.1"


def test_key_info_uses_default_client(fake_http: FakeHttp) -> None:
    calls = fake_http({"queriesLeft": 42})

    api.set_default_api_key("defaultkey")

    assert api.key_info() == {"queriesLeft": 42}
    assert calls[0]["url"] == "http://api.db-ip.com/v2/defaultkey"


def test_default_client_is_created_once() -> None:
    api.set_default_api_key("defaultkey")

    assert api.get_default_client() is api.get_default_client()


def test_setting_a_new_key_replaces_default_client(fake_http: FakeHttp) -> None:
    calls = fake_http({"ipAddress": "1.1.1.1"})

    api.set_default_api_key("first")
    api.lookup("1.1.1.1")
    api.set_default_api_key("second")
    api.lookup("1.1.1.1")

    assert [call["url"] for call in calls] == [
        "http://api.db-ip.com/v2/first/1.1.1.1",
        "http://api.db-ip.com/v2/second/1.1.1.1",
    ]


def test_default_client_reads_environment(monkeypatch: pytest.MonkeyPatch, fake_http: FakeHttp) -> None:
    calls = fake_http({"ipAddress": "8.8.8.8"})
    monkeypatch.setenv(api.API_KEY_ENV, "envkey")
    monkeypatch.setenv(api.BASE_URL_ENV, "http://example/")

    api.lookup(["8.8.8.8", "1.1.1.1"])

    assert calls[0]["url"] == "http://example/envkey/8.8.8.8,1.1.1.1"


def test_explicit_key_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(api.API_KEY_ENV, "envkey")
    api.set_default_api_key("explicit")

    assert api.get_default_client().settings.api_key == "explicit"
