from typing import Any

import pytest
from pydantic import ValidationError

from dbip_client.models.request_models import AddressLookupRequest


def _build_request(addresses: Any) -> AddressLookupRequest:
    """Helper to construct AddressLookupRequest, used to keep tests small."""
    return AddressLookupRequest(addresses=addresses)


def test_single_ipv4_stays_a_string_target() -> None:
    req = _build_request("8.8.8.8")
    assert req.addresses == ["8.8.8.8"]
    assert req.lookup_target == "8.8.8.8"


def test_comma_separated_list_keeps_order() -> None:
    req = _build_request("8.8.8.8, 2001:4860:4860::8888,1.1.1.1")
    assert req.lookup_target == ["8.8.8.8", "2001:4860:4860::8888", "1.1.1.1"]


def test_blank_entries_are_dropped() -> None:
    req = _build_request("1.1.1.1,,")
    assert req.lookup_target == "1.1.1.1"


def test_rejects_invalid_address() -> None:
    with pytest.raises(ValidationError):
        _build_request("1.1.1.1,qwerty")


def test_rejects_empty_input() -> None:
    with pytest.raises(ValidationError):
        _build_request(" , ")
