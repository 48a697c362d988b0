from ipaddress import ip_address

from pydantic import BaseModel, Field, field_validator


class AddressLookupRequest(BaseModel):
    """Addresses to look up, taken from the /v1/ip/{addresses} path segment.

    The segment holds one address or a comma-separated list of them. The
    client library sends addresses as-is; the service checks them first so
    obviously bad input never costs an API query.
    """

    addresses: list[str] = Field(
        description="IPv4 or IPv6 addresses to look up, in request order.",
        examples=[["1.1.1.1"], ["1.1.1.1", "2001:4860:4860::8888"]],
    )

    @field_validator("addresses", mode="before")
    @classmethod
    def _split_addresses(cls, value: str | list[str]) -> list[str]:
        """Accept a comma-separated string; drop surrounding blanks; validate each literal."""
        items = value.split(",") if isinstance(value, str) else list(value)
        addresses = [str(item).strip() for item in items if str(item).strip()]

        if not addresses:
            raise ValueError("at least one address is required")

        for address in addresses:
            try:
                ip_address(address)
            except ValueError as exc:
                raise ValueError(f"{address!r} is not a valid IPv4 or IPv6 address") from exc

        return addresses

    @property
    def lookup_target(self) -> str | list[str]:
        """A single address stays a string; several become a list."""
        return self.addresses[0] if len(self.addresses) == 1 else self.addresses
