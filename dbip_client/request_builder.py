from collections.abc import Sequence

REDACTED = "***"


def build_path(address: str | Sequence[str]) -> str:
    """Turn one address or an ordered list of addresses into a URL path segment.

    Addresses are not validated or escaped; a list is joined with commas in the
    order given. An empty list is rejected, since it would turn a lookup into a
    key-info call.
    """
    if isinstance(address, str):
        return f"/{address}"
    if not address:
        raise ValueError("at least one address is required")
    return "/" + ",".join(address)


def build_url(base_url: str, api_key: str, path: str = "") -> str:
    return f"{base_url}{api_key}{path}"


def redact_url(url: str, base_url: str, api_key: str) -> str:
    """Mask the key segment that follows `base_url` so the URL can be logged.

    Only that segment is touched; the rest of the URL is left as-is.
    """
    prefix = f"{base_url}{api_key}"
    if not api_key or not url.startswith(prefix):
        return url
    return f"{base_url}{REDACTED}{url[len(prefix):]}"
