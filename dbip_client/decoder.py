import json
from typing import Any

from dbip_client.errors import DecodeError, ServerError, UnexpectedResponseError


def decode_response(body: str, url: str | None = None) -> dict[str, Any]:
    """Decode an API response body and surface embedded API errors.

    The DB-IP API reports failures in the JSON body itself, e.g.
        { "error": "invalid API key", "errorCode": "INVALID_KEY" }
    Any `error` field, whatever its value, raises ServerError, with `errorCode` passed
    through verbatim (None when absent).
    Anything else that decodes to a JSON object is returned unchanged.
    """
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise DecodeError("cannot decode server response", url=url) from exc

    if not isinstance(data, dict):
        raise UnexpectedResponseError(
            f"unexpected server response: expected a JSON object, got {type(data).__name__}",
            url=url,
        )

    if "error" in data:
        raise ServerError(str(data["error"]), data.get("errorCode"))

    return data
