from enum import Enum

from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = "http://api.db-ip.com/v2/"


class ErrorCode(str, Enum):
    """Machine-readable error codes advertised by the DB-IP API.

    The server is free to send codes outside this set; they are passed through
    to callers untouched (see ServerError.known_code).
    """

    INVALID_KEY = "INVALID_KEY"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    HTTPS_NOT_ALLOWED = "HTTPS_NOT_ALLOWED"
    TEMPORARY_BLOCKED = "TEMPORARY_BLOCKED"
    TOO_MANY_ADDRESSES = "TOO_MANY_ADDRESSES"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    EXPIRED = "EXPIRED"
    UNAVAILABLE = "UNAVAILABLE"


class ClientSettings(BaseModel):
    """Connection settings for a DB-IP client.

    Instances are replaced, never mutated, so a request in flight always reads
    a consistent snapshot.
    """

    model_config = {"frozen": True}

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    language: str | None = None

    @field_validator("api_key", mode="before")
    @classmethod
    def _validate_api_key(cls, value: str) -> str:
        value_str = str(value or "").strip()
        if not value_str:
            raise ValueError("api_key must not be blank")
        return value_str

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value: str | None) -> str | None:
        """Blank language tags mean "no preference"."""
        if value is None:
            return None
        value_str = str(value).strip()
        return value_str or None
