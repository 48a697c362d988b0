from typing import Any

from dbip_client.models.common import ErrorCode


class DbipError(Exception):
    """Base error for the DB-IP API client."""


class ConfigurationError(DbipError):
    """Raised when the client cannot be built from the available configuration."""


class ClientError(DbipError):
    """Base error for failures on our side of the wire (transport or decoding).

    The attempted URL is kept on the exception. It embeds the API key, so avoid
    logging it verbatim.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class FetchError(ClientError):
    """Raised when the API endpoint is unreachable or returns no usable body."""


class DecodeError(ClientError):
    """Raised when the response body is not valid JSON."""


class UnexpectedResponseError(ClientError):
    """Raised when the response is valid JSON but not a JSON object."""


class ServerError(DbipError):
    """Raised when the API answers with an explicit `error` object."""

    def __init__(self, error_message: str, error_code: Any = None) -> None:
        super().__init__(f"server reported an error: {error_message}")
        self.error_message = error_message
        self.error_code = error_code

    @property
    def known_code(self) -> ErrorCode | None:
        """The matching ErrorCode member, or None for codes outside the documented set."""
        if not isinstance(self.error_code, str):
            return None
        try:
            return ErrorCode(self.error_code)
        except ValueError:
            return None
