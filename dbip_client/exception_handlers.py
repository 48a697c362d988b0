from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dbip_client.errors import ClientError, ServerError
from dbip_client.logger import logger
from dbip_client.models.common import ErrorCode

SERVER_ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ADDRESS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TOO_MANY_ADDRESSES: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OVER_QUERY_LIMIT: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.TEMPORARY_BLOCKED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _normalize_pydantic_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Make sure Pydantic error dicts are JSON-serializable."""
    normalized: list[dict[str, Any]] = []
    for error in errors:
        e = dict(error)
        ctx = e.get("ctx")
        if isinstance(ctx, dict):
            # Convert any non-serializable ctx values (e.g. exceptions) to strings.
            e["ctx"] = {k: str(v) for k, v in ctx.items()}
        normalized.append(e)
    return normalized


def _build_validation_error_payload(exc: ValidationError) -> dict[str, str]:
    """Reduce validation errors to a stable `code`/`message` pair."""
    code = "invalid_request"
    message = "Invalid request parameters"

    for error in _normalize_pydantic_errors(exc.errors()):
        loc = error.get("loc", ())
        if len(loc) >= 1 and loc[-1] == "addresses":
            code = "invalid_ip"
            message = "Every address must be a valid IPv4 or IPv6 address."
            break

    return {"code": code, "message": message}


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle Pydantic validation errors raised during dependency resolution."""
    logger.info(
        "Pydantic validation error during request handling "
        f"path={request.url.path} method={request.method} errors={_normalize_pydantic_errors(exc.errors())}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_build_validation_error_payload(exc))


async def server_error_handler(request: Request, exc: ServerError) -> JSONResponse:
    """Relay an error reported by the DB-IP API, keeping its error code."""
    status_code = SERVER_ERROR_STATUS.get(exc.known_code, status.HTTP_502_BAD_GATEWAY)
    logger.warning(
        "DB-IP API reported an error "
        f"path={request.url.path} method={request.method} code={exc.error_code} error={exc.error_message}"
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "code": "server_error" if exc.error_code is None else exc.error_code,
            "message": exc.error_message,
        },
    )


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    """Upstream unreachable or unreadable. The message embeds the API key and is never returned."""
    logger.error(
        f"DB-IP API request failed path={request.url.path} method={request.method} error={type(exc).__name__}"
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"code": "upstream_error", "message": "The geolocation provider could not be reached."},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        "Unhandled exception while processing request: "
        f"{repr(exc)} path={request.url.path} method={request.method}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "internal_error",
            "message": "An unexpected error occurred while processing the request.",
        },
    )
