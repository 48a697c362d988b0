from typing import Annotated, Any

from fastapi import Depends, FastAPI, Request, status
from pydantic import ValidationError

from dbip_client.api import get_default_client
from dbip_client.client import Client
from dbip_client.errors import ClientError, ServerError
from dbip_client.exception_handlers import (
    client_error_handler,
    pydantic_validation_exception_handler,
    server_error_handler,
    unhandled_exception_handler,
)
from dbip_client.logger import configure_logging, logger
from dbip_client.models.request_models import AddressLookupRequest
from dbip_client.models.response_models import ErrorResponse, HealthResponse

app = FastAPI(
    title="DB-IP Lookup Service",
    version="0.1.0",
    description="Thin HTTP front for the DB-IP geolocation API.",
)
configure_logging()
logger.info("Started DB-IP Lookup Service")

app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(ServerError, server_error_handler)
app.add_exception_handler(ClientError, client_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def get_dbip_client(request: Request) -> Client:
    """Per-request client sharing the default settings.

    The caller's Accept-Language header, when present, becomes the preferred
    language of the upstream query so place names come back localized.
    """
    client = Client.from_settings(get_default_client().settings)
    client.set_preferred_language(request.headers.get("accept-language"))
    return client


def get_lookup_request(addresses: str) -> AddressLookupRequest:
    return AddressLookupRequest(addresses=addresses)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.get(
    "/v1/ip/{addresses}",
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up geolocation information for one or more IP addresses.",
    responses=ERROR_RESPONSES,
)
def ip_lookup(
    request: Request,
    query: Annotated[AddressLookupRequest, Depends(get_lookup_request)],
    client: Annotated[Client, Depends(get_dbip_client)],
) -> dict[str, Any]:
    """Look up a single address or a comma-separated list of addresses.

    The DB-IP payload is returned as-is; its fields depend on the API plan.
    """
    logger.info(
        "Performing address lookup "
        f"path={request.url.path} method={request.method} addresses={query.addresses} "
        f"accept_language={request.headers.get('accept-language')}"
    )
    return client.lookup_address(query.lookup_target)


@app.get(
    "/v1/key",
    status_code=status.HTTP_200_OK,
    tags=["key"],
    summary="Show account and quota information for the configured API key.",
    responses=ERROR_RESPONSES,
)
def key_info(request: Request, client: Annotated[Client, Depends(get_dbip_client)]) -> dict[str, Any]:
    logger.info(f"Fetching key info path={request.url.path} method={request.method}")
    return client.get_key_info()
