from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class ErrorResponse(BaseModel):
    """Error body returned by the service for every handled failure."""

    code: str
    message: str
