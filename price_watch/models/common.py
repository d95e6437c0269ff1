"""Common Pydantic models for API requests and responses.

This module contains shared response models used across the API.
"""

from datetime import datetime
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

# A JSON number that must be finite; strings and booleans are rejected
Amount = Annotated[float, Strict(), AllowInfNan(False)]


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names.

    Accepts both camelCase and snake_case names on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ActionResponse(BaseModel, Generic[DataT]):
    """Envelope returned by every successful action.

    Attributes:
        success: Always True for a completed action
        data: Action-specific payload
    """

    success: bool = Field(default=True, description="Action completed")
    data: DataT


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Service health status
        timestamp: Current server timestamp
    """

    status: str = Field(default="healthy", description="Service health status")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Current server timestamp"
    )


class InfoResponse(BaseModel):
    """System information response model.

    Attributes:
        app_name: Application name
        version: Application version
        status: Service status
        database_connected: Whether database connection is working
        timestamp: Current server timestamp
    """

    app_name: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    status: str = Field(default="running", description="Service status")
    database_connected: bool = Field(
        ..., description="Database connection status"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Current server timestamp"
    )


class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error code (UNAUTHORIZED, NOT_FOUND, BAD_REQUEST, ...)
        message: Human-readable error message
        detail: Additional error details
        timestamp: When the error occurred
    """

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[Any] = Field(
        default=None, description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )
