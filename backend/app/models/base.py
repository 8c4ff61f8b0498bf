"""
Strict Base Models for API Request/Response Validation

Request bodies reject unknown fields so that client/server drift surfaces as
a 422 instead of silently dropped parameters. Response models are lenient
so ORM rows with extra columns can be converted directly.

Architecture:
    API Request → StrictRequest (extra="forbid") → Route Handler
    DB Row (ContentHistory) → StrictResponse (extra="ignore") → API Response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class StrictRequest(BaseModel):
    """
    Base model for API request bodies.

    Features:
        - extra="forbid": Unknown fields raise 422 Unprocessable Entity
        - validate_default=True: Validates default values
        - str_strip_whitespace=True: Trims whitespace from strings

    Example:
        >>> GenerateContentRequest(topic="Photosynthesis", outputType="quiz")
        Traceback (most recent call last):
        ...
        ValidationError: ... Extra inputs are not permitted
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )


class StrictResponse(BaseModel):
    """
    Base model for API response bodies and records read from storage.

    Extra attributes are ignored so SQLAlchemy rows convert via
    ``model_validate(row)``.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_default=True,
        from_attributes=True,
    )


class ErrorDetail(StrictResponse):
    """
    Error body returned by the error handling middleware.

    Clients can switch on ``error`` to tell a rate limit apart from an
    exhausted quota.
    """

    error: str  # Error code (e.g., "rate_limit_exceeded")
    message: str  # Human-readable message
    error_id: str  # Correlation ID for log lookup
    details: Optional[dict] = None
    timestamp: datetime


class SuccessResponse(StrictResponse):
    """Acknowledgement for operations without a richer result (e.g. delete)."""

    success: bool = True
    message: str
