"""Shared Pydantic base classes and the Plaid error object.

Every request model declares the endpoint path it is sent to and the response
model it is parsed into, so the client and the sans-IO helpers can treat all
endpoints uniformly.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class PlaidModel(BaseModel):
    """Base schema for all wire models.

    Unknown fields returned by the server are ignored so new API fields never
    break parsing.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class PlaidRequest(PlaidModel):
    """Base schema for request bodies sent to a single Plaid endpoint."""

    path: ClassVar[str]
    response_model: ClassVar[type[PlaidModel]]

    def payload(self) -> dict[str, Any]:
        """Return the JSON-ready body, using wire aliases and omitting unset options."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorType(str, Enum):
    """Plaid error categories."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_RESULT = "INVALID_RESULT"
    INVALID_INPUT = "INVALID_INPUT"
    INSTITUTION_ERROR = "INSTITUTION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    API_ERROR = "API_ERROR"
    ITEM_ERROR = "ITEM_ERROR"
    ASSET_REPORT_ERROR = "ASSET_REPORT_ERROR"
    RECAPTCHA_ERROR = "RECAPTCHA_ERROR"
    OAUTH_ERROR = "OAUTH_ERROR"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    BANK_TRANSFER_ERROR = "BANK_TRANSFER_ERROR"


class ErrorResponse(PlaidModel):
    """Error object returned by Plaid for any failed request."""

    display_message: str | None = None
    documentation_url: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    # Types Plaid adds later are kept as plain strings
    error_type: ErrorType | str | None = Field(None, union_mode="left_to_right")
    request_id: str | None = None
    status: int | None = None
    suggested_action: str | None = None
