"""Item schemas: the connection between a user and a financial institution."""

from pydantic import Field

from .common import ErrorResponse, PlaidModel, PlaidRequest


class StatusMessage(PlaidModel):
    """Last update attempts for a single product."""

    last_successful_update: str | None = None
    last_failed_update: str | None = None


class WebhookStatus(PlaidModel):
    """Information about the last webhook fired for an Item."""

    sent_at: str | None = None
    code_sent: str | None = None


class Status(PlaidModel):
    """Per-product update status of an Item."""

    investments: StatusMessage | None = None
    transactions: StatusMessage | None = None
    last_webhook: WebhookStatus | None = None


class Item(PlaidModel):
    """Schema for a Plaid Item."""

    item_id: str = Field(..., description="Plaid item ID")
    institution_id: str | None = None
    webhook: str | None = None
    error: ErrorResponse | None = None
    available_products: list[str] = Field(default_factory=list)
    billed_products: list[str] = Field(default_factory=list)
    # RFC 3339 timestamp after which the user's consent expires
    consent_expiration_time: str | None = None
    update_type: str | None = None
    status: Status | None = None


class GetItemResponse(PlaidModel):
    item: Item
    status: Status | None = None
    request_id: str


class GetItemRequest(PlaidRequest):
    path = "/item/get"
    response_model = GetItemResponse

    access_token: str


class RemoveItemResponse(PlaidModel):
    request_id: str


class RemoveItemRequest(PlaidRequest):
    path = "/item/remove"
    response_model = RemoveItemResponse

    access_token: str


class UpdateItemWebhookResponse(PlaidModel):
    item: Item
    request_id: str


class UpdateItemWebhookRequest(PlaidRequest):
    """Associate a new webhook URL with an Item."""

    path = "/item/webhook/update"
    response_model = UpdateItemWebhookResponse

    access_token: str
    webhook: str
