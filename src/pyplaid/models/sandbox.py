"""Sandbox-only endpoints used to create and manipulate test Items."""

from datetime import date
from enum import Enum

from pydantic import Field

from .common import PlaidModel, PlaidRequest


class CreatePublicTokenOptionsTransactions(PlaidModel):
    start_date: date | None = None
    end_date: date | None = None


class CreatePublicTokenOptions(PlaidModel):
    webhook: str | None = None
    # Sandbox defaults are user_good / pass_good
    override_username: str | None = None
    override_password: str | None = None
    transactions: CreatePublicTokenOptionsTransactions | None = None


class CreatePublicTokenResponse(PlaidModel):
    public_token: str
    request_id: str | None = None


class CreatePublicTokenRequest(PlaidRequest):
    """Create a public token for a new Sandbox Item."""

    path = "/sandbox/public_token/create"
    response_model = CreatePublicTokenResponse

    institution_id: str
    initial_products: list[str] = Field(default_factory=lambda: ["transactions"])
    options: CreatePublicTokenOptions | None = None


class ResetLoginResponse(PlaidModel):
    reset_login: bool
    request_id: str | None = None


class ResetLoginRequest(PlaidRequest):
    """Force an Item into the ``ITEM_LOGIN_REQUIRED`` state."""

    path = "/sandbox/item/reset_login"
    response_model = ResetLoginResponse

    access_token: str


class VerificationStatus(str, Enum):
    AUTOMATICALLY_VERIFIED = "automatically_verified"
    VERIFICATION_EXPIRED = "verification_expired"


class SetVerificationStatusResponse(PlaidModel):
    request_id: str


class SetVerificationStatusRequest(PlaidRequest):
    path = "/sandbox/item/set_verification_status"
    response_model = SetVerificationStatusResponse

    access_token: str
    account_id: str
    verification_status: VerificationStatus | str = Field(
        ..., union_mode="left_to_right"
    )


class WebhookCode(str, Enum):
    DEFAULT_UPDATE = "DEFAULT_UPDATE"


class FireWebhookResponse(PlaidModel):
    webhook_fired: bool
    request_id: str


class FireWebhookRequest(PlaidRequest):
    """Trigger a Transactions webhook for a Sandbox Item."""

    path = "/sandbox/item/fire_webhook"
    response_model = FireWebhookResponse

    access_token: str
    webhook_code: WebhookCode = WebhookCode.DEFAULT_UPDATE
