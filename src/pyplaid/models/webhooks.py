"""Webhook verification key schemas."""

from typing import Any

from .common import PlaidModel, PlaidRequest


class GetWebhookVerificationKeyResponse(PlaidModel):
    # JSON Web Key used to verify the webhook JWT, kept as received
    key: dict[str, Any]
    request_id: str


class GetWebhookVerificationKeyRequest(PlaidRequest):
    path = "/webhook_verification_key/get"
    response_model = GetWebhookVerificationKeyResponse

    key_id: str
