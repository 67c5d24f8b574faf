"""Auth product schemas: account and routing numbers."""

from pydantic import Field

from .account import Account
from .common import PlaidModel, PlaidRequest
from .item import Item


class ACHAccountNumber(PlaidModel):
    account_id: str
    account: str
    routing: str
    wire_routing: str | None = None


class EFTAccountNumber(PlaidModel):
    account_id: str
    account: str
    institution: str
    branch: str


class InternationalAccountNumber(PlaidModel):
    account_id: str
    iban: str = Field(..., description="International Bank Account Number")
    bic: str = Field(..., description="Bank Identifier Code")


class BACSAccountNumber(PlaidModel):
    account_id: str
    account: str
    sort_code: str


class AccountNumbers(PlaidModel):
    """Account numbers grouped by payment network."""

    ach: list[ACHAccountNumber] = Field(default_factory=list)
    eft: list[EFTAccountNumber] = Field(default_factory=list)
    international: list[InternationalAccountNumber] = Field(default_factory=list)
    bacs: list[BACSAccountNumber] = Field(default_factory=list)


class GetAuthRequestOptions(PlaidModel):
    account_ids: list[str]


class GetAuthResponse(PlaidModel):
    accounts: list[Account]
    numbers: AccountNumbers
    item: Item
    request_id: str


class GetAuthRequest(PlaidRequest):
    path = "/auth/get"
    response_model = GetAuthResponse

    access_token: str
    options: GetAuthRequestOptions | None = None
