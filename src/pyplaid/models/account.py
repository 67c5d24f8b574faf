"""Account and balance schemas plus the ``/accounts/get`` endpoint."""

from enum import Enum

from pydantic import Field

from .common import PlaidModel, PlaidRequest
from .item import Item


class AccountType(str, Enum):
    """Plaid account type enumeration."""

    INVESTMENT = "investment"
    CREDIT = "credit"
    DEPOSITORY = "depository"
    LOAN = "loan"
    BROKERAGE = "brokerage"
    OTHER = "other"


class Balance(PlaidModel):
    """Schema for account balance information."""

    available: float | None = Field(None, description="Available balance")
    current: float | None = Field(None, description="Current balance")
    limit: float | None = Field(None, description="Credit limit or overdraft limit")
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None
    last_updated_datetime: str | None = None


class Account(PlaidModel):
    """Schema for Plaid account data."""

    account_id: str = Field(..., description="Plaid account ID")
    balances: Balance
    mask: str | None = None
    name: str = Field(..., description="Account name")
    official_name: str | None = None
    type: AccountType | str = Field(..., union_mode="left_to_right")
    subtype: str | None = None
    # Documented as non-nullable but frequently missing from payloads
    verification_status: str | None = None
    persistent_account_id: str | None = None


class GetAccountsRequestFilter(PlaidModel):
    account_ids: list[str]


class GetAccountsResponse(PlaidModel):
    accounts: list[Account]
    item: Item
    request_id: str


class GetAccountsRequest(PlaidRequest):
    """Retrieve the active accounts of an Item."""

    path = "/accounts/get"
    response_model = GetAccountsResponse

    access_token: str
    options: GetAccountsRequestFilter | None = None
