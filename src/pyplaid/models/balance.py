"""Real-time balance schemas (``/accounts/balance/get``)."""

from .account import Account
from .common import PlaidModel, PlaidRequest
from .item import Item


class AccountBalanceFilter(PlaidModel):
    account_ids: list[str]
    min_last_updated_datetime: str | None = None


class AccountBalancesGetResponse(PlaidModel):
    accounts: list[Account]
    item: Item
    request_id: str


class AccountBalancesGetRequest(PlaidRequest):
    path = "/accounts/balance/get"
    response_model = AccountBalancesGetResponse

    access_token: str
    options: AccountBalanceFilter | None = None
