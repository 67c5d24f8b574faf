"""Transaction and category schemas.

``/transactions/get`` is offset paginated: ``options.count`` and
``options.offset`` select a page and the response reports
``total_transactions`` for the whole date range.
"""

from datetime import date, datetime
from typing import Any

from pydantic import Field

from .account import Account
from .common import PlaidModel, PlaidRequest
from .item import Item


class TransactionLocation(PlaidModel):
    """Schema for transaction location data."""

    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    lat: float | None = None
    lon: float | None = None
    store_number: str | None = None


class PaymentMetadata(PlaidModel):
    reference_number: str | None = None
    ppd_id: str | None = None
    payee: str | None = None
    by_order_of: str | None = None
    payer: str | None = None
    payment_method: str | None = None
    payment_processor: str | None = None
    reason: str | None = None


class Transaction(PlaidModel):
    """Schema for Plaid transaction data."""

    transaction_id: str = Field(..., description="Plaid transaction ID")
    account_id: str = Field(..., description="Associated account ID")
    amount: float
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None

    # Dates
    transaction_date: date = Field(..., alias="date")
    authorized_date: date | None = None
    authorized_datetime: datetime | None = None
    transaction_datetime: datetime | None = Field(None, alias="datetime")

    # Description and classification
    name: str
    merchant_name: str | None = None
    original_description: str | None = None
    account_owner: str | None = None
    category: list[str] | None = None
    category_id: str | None = None
    personal_finance_category: dict[str, Any] | None = None

    # Details
    payment_channel: str
    # Deprecated by Plaid, still returned
    transaction_type: str | None = None
    transaction_code: str | None = None
    check_number: str | None = None
    location: TransactionLocation | None = None
    payment_meta: PaymentMetadata | None = None

    # Status
    pending: bool
    pending_transaction_id: str | None = None


class GetTransactionsOptions(PlaidModel):
    """Paging and filtering options for ``/transactions/get``."""

    account_ids: list[str] | None = None
    count: int | None = Field(None, description="Transactions per page")
    offset: int | None = Field(None, description="Transactions to skip")
    include_original_description: bool | None = None


class GetTransactionsResponse(PlaidModel):
    accounts: list[Account]
    transactions: list[Transaction]
    total_transactions: int
    item: Item
    request_id: str


class GetTransactionsRequest(PlaidRequest):
    path = "/transactions/get"
    response_model = GetTransactionsResponse

    access_token: str
    # Both dates are inclusive
    start_date: date
    end_date: date
    options: GetTransactionsOptions | None = None


class RefreshTransactionsResponse(PlaidModel):
    request_id: str


class RefreshTransactionsRequest(PlaidRequest):
    """Start an on-demand extraction of the newest transactions."""

    path = "/transactions/refresh"
    response_model = RefreshTransactionsResponse

    access_token: str


class Category(PlaidModel):
    category_id: str
    group: str
    hierarchy: list[str]


class GetCategoriesResponse(PlaidModel):
    categories: list[Category]
    request_id: str


class GetCategoriesRequest(PlaidRequest):
    path = "/categories/get"
    response_model = GetCategoriesResponse
