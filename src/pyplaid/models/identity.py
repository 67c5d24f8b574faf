"""Identity product schemas: account owner details."""

from pydantic import Field

from .account import Account
from .common import PlaidModel, PlaidRequest
from .item import Item


class OwnerContact(PlaidModel):
    """A phone number or email address on file for an account owner."""

    data: str
    primary: bool = False
    type: str | None = None


class OwnerAddressData(PlaidModel):
    city: str | None = None
    region: str | None = None
    street: str | None = None
    postal_code: str | None = None
    country: str | None = None


class OwnerAddress(PlaidModel):
    data: OwnerAddressData
    primary: bool = False


class Owner(PlaidModel):
    names: list[str] = Field(default_factory=list)
    phone_numbers: list[OwnerContact] = Field(default_factory=list)
    emails: list[OwnerContact] = Field(default_factory=list)
    addresses: list[OwnerAddress] = Field(default_factory=list)


class IdentityAccount(Account):
    """Account with the owner information held by the institution."""

    owners: list[Owner] = Field(default_factory=list)


class IdentityFilter(PlaidModel):
    account_ids: list[str]


class GetIdentityResponse(PlaidModel):
    accounts: list[IdentityAccount]
    item: Item
    request_id: str


class GetIdentityRequest(PlaidRequest):
    path = "/identity/get"
    response_model = GetIdentityResponse

    access_token: str
    options: IdentityFilter | None = None
