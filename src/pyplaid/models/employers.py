"""Employer search schemas used by Deposit Switch."""

from pydantic import Field

from .common import PlaidModel, PlaidRequest


class Address(PlaidModel):
    city: str | None = None
    region: str | None = None
    street: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Employer(PlaidModel):
    employer_id: str
    name: str
    address: Address | None = None
    confidence_score: float


class SearchEmployerResponse(PlaidModel):
    employers: list[Employer]
    request_id: str


class SearchEmployerRequest(PlaidRequest):
    path = "/employers/search"
    response_model = SearchEmployerResponse

    query: str
    # Plaid only accepts deposit_switch here
    products: list[str] = Field(default_factory=lambda: ["deposit_switch"])
