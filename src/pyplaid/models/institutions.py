"""Institution schemas for the ``/institutions/*`` endpoints.

``/institutions/get`` is offset paginated: it takes ``count``/``offset`` and
reports the ``total`` number of institutions matching the filters.
"""

from pydantic import Field

from .common import PlaidModel, PlaidRequest


class Institution(PlaidModel):
    """Schema for a financial institution supported by Plaid."""

    institution_id: str = Field(..., description="Plaid institution ID")
    name: str
    products: list[str] = Field(default_factory=list)
    country_codes: list[str] = Field(default_factory=list)
    url: str | None = None
    primary_color: str | None = None
    logo: str | None = None
    routing_numbers: list[str] | None = None
    oauth: bool = False


class PaymentInitiationFilter(PlaidModel):
    payment_id: str | None = None


class SearchInstitutionFilter(PlaidModel):
    oauth: bool | None = None
    include_optional_metadata: bool | None = None
    include_auth_metadata: bool | None = None
    include_payment_initiation_metadata: bool | None = None
    payment_initiation: PaymentInitiationFilter | None = None


class InstitutionSearchResponse(PlaidModel):
    institutions: list[Institution]
    request_id: str | None = None


class InstitutionsSearchRequest(PlaidRequest):
    """Search institutions by name, returning up to ten matches."""

    path = "/institutions/search"
    response_model = InstitutionSearchResponse

    query: str
    products: list[str] | None = None
    country_codes: list[str]
    options: SearchInstitutionFilter | None = None


class GetInstitutionFilter(PlaidModel):
    include_optional_metadata: bool | None = None
    include_status: bool | None = None
    include_auth_metadata: bool | None = None
    include_payment_initiation_metadata: bool | None = None


class InstitutionGetResponse(PlaidModel):
    institution: Institution
    request_id: str | None = None


class InstitutionGetRequest(PlaidRequest):
    path = "/institutions/get_by_id"
    response_model = InstitutionGetResponse

    institution_id: str
    country_codes: list[str]
    options: GetInstitutionFilter | None = None


class GetInstitutionsFilter(PlaidModel):
    """Filters for ``/institutions/get``."""

    # Only institutions supporting all of these products
    products: list[str] | None = None
    # Only institutions matching all of these routing numbers
    routing_numbers: list[str] | None = None
    oauth: bool | None = None
    include_optional_metadata: bool | None = None
    include_auth_metadata: bool | None = None
    include_payment_initiation_metadata: bool | None = None


class InstitutionsGetResponse(PlaidModel):
    institutions: list[Institution]
    total: int = Field(..., description="Total institutions matching the request")
    request_id: str | None = None


class InstitutionsGetRequest(PlaidRequest):
    path = "/institutions/get"
    response_model = InstitutionsGetResponse

    count: int
    offset: int = 0
    country_codes: list[str]
    options: GetInstitutionsFilter | None = None
