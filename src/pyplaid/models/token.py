"""Link token and access token schemas."""

from pydantic import Field

from .common import PlaidModel, PlaidRequest


class ExchangePublicTokenResponse(PlaidModel):
    access_token: str
    item_id: str
    request_id: str


class ExchangePublicTokenRequest(PlaidRequest):
    """Exchange an ephemeral Link ``public_token`` for an ``access_token``."""

    path = "/item/public_token/exchange"
    response_model = ExchangePublicTokenResponse

    public_token: str


class LinkUser(PlaidModel):
    """End user the link token is created for."""

    client_user_id: str
    legal_name: str | None = None
    phone_number: str | None = None
    phone_number_verified_time: str | None = None
    email_address: str | None = None
    email_address_verified_time: str | None = None
    ssn: str | None = None
    date_of_birth: str | None = None


class AccountFilter(PlaidModel):
    account_subtypes: list[str]


class AccountFilters(PlaidModel):
    depository: AccountFilter | None = None
    credit: AccountFilter | None = None
    loan: AccountFilter | None = None
    investment: AccountFilter | None = None


class EUConfig(PlaidModel):
    headless: bool | None = None


class PaymentInitiation(PlaidModel):
    payment_id: str


class DepositSwitchOptions(PlaidModel):
    deposit_switch_id: str


class IncomeVerification(PlaidModel):
    income_verification_id: str
    asset_report_id: str | None = None


class LinkAuth(PlaidModel):
    flow_type: str


class CreateLinkTokenResponse(PlaidModel):
    link_token: str
    expiration: str
    request_id: str


class CreateLinkTokenRequest(PlaidRequest):
    """Create a ``link_token`` used to initialize Link."""

    path = "/link/token/create"
    response_model = CreateLinkTokenResponse

    client_name: str
    language: str = "en"
    country_codes: list[str] = Field(default_factory=list)
    user: LinkUser
    products: list[str] = Field(default_factory=list)
    webhook: str | None = None
    access_token: str | None = None
    link_customization_name: str | None = None
    redirect_uri: str | None = None
    android_package_name: str | None = None
    account_filters: AccountFilters | None = None
    eu_config: EUConfig | None = None
    payment_initiation: PaymentInitiation | None = None
    deposit_switch: DepositSwitchOptions | None = None
    income_verification: IncomeVerification | None = None
    auth: LinkAuth | None = None
    institution_id: str | None = None


class GetLinkTokenResponse(PlaidModel):
    link_token: str
    expiration: str | None = None
    created_at: str | None = None
    request_id: str


class GetLinkTokenRequest(PlaidRequest):
    path = "/link/token/get"
    response_model = GetLinkTokenResponse

    link_token: str


class InvalidateAccessTokenResponse(PlaidModel):
    new_access_token: str
    request_id: str


class InvalidateAccessTokenRequest(PlaidRequest):
    """Rotate an Item's ``access_token``; the previous token stops working."""

    path = "/item/access_token/invalidate"
    response_model = InvalidateAccessTokenResponse

    access_token: str
