"""Request and response schemas for the Plaid API endpoints supported by pyplaid."""

from .account import (
    Account,
    AccountType,
    Balance,
    GetAccountsRequest,
    GetAccountsRequestFilter,
    GetAccountsResponse,
)
from .auth import (
    AccountNumbers,
    ACHAccountNumber,
    BACSAccountNumber,
    EFTAccountNumber,
    GetAuthRequest,
    GetAuthRequestOptions,
    GetAuthResponse,
    InternationalAccountNumber,
)
from .balance import (
    AccountBalanceFilter,
    AccountBalancesGetRequest,
    AccountBalancesGetResponse,
)
from .common import ErrorResponse, ErrorType, PlaidModel, PlaidRequest
from .employers import Address, Employer, SearchEmployerRequest, SearchEmployerResponse
from .identity import (
    GetIdentityRequest,
    GetIdentityResponse,
    IdentityAccount,
    IdentityFilter,
    Owner,
    OwnerAddress,
    OwnerAddressData,
    OwnerContact,
)
from .institutions import (
    GetInstitutionFilter,
    GetInstitutionsFilter,
    Institution,
    InstitutionGetRequest,
    InstitutionGetResponse,
    InstitutionSearchResponse,
    InstitutionsGetRequest,
    InstitutionsGetResponse,
    InstitutionsSearchRequest,
    PaymentInitiationFilter,
    SearchInstitutionFilter,
)
from .item import (
    GetItemRequest,
    GetItemResponse,
    Item,
    RemoveItemRequest,
    RemoveItemResponse,
    Status,
    StatusMessage,
    UpdateItemWebhookRequest,
    UpdateItemWebhookResponse,
    WebhookStatus,
)
from .sandbox import (
    CreatePublicTokenOptions,
    CreatePublicTokenOptionsTransactions,
    CreatePublicTokenRequest,
    CreatePublicTokenResponse,
    FireWebhookRequest,
    FireWebhookResponse,
    ResetLoginRequest,
    ResetLoginResponse,
    SetVerificationStatusRequest,
    SetVerificationStatusResponse,
    VerificationStatus,
    WebhookCode,
)
from .token import (
    AccountFilter,
    AccountFilters,
    CreateLinkTokenRequest,
    CreateLinkTokenResponse,
    DepositSwitchOptions,
    EUConfig,
    ExchangePublicTokenRequest,
    ExchangePublicTokenResponse,
    GetLinkTokenRequest,
    GetLinkTokenResponse,
    IncomeVerification,
    InvalidateAccessTokenRequest,
    InvalidateAccessTokenResponse,
    LinkAuth,
    LinkUser,
    PaymentInitiation,
)
from .transactions import (
    Category,
    GetCategoriesRequest,
    GetCategoriesResponse,
    GetTransactionsOptions,
    GetTransactionsRequest,
    GetTransactionsResponse,
    PaymentMetadata,
    RefreshTransactionsRequest,
    RefreshTransactionsResponse,
    Transaction,
    TransactionLocation,
)
from .webhooks import (
    GetWebhookVerificationKeyRequest,
    GetWebhookVerificationKeyResponse,
)

__all__ = [
    "ACHAccountNumber",
    "Account",
    "AccountBalanceFilter",
    "AccountBalancesGetRequest",
    "AccountBalancesGetResponse",
    "AccountFilter",
    "AccountFilters",
    "AccountNumbers",
    "AccountType",
    "Address",
    "BACSAccountNumber",
    "Balance",
    "Category",
    "CreateLinkTokenRequest",
    "CreateLinkTokenResponse",
    "CreatePublicTokenOptions",
    "CreatePublicTokenOptionsTransactions",
    "CreatePublicTokenRequest",
    "CreatePublicTokenResponse",
    "DepositSwitchOptions",
    "EFTAccountNumber",
    "EUConfig",
    "Employer",
    "ErrorResponse",
    "ErrorType",
    "ExchangePublicTokenRequest",
    "ExchangePublicTokenResponse",
    "FireWebhookRequest",
    "FireWebhookResponse",
    "GetAccountsRequest",
    "GetAccountsRequestFilter",
    "GetAccountsResponse",
    "GetAuthRequest",
    "GetAuthRequestOptions",
    "GetAuthResponse",
    "GetCategoriesRequest",
    "GetCategoriesResponse",
    "GetIdentityRequest",
    "GetIdentityResponse",
    "GetInstitutionFilter",
    "GetInstitutionsFilter",
    "GetItemRequest",
    "GetItemResponse",
    "GetLinkTokenRequest",
    "GetLinkTokenResponse",
    "GetTransactionsOptions",
    "GetTransactionsRequest",
    "GetTransactionsResponse",
    "GetWebhookVerificationKeyRequest",
    "GetWebhookVerificationKeyResponse",
    "IdentityAccount",
    "IdentityFilter",
    "IncomeVerification",
    "Institution",
    "InstitutionGetRequest",
    "InstitutionGetResponse",
    "InstitutionSearchResponse",
    "InstitutionsGetRequest",
    "InstitutionsGetResponse",
    "InstitutionsSearchRequest",
    "InternationalAccountNumber",
    "InvalidateAccessTokenRequest",
    "InvalidateAccessTokenResponse",
    "Item",
    "LinkAuth",
    "LinkUser",
    "Owner",
    "OwnerAddress",
    "OwnerAddressData",
    "OwnerContact",
    "PaymentInitiation",
    "PaymentInitiationFilter",
    "PaymentMetadata",
    "PlaidModel",
    "PlaidRequest",
    "RefreshTransactionsRequest",
    "RefreshTransactionsResponse",
    "RemoveItemRequest",
    "RemoveItemResponse",
    "ResetLoginRequest",
    "ResetLoginResponse",
    "SearchEmployerRequest",
    "SearchEmployerResponse",
    "SearchInstitutionFilter",
    "SetVerificationStatusRequest",
    "SetVerificationStatusResponse",
    "Status",
    "StatusMessage",
    "Transaction",
    "TransactionLocation",
    "UpdateItemWebhookRequest",
    "UpdateItemWebhookResponse",
    "VerificationStatus",
    "WebhookCode",
    "WebhookStatus",
]
