"""Async Plaid API client.

``PlaidClient`` exposes one coroutine per supported Plaid endpoint plus lazy
streams over the offset paginated endpoints. Each endpoint call performs
exactly one HTTP round trip through the configured ``Transport`` and either
returns a typed response or raises a ``PlaidError``. Nothing is retried.

Example:
    client = (
        Builder()
        .with_credentials(Credentials(client_id="...", secret="..."))
        .with_environment(Environment.SANDBOX)
        .build()
    )
    async with client:
        async for txn in client.transactions_iter(request, page_size=100):
            ...
"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, TypeVar, cast

from .credentials import Credentials
from .environment import DEFAULT_ENVIRONMENT, Environment
from .errors import ApiError
from .models import (
    Account,
    AccountBalanceFilter,
    AccountBalancesGetRequest,
    AccountBalancesGetResponse,
    CreateLinkTokenRequest,
    CreateLinkTokenResponse,
    CreatePublicTokenRequest,
    CreatePublicTokenResponse,
    ErrorResponse,
    ExchangePublicTokenRequest,
    ExchangePublicTokenResponse,
    FireWebhookRequest,
    FireWebhookResponse,
    GetAccountsRequest,
    GetAccountsRequestFilter,
    GetAccountsResponse,
    GetAuthRequest,
    GetAuthResponse,
    GetCategoriesRequest,
    GetCategoriesResponse,
    GetIdentityRequest,
    GetIdentityResponse,
    GetItemRequest,
    GetItemResponse,
    GetLinkTokenRequest,
    GetLinkTokenResponse,
    GetTransactionsOptions,
    GetTransactionsRequest,
    GetTransactionsResponse,
    GetWebhookVerificationKeyRequest,
    GetWebhookVerificationKeyResponse,
    Institution,
    InstitutionGetRequest,
    InstitutionGetResponse,
    InstitutionSearchResponse,
    InstitutionsGetRequest,
    InstitutionsGetResponse,
    InstitutionsSearchRequest,
    InvalidateAccessTokenRequest,
    InvalidateAccessTokenResponse,
    Item,
    PlaidModel,
    PlaidRequest,
    RefreshTransactionsRequest,
    RemoveItemRequest,
    ResetLoginRequest,
    ResetLoginResponse,
    SearchEmployerRequest,
    SearchEmployerResponse,
    SetVerificationStatusRequest,
    SetVerificationStatusResponse,
    Transaction,
    UpdateItemWebhookRequest,
    UpdateItemWebhookResponse,
)
from .pagination import Page, paginate
from .sansio import ClientConf, build_request, parse_response
from .transport import DEFAULT_TIMEOUT_SECONDS, HttpxTransport, Transport

if TYPE_CHECKING:
    from .config import PlaidSettings

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTIONS_PAGE_SIZE = 100

ResponseT = TypeVar("ResponseT", bound=PlaidModel)


class PlaidClient:
    """Plaid API client.

    The client holds no mutable state beyond its transport, so a single
    instance can be shared by concurrently running tasks.
    """

    def __init__(
        self,
        transport: Transport,
        credentials: Credentials,
        environment: Environment = DEFAULT_ENVIRONMENT,
        base_url: str | None = None,
    ):
        self._transport = transport
        self._conf = ClientConf(
            credentials=credentials, environment=environment, base_url=base_url
        )

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def credentials(self) -> Credentials:
        return self._conf.credentials

    @property
    def base_url(self) -> str:
        return self._conf.url

    async def __aenter__(self) -> "PlaidClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport's connections if it supports closing."""
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def request(self, request: PlaidRequest) -> PlaidModel:
        """Send any request model to its endpoint and parse the response.

        Raises:
            TransportError: If the transport could not complete the call
            ApiError: If Plaid returned an error object
            SerializationError: If the request or response could not be mapped
        """
        http_request = build_request(self._conf, request)
        logger.debug(f"POST {request.path}")
        response = await self._transport.send(http_request)
        return parse_response(type(request), response)

    async def _call(
        self, request: PlaidRequest, response_type: type[ResponseT]
    ) -> ResponseT:
        return cast(ResponseT, await self.request(request))

    async def search_institutions(
        self, req: InstitutionsSearchRequest
    ) -> list[Institution]:
        """Return up to ten institutions matching the query.

        https://plaid.com/docs/api/institutions/#institutionssearch
        """
        res = await self._call(req, InstitutionSearchResponse)
        return res.institutions

    async def get_institution_by_id(self, req: InstitutionGetRequest) -> Institution:
        """https://plaid.com/docs/api/institutions/#institutionsget_by_id"""
        res = await self._call(req, InstitutionGetResponse)
        return res.institution

    async def get_institutions_page(
        self, req: InstitutionsGetRequest
    ) -> InstitutionsGetResponse:
        """Return one page of institutions along with the total count."""
        return await self._call(req, InstitutionsGetResponse)

    async def get_institutions(self, req: InstitutionsGetRequest) -> list[Institution]:
        """Return one page of the institutions supported by Plaid.

        Institutions with no overlap with the client's enabled products are
        filtered out. Use ``institutions_iter`` to read every page.

        https://plaid.com/docs/api/institutions/#institutionsget
        """
        res = await self.get_institutions_page(req)
        return res.institutions

    def institutions_iter(
        self, req: InstitutionsGetRequest, page_size: int | None = None
    ) -> AsyncIterator[Institution]:
        """Stream every institution matching ``req``, one page at a time.

        Args:
            req: Filters and starting offset; ``req.count`` is the page size
                unless ``page_size`` overrides it
            page_size: Optional page size override

        Raises:
            ConfigurationError: Immediately, if the page size is not positive
        """
        size = page_size if page_size is not None else req.count

        async def fetch_page(offset: int, count: int) -> Page[Institution]:
            res = await self.get_institutions_page(
                req.model_copy(update={"offset": offset, "count": count})
            )
            return Page(items=res.institutions, total=res.total)

        return paginate(fetch_page, page_size=size, start_offset=req.offset)

    async def create_public_token(self, req: CreatePublicTokenRequest) -> str:
        """Create a ``public_token`` for a new Sandbox Item.

        https://plaid.com/docs/api/sandbox/#sandboxpublic_tokencreate
        """
        res = await self._call(req, CreatePublicTokenResponse)
        return res.public_token

    async def reset_login(self, access_token: str) -> None:
        """Force a Sandbox Item into an ``ITEM_LOGIN_REQUIRED`` state.

        https://plaid.com/docs/api/sandbox/#sandboxitemreset_login
        """
        res = await self._call(
            ResetLoginRequest(access_token=access_token), ResetLoginResponse
        )
        if not res.reset_login:
            raise ApiError(
                ErrorResponse(
                    error_message="failed to reset login", request_id=res.request_id
                )
            )

    async def exchange_public_token(
        self, public_token: str
    ) -> ExchangePublicTokenResponse:
        """Exchange a Link ``public_token`` for an API ``access_token``.

        Public tokens are ephemeral and expire after 30 minutes.

        https://plaid.com/docs/api/tokens/#itempublic_tokenexchange
        """
        return await self._call(
            ExchangePublicTokenRequest(public_token=public_token),
            ExchangePublicTokenResponse,
        )

    async def create_link_token(
        self, req: CreateLinkTokenRequest
    ) -> CreateLinkTokenResponse:
        """https://plaid.com/docs/api/tokens/#linktokencreate"""
        return await self._call(req, CreateLinkTokenResponse)

    async def link_token(self, req: GetLinkTokenRequest) -> GetLinkTokenResponse:
        """Get information about a ``link_token``, mostly useful for debugging."""
        return await self._call(req, GetLinkTokenResponse)

    async def accounts(
        self, access_token: str, account_ids: list[str] | None = None
    ) -> list[Account]:
        """Return the active accounts of an Item.

        Responses may be cached by Plaid; use ``balances`` for up-to-date data.

        https://plaid.com/docs/api/accounts/#accountsget
        """
        options = (
            GetAccountsRequestFilter(account_ids=account_ids) if account_ids else None
        )
        res = await self._call(
            GetAccountsRequest(access_token=access_token, options=options),
            GetAccountsResponse,
        )
        return res.accounts

    async def item(self, access_token: str) -> Item:
        """https://plaid.com/docs/api/items/#itemget"""
        res = await self._call(
            GetItemRequest(access_token=access_token), GetItemResponse
        )
        return res.item

    async def item_del(self, access_token: str) -> None:
        """Remove an Item; its ``access_token`` stops working.

        https://plaid.com/docs/api/items/#itemremove
        """
        await self.request(RemoveItemRequest(access_token=access_token))

    async def item_webhook_update(self, access_token: str, webhook: str) -> Item:
        """https://plaid.com/docs/api/items/#itemwebhookupdate"""
        res = await self._call(
            UpdateItemWebhookRequest(access_token=access_token, webhook=webhook),
            UpdateItemWebhookResponse,
        )
        return res.item

    async def balances(
        self, access_token: str, account_ids: list[str] | None = None
    ) -> list[Account]:
        """Return real-time balances for an Item's accounts.

        https://plaid.com/docs/api/products/#balance
        """
        options = AccountBalanceFilter(account_ids=account_ids) if account_ids else None
        res = await self._call(
            AccountBalancesGetRequest(access_token=access_token, options=options),
            AccountBalancesGetResponse,
        )
        return res.accounts

    async def auth(self, req: GetAuthRequest) -> GetAuthResponse:
        """https://plaid.com/docs/api/products/#auth"""
        return await self._call(req, GetAuthResponse)

    async def identity(self, req: GetIdentityRequest) -> GetIdentityResponse:
        """https://plaid.com/docs/api/products/#identity"""
        return await self._call(req, GetIdentityResponse)

    async def fire_webhook(self, req: FireWebhookRequest) -> FireWebhookResponse:
        """Trigger a Transactions ``DEFAULT_UPDATE`` webhook for a Sandbox Item.

        https://plaid.com/docs/api/sandbox/#sandboxitemfire_webhook
        """
        return await self._call(req, FireWebhookResponse)

    async def set_verification_status(
        self, req: SetVerificationStatusRequest
    ) -> SetVerificationStatusResponse:
        """https://plaid.com/docs/api/sandbox/#sandboxitemset_verification_status"""
        return await self._call(req, SetVerificationStatusResponse)

    async def search_employers(
        self, req: SearchEmployerRequest
    ) -> SearchEmployerResponse:
        """https://plaid.com/docs/api/employers/"""
        return await self._call(req, SearchEmployerResponse)

    async def create_webhook_verification_key(
        self, req: GetWebhookVerificationKeyRequest
    ) -> GetWebhookVerificationKeyResponse:
        """Fetch the JSON Web Key used to verify webhook JWTs."""
        return await self._call(req, GetWebhookVerificationKeyResponse)

    async def invalidate_access_token(
        self, req: InvalidateAccessTokenRequest
    ) -> InvalidateAccessTokenResponse:
        """Rotate an Item's ``access_token``.

        https://plaid.com/docs/api/tokens/#itemaccess_tokeninvalidate
        """
        return await self._call(req, InvalidateAccessTokenResponse)

    async def categories(self) -> GetCategoriesResponse:
        """https://plaid.com/docs/api/products/#categoriesget"""
        return await self._call(GetCategoriesRequest(), GetCategoriesResponse)

    async def refresh_transactions(self, req: RefreshTransactionsRequest) -> None:
        """Start an on-demand extraction of an Item's newest transactions."""
        await self.request(req)

    async def transactions(
        self, req: GetTransactionsRequest
    ) -> GetTransactionsResponse:
        """Return one page of transactions for an Item.

        https://plaid.com/docs/api/products/#transactionsget
        """
        return await self._call(req, GetTransactionsResponse)

    def transactions_iter(
        self, req: GetTransactionsRequest, page_size: int | None = None
    ) -> AsyncIterator[Transaction]:
        """Stream every transaction matching ``req``, one page at a time.

        The page size is ``page_size`` if given, else ``req.options.count``,
        else 100. Reading starts at ``req.options.offset``. All other request
        fields are sent unchanged with every page.

        Raises:
            ConfigurationError: Immediately, if the page size is not positive
        """
        options = req.options or GetTransactionsOptions()
        if page_size is not None:
            size = page_size
        elif options.count is not None:
            size = options.count
        else:
            size = DEFAULT_TRANSACTIONS_PAGE_SIZE

        async def fetch_page(offset: int, count: int) -> Page[Transaction]:
            page_options = options.model_copy(update={"offset": offset, "count": count})
            res = await self.transactions(
                req.model_copy(update={"options": page_options})
            )
            return Page(items=res.transactions, total=res.total_transactions)

        return paginate(fetch_page, page_size=size, start_offset=options.offset or 0)


@dataclass(frozen=True)
class Builder:
    """Assembles a ``PlaidClient`` from optional settings.

    Every ``with_*`` method returns a new builder. Unset values default to
    empty credentials, the sandbox environment and an ``HttpxTransport``.
    Without an explicit transport each ``build()`` creates its own
    ``HttpxTransport`` using ``timeout``, so closing one client never closes
    another built from the same builder.
    """

    credentials: Credentials | None = None
    transport: Transport | None = None
    environment: Environment | None = None
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls, settings: "PlaidSettings") -> "Builder":
        """Create a builder from application settings."""
        return cls(
            credentials=Credentials(
                client_id=settings.client_id, secret=settings.secret
            ),
            timeout=settings.timeout,
            environment=Environment(settings.environment),
            base_url=settings.base_url,
        )

    def with_credentials(self, credentials: Credentials) -> "Builder":
        return replace(self, credentials=credentials)

    def with_transport(self, transport: Transport) -> "Builder":
        """Override the default HTTP transport."""
        return replace(self, transport=transport)

    def with_environment(self, environment: Environment) -> "Builder":
        return replace(self, environment=environment)

    def with_base_url(self, base_url: str) -> "Builder":
        """Send requests to ``base_url`` instead of the environment's host."""
        return replace(self, base_url=base_url)

    def with_timeout(self, timeout: float) -> "Builder":
        """Timeout in seconds for the default ``HttpxTransport``."""
        return replace(self, timeout=timeout)

    def build(self) -> PlaidClient:
        return PlaidClient(
            transport=self.transport or HttpxTransport(timeout=self.timeout),
            credentials=self.credentials or Credentials(),
            environment=self.environment or DEFAULT_ENVIRONMENT,
            base_url=self.base_url,
        )
