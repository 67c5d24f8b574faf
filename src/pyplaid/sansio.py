"""Sans-IO request building and response parsing.

These functions turn request models into ``HttpRequest`` values and
``HttpResponse`` values back into response models without performing any
I/O, so callers can drive Plaid with whatever HTTP stack they already use.
``PlaidClient`` is built on top of them.

Example:
    conf = ClientConf(credentials=Credentials(client_id="...", secret="..."))
    http_request = create_link_token(conf, request)
    # send http_request with any HTTP library, wrap the result in HttpResponse
    link = create_link_token_response(http_response)
"""

import json
from dataclasses import dataclass, field
from typing import cast

from pydantic import ValidationError

from .credentials import Credentials
from .environment import DEFAULT_ENVIRONMENT, Environment
from .errors import ApiError, SerializationError
from .models.common import ErrorResponse, PlaidModel, PlaidRequest
from .models.token import CreateLinkTokenRequest, CreateLinkTokenResponse
from .transport import HttpRequest, HttpResponse

HEADER_CLIENT_ID = "PLAID-CLIENT-ID"
HEADER_CLIENT_SECRET = "PLAID-SECRET"
CONTENT_TYPE_JSON = "application/json"


@dataclass(frozen=True)
class ClientConf:
    """Where and as whom requests are sent.

    ``base_url`` overrides the environment's host, e.g. ``http://localhost:3000``.
    """

    credentials: Credentials = field(default_factory=Credentials)
    environment: Environment = DEFAULT_ENVIRONMENT
    base_url: str | None = None

    @property
    def url(self) -> str:
        return (self.base_url or self.environment.base_url).rstrip("/")


def build_request(conf: ClientConf, request: PlaidRequest) -> HttpRequest:
    """Serialize ``request`` into an authenticated POST to its endpoint.

    Raises:
        SerializationError: If the request model cannot be encoded as JSON
    """
    try:
        body = json.dumps(request.payload()).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"failed to encode {type(request).__name__}: {e}"
        ) from e

    return HttpRequest(
        method="POST",
        url=f"{conf.url}{request.path}",
        headers={
            "Content-Type": CONTENT_TYPE_JSON,
            HEADER_CLIENT_ID: conf.credentials.client_id,
            HEADER_CLIENT_SECRET: conf.credentials.secret,
        },
        body=body,
    )


def parse_response(
    request_type: type[PlaidRequest], response: HttpResponse
) -> PlaidModel:
    """Parse a raw response for an endpoint into its response model.

    Args:
        request_type: Request model class identifying the endpoint
        response: Raw response returned by the transport

    Returns:
        PlaidModel: Instance of ``request_type.response_model``

    Raises:
        ApiError: If Plaid answered with an error object
        SerializationError: If the body does not match the expected schema,
            including error bodies with neither error_code nor error_type
    """
    if response.is_success:
        try:
            return request_type.response_model.model_validate_json(response.body)
        except ValidationError as e:
            raise SerializationError(
                f"unexpected response from {request_type.path}: {e}",
                status=response.status,
            ) from e

    try:
        error = ErrorResponse.model_validate_json(response.body)
    except ValidationError as e:
        raise SerializationError(
            f"unreadable error response from {request_type.path} "
            f"(HTTP {response.status}): {e}",
            status=response.status,
        ) from e
    if error.error_code is None and error.error_type is None:
        raise SerializationError(
            f"error response from {request_type.path} (HTTP {response.status}) "
            "is not a Plaid error object",
            status=response.status,
        )
    if error.status is None:
        error = error.model_copy(update={"status": response.status})
    raise ApiError(error)


def create_link_token(conf: ClientConf, request: CreateLinkTokenRequest) -> HttpRequest:
    """Build the HTTP request for ``/link/token/create``."""
    return build_request(conf, request)


def create_link_token_response(response: HttpResponse) -> CreateLinkTokenResponse:
    """Parse the HTTP response of ``/link/token/create``."""
    return cast(
        CreateLinkTokenResponse, parse_response(CreateLinkTokenRequest, response)
    )
