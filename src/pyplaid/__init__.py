"""pyplaid: async client for the Plaid financial data API.

This package provides:
- Typed request and response models for the supported Plaid endpoints
- A pluggable HTTP transport with httpx and requests backends
- ``PlaidClient`` with one coroutine per endpoint and lazy page streams
- Sans-IO request building and response parsing
- A command line interface for exploring the API
"""

import logging

from .client import Builder, PlaidClient
from .credentials import Credentials
from .environment import Environment
from .errors import (
    ApiError,
    ConfigurationError,
    PlaidError,
    SerializationError,
    TransportError,
)
from .pagination import Page, paginate
from .transport import (
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    RequestsTransport,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "Builder",
    "ConfigurationError",
    "Credentials",
    "Environment",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Page",
    "PlaidClient",
    "PlaidError",
    "RequestsTransport",
    "SerializationError",
    "Transport",
    "TransportError",
    "paginate",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
