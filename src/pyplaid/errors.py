"""Error taxonomy for pyplaid.

Every failure is raised to the immediate caller. Nothing is retried or
swallowed inside the library.
"""

from .models.common import ErrorResponse, ErrorType


class PlaidError(Exception):
    """Base class for all errors raised by pyplaid."""


class TransportError(PlaidError):
    """The HTTP transport failed to complete a request.

    Covers connection failures and timeouts as classified by the underlying
    HTTP backend. The backend exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, timeout: bool = False):
        super().__init__(message)
        self.timeout = timeout


class SerializationError(PlaidError):
    """A request could not be encoded or a response did not match the schema."""

    def __init__(self, message: str, *, status: int | None = None):
        super().__init__(message)
        self.status = status


class ApiError(PlaidError):
    """Plaid returned a well-formed error object."""

    def __init__(self, response: ErrorResponse):
        self.response = response
        super().__init__(
            f"request failed with code {response.error_code!r}: "
            f"{response.display_message!r}"
        )

    @property
    def error_type(self) -> ErrorType | str | None:
        return self.response.error_type

    @property
    def error_code(self) -> str | None:
        return self.response.error_code

    @property
    def error_message(self) -> str | None:
        return self.response.error_message

    @property
    def display_message(self) -> str | None:
        return self.response.display_message

    @property
    def request_id(self) -> str | None:
        return self.response.request_id

    @property
    def status(self) -> int | None:
        return self.response.status


class ConfigurationError(PlaidError, ValueError):
    """Invalid local configuration, detected before any network call."""
