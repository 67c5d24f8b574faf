"""Credentials required to make authenticated calls to the Plaid API."""

import os

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Plaid client ID and the secret for the target environment.

    Credentials are opaque to the library and never validated locally: a
    missing or wrong pair surfaces as an ``ApiError`` from the first call.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(default="", description="Plaid client ID")
    secret: str = Field(default="", description="Plaid secret key", repr=False)

    @classmethod
    def from_environment(cls) -> "Credentials":
        """Read ``PLAID_CLIENT_ID`` and ``PLAID_SECRET`` from the environment.

        Unset variables become empty strings.
        """
        return cls(
            client_id=os.getenv("PLAID_CLIENT_ID", ""),
            secret=os.getenv("PLAID_SECRET", ""),
        )
