"""Plaid API environments and their base URLs."""

from enum import Enum


class Environment(str, Enum):
    """Plaid API environment options."""

    SANDBOX = "sandbox"
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        """Get the Plaid API base URL for this environment.

        Returns:
            str: Fully qualified URL with scheme, without a trailing slash
        """
        return f"https://{self.value}.plaid.com"


DEFAULT_ENVIRONMENT = Environment.SANDBOX
