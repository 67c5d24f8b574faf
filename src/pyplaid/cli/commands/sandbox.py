"""Sandbox commands for the pyplaid CLI.

These only work against the sandbox environment.
"""

import logging

import typer

from ...models import CreatePublicTokenRequest, ExchangePublicTokenResponse
from ..utils import build_client, echo_model, run

app = typer.Typer(help="Create and manipulate sandbox Items")
logger = logging.getLogger(__name__)

DEFAULT_INSTITUTION = "ins_109508"


@app.command("token")
def create_token(
    institution: str = typer.Option(
        DEFAULT_INSTITUTION, "--institution", "-i", help="Sandbox institution ID"
    ),
    product: list[str] = typer.Option(
        ["transactions"], "--product", "-p", help="Initial product, can be repeated"
    ),
) -> None:
    """Create a sandbox Item and print its access token.

    Creates a public token for the institution and exchanges it right away.
    """

    async def _create() -> ExchangePublicTokenResponse:
        async with build_client() as client:
            public_token = await client.create_public_token(
                CreatePublicTokenRequest(
                    institution_id=institution, initial_products=product
                )
            )
            logger.info(f"Created public token for {institution}")
            return await client.exchange_public_token(public_token)

    echo_model(run(_create()))


@app.command("reset-login")
def reset_login(
    access_token: str = typer.Argument(..., help="Item access token"),
) -> None:
    """Force an Item into the ITEM_LOGIN_REQUIRED state."""

    async def _reset() -> None:
        async with build_client() as client:
            await client.reset_login(access_token)

    run(_reset())
    logger.info("✅ Login reset")
