"""Transaction streaming command for the pyplaid CLI."""

import logging
from datetime import datetime

import typer

from ...config import get_settings
from ...models import GetTransactionsRequest
from ..utils import build_client, echo_model, run

logger = logging.getLogger(__name__)


def list_transactions(
    access_token: str = typer.Argument(..., help="Item access token"),
    start: datetime = typer.Option(
        ..., "--start", formats=["%Y-%m-%d"], help="First day, inclusive"
    ),
    end: datetime = typer.Option(
        ..., "--end", formats=["%Y-%m-%d"], help="Last day, inclusive"
    ),
    page_size: int | None = typer.Option(
        None,
        "--page-size",
        help="Transactions requested per call (default: PLAID_PAGE_SIZE)",
    ),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Stop after this many transactions"
    ),
) -> None:
    """Stream an Item's transactions as JSON lines.

    Each transaction is printed as soon as its page arrives, so a failing page
    leaves the earlier lines on stdout. With --limit no page beyond the one
    holding the last printed transaction is fetched.

    Example:
      pyplaid transactions access-sandbox-xxx --start 2024-01-01 --end 2024-03-31
    """

    async def _stream() -> int:
        printed = 0
        if limit == 0:
            return printed
        size = page_size if page_size is not None else get_settings().page_size
        async with build_client() as client:
            request = GetTransactionsRequest(
                access_token=access_token,
                start_date=start.date(),
                end_date=end.date(),
            )
            async for txn in client.transactions_iter(request, page_size=size):
                echo_model(txn, indent=None)
                printed += 1
                if limit is not None and printed >= limit:
                    break
        return printed

    printed = run(_stream())
    logger.info(f"✅ {printed} transactions")
