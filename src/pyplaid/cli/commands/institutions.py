"""Institution lookup commands for the pyplaid CLI."""

import logging

import typer

from ...models import (
    Institution,
    InstitutionGetRequest,
    InstitutionsGetRequest,
    InstitutionsSearchRequest,
)
from ..utils import build_client, echo_lines, echo_model, run

app = typer.Typer(help="Look up financial institutions supported by Plaid")
logger = logging.getLogger(__name__)


@app.command("list")
def list_institutions(
    country: list[str] = typer.Option(
        ["US"], "--country", "-c", help="Country code, can be repeated"
    ),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Stop after this many institutions"
    ),
    page_size: int = typer.Option(
        100, "--page-size", help="Institutions requested per call"
    ),
    offset: int = typer.Option(0, "--offset", help="Number of institutions to skip"),
) -> None:
    """Stream supported institutions as JSON lines."""

    async def _list() -> int:
        printed = 0
        if limit == 0:
            return printed
        async with build_client() as client:
            request = InstitutionsGetRequest(
                count=page_size, offset=offset, country_codes=country
            )
            async for institution in client.institutions_iter(request):
                echo_model(institution, indent=None)
                printed += 1
                if limit is not None and printed >= limit:
                    break
        return printed

    printed = run(_list())
    logger.info(f"✅ {printed} institutions")


@app.command("search")
def search_institutions(
    query: str = typer.Argument(..., help="Institution name to search for"),
    country: list[str] = typer.Option(
        ["US"], "--country", "-c", help="Country code, can be repeated"
    ),
) -> None:
    """Search institutions by name."""

    async def _search() -> list[Institution]:
        async with build_client() as client:
            return await client.search_institutions(
                InstitutionsSearchRequest(query=query, country_codes=country)
            )

    echo_lines(run(_search()))


@app.command("get")
def get_institution(
    institution_id: str = typer.Argument(..., help="Plaid institution ID"),
    country: list[str] = typer.Option(
        ["US"], "--country", "-c", help="Country code, can be repeated"
    ),
) -> None:
    """Show one institution."""

    async def _get() -> Institution:
        async with build_client() as client:
            return await client.get_institution_by_id(
                InstitutionGetRequest(
                    institution_id=institution_id, country_codes=country
                )
            )

    echo_model(run(_get()))
