"""Category listing command for the pyplaid CLI."""

from ...models import GetCategoriesResponse
from ..utils import build_client, echo_lines, run


def list_categories() -> None:
    """Print every Plaid transaction category as JSON lines."""

    async def _categories() -> GetCategoriesResponse:
        async with build_client() as client:
            return await client.categories()

    echo_lines(run(_categories()).categories)
