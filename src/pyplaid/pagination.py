"""Offset pagination for Plaid list endpoints.

Several Plaid endpoints take ``offset``/``count`` and answer with one page of
items plus the ``total`` number of items available. ``paginate`` turns such an
endpoint into a single lazy async stream of items:

- nothing is requested until the first item is pulled,
- pages are requested one at a time, in increasing offset order,
- the most recent ``total`` reported by the server wins, so a total that
  shrinks between calls ends the stream early instead of over-reading,
- an empty page ends the stream even if ``total`` claims more items,
- a failing call raises out of the iterator after every item fetched before
  it has been yielded; the iterator is finished afterwards,
- abandoning the iterator issues no further requests.

Streams are single use. Start a new one to read the data again.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated endpoint."""

    items: list[T]
    total: int


FetchPage = Callable[[int, int], Awaitable[Page[T]]]


@dataclass
class PageCursor:
    """Offset bookkeeping for one in-flight stream."""

    page_size: int
    offset: int = 0
    total: int | None = None
    pages_fetched: int = 0

    @property
    def exhausted(self) -> bool:
        return self.total is not None and self.offset >= self.total

    def advance(self, page: Page[T]) -> None:
        self.total = page.total
        self.offset += len(page.items)
        self.pages_fetched += 1


def paginate(
    fetch_page: FetchPage[T],
    *,
    page_size: int,
    start_offset: int = 0,
) -> AsyncIterator[T]:
    """Stream every item of an offset paginated endpoint.

    Args:
        fetch_page: Coroutine function called as ``fetch_page(offset, count)``
        page_size: Number of items requested per call, must be positive
        start_offset: Offset of the first item to read

    Returns:
        AsyncIterator: Items in the order the server returned them

    Raises:
        ConfigurationError: Immediately, if ``page_size`` is not positive or
            ``start_offset`` is negative
    """
    if page_size <= 0:
        raise ConfigurationError(f"page size must be positive, got {page_size}")
    if start_offset < 0:
        raise ConfigurationError(f"start offset cannot be negative, got {start_offset}")

    return _stream(fetch_page, PageCursor(page_size=page_size, offset=start_offset))


async def _stream(fetch_page: FetchPage[T], cursor: PageCursor) -> AsyncIterator[T]:
    while not cursor.exhausted:
        page = await fetch_page(cursor.offset, cursor.page_size)
        logger.debug(
            f"Fetched page {cursor.pages_fetched + 1} at offset {cursor.offset}: "
            f"{len(page.items)} items, total {page.total}"
        )
        cursor.advance(page)

        for item in page.items:
            yield item

        if not page.items:
            break
