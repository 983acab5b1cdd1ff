"""Cursor over a server-paginated collection.

PagedCollection holds one page at a time and fetches neighbouring pages on
demand, giving random access with ``get`` and single-pass streaming with
``async for``. Earlier pages are not cached; revisiting them re-fetches.
"""

from __future__ import annotations

import logging
from typing import Any, Generic

from .page import ItemT, Page

logger = logging.getLogger(__name__)


class PagedCollection(Generic[ItemT]):
    """Indexable, streamable view of a paginated remote collection.

    The client is borrowed and passed to each page fetch; the current page is
    replaced only after a fetch succeeds, so a failed or cancelled fetch
    leaves the collection as it was. Errors raised by a fetch propagate
    unchanged and nothing is retried.

    Example:
        >>> first = await JSONPage.fetch(client, url)
        >>> collection = PagedCollection(client, first)
        >>> third = await collection.get(2)
        >>> async for entry in collection:
        ...     print(entry)
    """

    def __init__(self, client: Any, page: Page[ItemT]) -> None:
        self._client = client
        self._page = page
        # Reversed so pop() yields server order
        self._pending: list[ItemT] = list(reversed(page.entries))
        self._exhausted = False

    @property
    def page(self) -> Page[ItemT]:
        """The page currently held."""
        return self._page

    def len(self) -> int | None:
        """Total number of entries in the collection, if the server reports it."""
        return self._page.total_size

    def is_empty(self) -> bool:
        """Return True if the collection is known or appears to be empty.

        Without a reported size, an empty first page counts as empty.
        """
        total_size = self.len()
        if total_size is not None:
            return total_size == 0
        return not self._page.entries and self._page.start == 0

    async def get(self, index: int) -> ItemT | None:
        """Get the entry at ``index``, fetching pages as needed.

        Returns None when the index lies past either end of the collection.
        """
        if index < 0:
            raise IndexError("PagedCollection index must be non-negative")

        total_size = self.len()
        if total_size is not None and index >= total_size:
            return None

        while index < self._page.start:
            page = await self._page.prev(self._client)
            if page is None:
                return None
            logger.debug("Moved back to page at offset %d", page.start)
            self._page = page

        entries = self._page.entries
        while index >= self._page.start + len(entries):
            page = await self._page.next(self._client)
            if page is None:
                return None
            logger.debug("Moved forward to page at offset %d", page.start)
            self._page = page
            entries = page.entries

        return entries[index - self._page.start]

    def __aiter__(self) -> PagedCollection[ItemT]:
        return self

    async def __anext__(self) -> ItemT:
        while not self._pending:
            if self._exhausted:
                raise StopAsyncIteration
            page = await self._page.next(self._client)
            if page is None:
                self._exhausted = True
                raise StopAsyncIteration
            entries = page.entries
            logger.debug("Streaming page at offset %d (%d entries)", page.start, len(entries))
            self._page = page
            self._pending = list(reversed(entries))
        return self._pending.pop()

    async def to_list(self) -> list[ItemT]:
        """Consume the remaining stream into a list."""
        return [item async for item in self]
