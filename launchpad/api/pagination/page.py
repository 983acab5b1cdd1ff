"""Pages of server-paginated collections.

A page is one fetched batch of a remote collection: its entries, the offset
of the first entry, and optionally the size of the whole collection. Pages
know how to fetch their neighbours. Pages returned by ``next`` are
contiguous: ``next.start == start + len(entries)``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..core.exceptions import DecodeError

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


class JSONTransport(Protocol):
    """Anything that can GET a URL and decode the JSON body (e.g. HTTPClient)."""

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any: ...


class Page(ABC, Generic[ItemT]):
    """One batch of items from a paginated collection."""

    @property
    @abstractmethod
    def start(self) -> int:
        """Index of the first entry on this page within the collection."""

    @property
    @abstractmethod
    def total_size(self) -> int | None:
        """Number of entries in the whole collection, if the server reports it."""

    @property
    @abstractmethod
    def entries(self) -> list[ItemT]:
        """Entries on this page, in server order."""

    @abstractmethod
    async def next(self, client: Any) -> Page[ItemT] | None:
        """Fetch the following page, or None if this is the last one."""

    @abstractmethod
    async def prev(self, client: Any) -> Page[ItemT] | None:
        """Fetch the preceding page, or None if this is the first one."""


class CollectionDocument(BaseModel):
    """JSON representation of a Launchpad collection page."""

    start: int = Field(..., ge=0)
    entries: list[Any]
    total_size: int | None = Field(default=None, ge=0)
    total_size_link: str | None = None
    next_collection_link: str | None = None
    prev_collection_link: str | None = None
    resource_type_link: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class JSONPage(Page[ItemT]):
    """Page decoded from a Launchpad collection document.

    Entries are validated into ``item_type`` when one is given and left as
    decoded JSON otherwise.
    """

    def __init__(self, document: CollectionDocument, entries: list[ItemT], item_type: Any = None) -> None:
        self._document = document
        self._entries = entries
        self._item_type = item_type

    @classmethod
    def from_json(cls, data: Any, item_type: Any = None) -> JSONPage[ItemT]:
        """Build a page from decoded JSON.

        Raises:
            DecodeError: Document or one of its entries does not validate
        """
        try:
            document = CollectionDocument.model_validate(data)
            if item_type is None:
                entries = list(document.entries)
            else:
                entries = TypeAdapter(list[item_type]).validate_python(document.entries)
        except ValidationError as e:
            raise DecodeError(f"Malformed collection page: {e}") from e
        return cls(document, entries, item_type)

    @classmethod
    async def fetch(cls, client: JSONTransport, url: str, item_type: Any = None) -> JSONPage[ItemT]:
        """GET ``url`` and decode it as a collection page."""
        data = await client.get_json(url)
        return cls.from_json(data, item_type)

    @property
    def start(self) -> int:
        return self._document.start

    @property
    def total_size(self) -> int | None:
        return self._document.total_size

    @property
    def entries(self) -> list[ItemT]:
        return list(self._entries)

    @property
    def next_collection_link(self) -> str | None:
        return self._document.next_collection_link

    @property
    def prev_collection_link(self) -> str | None:
        return self._document.prev_collection_link

    async def next(self, client: JSONTransport) -> JSONPage[ItemT] | None:
        link = self._document.next_collection_link
        if link is None:
            return None
        logger.debug("Fetching next page after offset %d: %s", self.start, link)
        return await self.fetch(client, link, self._item_type)

    async def prev(self, client: JSONTransport) -> JSONPage[ItemT] | None:
        link = self._document.prev_collection_link
        if link is None:
            return None
        logger.debug("Fetching previous page before offset %d: %s", self.start, link)
        return await self.fetch(client, link, self._item_type)

    async def fetch_total_size(self, client: JSONTransport) -> int | None:
        """Return the collection size, following ``total_size_link`` if needed.

        Some collections only report their size through a separate link whose
        body is a bare integer.
        """
        if self._document.total_size is not None:
            return self._document.total_size
        link = self._document.total_size_link
        if link is None:
            return None
        data = await client.get_json(link)
        if isinstance(data, bool) or not isinstance(data, int) or data < 0:
            raise DecodeError(f"Expected a collection size from {link}, got {data!r}")
        return data
