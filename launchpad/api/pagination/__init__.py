"""Paginated collection support."""

from .collection import PagedCollection
from .page import CollectionDocument, JSONPage, JSONTransport, Page

__all__ = [
    "CollectionDocument",
    "JSONPage",
    "JSONTransport",
    "Page",
    "PagedCollection",
]
