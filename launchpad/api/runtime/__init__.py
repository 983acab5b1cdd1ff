"""HTTP transport runtime."""

from .http import HTTPClient, RequestHook

__all__ = ["HTTPClient", "RequestHook"]
