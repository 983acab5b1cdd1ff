"""Core constants and exceptions."""

from .exceptions import (
    AuthorizationHeaderError,
    DecodeError,
    InvalidRootError,
    LaunchpadError,
    NoEntryError,
    SecretStoreError,
    TransportError,
)
from .uris import (
    DEFAULT_INSTANCE,
    SERVICE_ROOTS,
    WEB_ROOTS,
    lookup_service_root,
    lookup_web_root,
    service_root_url,
    web_root_for_service_root,
)

__all__ = [
    # Exceptions
    "LaunchpadError",
    "TransportError",
    "DecodeError",
    "AuthorizationHeaderError",
    "SecretStoreError",
    "NoEntryError",
    "InvalidRootError",
    # Roots
    "DEFAULT_INSTANCE",
    "SERVICE_ROOTS",
    "WEB_ROOTS",
    "lookup_service_root",
    "lookup_web_root",
    "service_root_url",
    "web_root_for_service_root",
]
