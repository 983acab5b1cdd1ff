"""Launchpad API - async client runtime for the Launchpad web service."""

from .auth import (
    KeyringSecretStore,
    OAuthAuthorizationHeader,
    SecretStore,
    authorize_token_url,
    calculate_plaintext_signature,
    exchange_request_token,
    generate_oauth1_authorization_header,
    get_access_token,
    get_request_token,
    parse_token_response,
)
from .clients import Client
from .config import ClientConfig
from .core import (
    DEFAULT_INSTANCE,
    AuthorizationHeaderError,
    DecodeError,
    InvalidRootError,
    LaunchpadError,
    NoEntryError,
    SecretStoreError,
    TransportError,
    lookup_service_root,
    lookup_web_root,
    web_root_for_service_root,
)
from .models import REDACTED, Entry, MaybeRedacted, is_redacted
from .pagination import JSONPage, Page, PagedCollection
from .runtime import HTTPClient

__version__ = "0.1.0"

__all__ = [
    # Clients
    "Client",
    "ClientConfig",
    "HTTPClient",
    # Pagination
    "Page",
    "JSONPage",
    "PagedCollection",
    # Auth
    "OAuthAuthorizationHeader",
    "authorize_token_url",
    "calculate_plaintext_signature",
    "exchange_request_token",
    "generate_oauth1_authorization_header",
    "get_access_token",
    "get_request_token",
    "parse_token_response",
    "SecretStore",
    "KeyringSecretStore",
    # Models
    "Entry",
    "MaybeRedacted",
    "REDACTED",
    "is_redacted",
    # Roots
    "DEFAULT_INSTANCE",
    "lookup_service_root",
    "lookup_web_root",
    "web_root_for_service_root",
    # Exceptions
    "LaunchpadError",
    "TransportError",
    "DecodeError",
    "AuthorizationHeaderError",
    "SecretStoreError",
    "NoEntryError",
    "InvalidRootError",
]
