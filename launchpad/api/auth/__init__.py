"""OAuth1 signing, token handshake and credential storage."""

from .handshake import (
    AuthorizePrompt,
    cached_access_token,
    cmdline_access_token,
    console_prompt,
    exchange_request_token,
    get_access_token,
    get_request_token,
)
from .signing import (
    OAuthAuthorizationHeader,
    access_token_params,
    access_token_url,
    authorize_token_url,
    calculate_plaintext_signature,
    format_token_response,
    generate_oauth1_authorization_header,
    parse_token_response,
    percent_encode,
    request_token_params,
    request_token_url,
)
from .store import OAUTH1_KEY, KeyringSecretStore, SecretStore

__all__ = [
    # Signing
    "OAuthAuthorizationHeader",
    "access_token_params",
    "access_token_url",
    "authorize_token_url",
    "calculate_plaintext_signature",
    "format_token_response",
    "generate_oauth1_authorization_header",
    "parse_token_response",
    "percent_encode",
    "request_token_params",
    "request_token_url",
    # Handshake
    "AuthorizePrompt",
    "cached_access_token",
    "cmdline_access_token",
    "console_prompt",
    "exchange_request_token",
    "get_access_token",
    "get_request_token",
    # Storage
    "OAUTH1_KEY",
    "KeyringSecretStore",
    "SecretStore",
]
