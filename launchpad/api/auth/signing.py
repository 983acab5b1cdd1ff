"""OAuth1 request signing for Launchpad.

Launchpad only accepts the PLAINTEXT signature method, so a "signature" is
the percent-encoded consumer secret and token secret joined by ``&``. The
transport's TLS provides confidentiality.

See https://help.launchpad.net/API/SigningRequests for the protocol.
"""

from __future__ import annotations

import logging
import secrets
import time
from datetime import datetime, timezone
from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import AuthorizationHeaderError, DecodeError
from ..core.uris import DEFAULT_INSTANCE

logger = logging.getLogger(__name__)

SIGNATURE_METHOD = "PLAINTEXT"
OAUTH_VERSION = "1.0"

# RFC3986 unreserved characters plus "+", "/" and ":", which Launchpad's own
# signing example leaves unescaped. quote() always keeps A-Za-z0-9-._~.
_SAFE_CHARS = "+/:"

NONCE_MIN = 100000
NONCE_MAX = 999999


def percent_encode(value: str) -> str:
    """Percent-encode a value the way Launchpad expects.

    Examples:
        >>> percent_encode("just+testing")
        'just+testing'
        >>> percent_encode("a&b c")
        'a%26b%20c'
    """
    return quote(value, safe=_SAFE_CHARS)


def request_token_url(instance: str = DEFAULT_INSTANCE) -> str:
    return f"https://{instance}/+request-token"


def access_token_url(instance: str = DEFAULT_INSTANCE) -> str:
    return f"https://{instance}/+access-token"


def authorize_token_url(
    instance: str,
    oauth_token: str,
    oauth_callback: str | None = None,
) -> str:
    """Build the browser URL where the user authorizes a request token.

    Args:
        instance: Launchpad instance hostname (e.g. "launchpad.net")
        oauth_token: Request token obtained from the request-token endpoint
        oauth_callback: Optional URL Launchpad redirects to afterwards

    Returns:
        Authorization URL with a form-encoded query string
    """
    query = [("oauth_token", oauth_token)]
    if oauth_callback is not None:
        query.append(("oauth_callback", oauth_callback))
    return f"https://{instance}/+authorize-token?{urlencode(query)}"


def calculate_plaintext_signature(
    consumer_secret: str | None = None,
    token_secret: str | None = None,
) -> str:
    """Compute a PLAINTEXT signature; missing secrets count as empty."""
    return f"{percent_encode(consumer_secret or '')}&{percent_encode(token_secret or '')}"


def request_token_params(consumer_key: str) -> dict[str, str]:
    """Form parameters for the request-token endpoint."""
    return {
        "oauth_consumer_key": consumer_key,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_signature": "&",
    }


def access_token_params(
    consumer_key: str,
    request_token: str,
    consumer_secret: str | None = None,
    request_token_secret: str | None = None,
) -> dict[str, str]:
    """Form parameters for exchanging a request token for an access token."""
    return {
        "oauth_token": request_token,
        "oauth_consumer_key": consumer_key,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_signature": calculate_plaintext_signature(consumer_secret, request_token_secret),
    }


def parse_token_response(body: str | bytes) -> tuple[str, str]:
    """Parse a form-encoded token response into ``(token, token_secret)``.

    Keys other than ``oauth_token`` and ``oauth_token_secret`` are ignored.
    A missing key yields an empty string.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Token response is not valid UTF-8: {e}") from e

    token = ""
    token_secret = ""
    for key, value in parse_qsl(body, keep_blank_values=True):
        if key == "oauth_token":
            token = value
        elif key == "oauth_token_secret":
            token_secret = value
        else:
            logger.debug("Unknown key in token response: %s => %s", key, value)
    return token, token_secret


def format_token_response(token: str, token_secret: str) -> str:
    """Serialize a token pair the same way Launchpad returns it."""
    return urlencode({"oauth_token": token, "oauth_token_secret": token_secret})


class OAuthAuthorizationHeader(BaseModel):
    """Fields of an OAuth1 ``Authorization`` header, in wire order."""

    realm: str
    oauth_consumer_key: str
    oauth_token: str
    oauth_signature_method: str = SIGNATURE_METHOD
    oauth_signature: str
    oauth_timestamp: str
    oauth_nonce: str
    oauth_version: str = OAUTH_VERSION

    model_config = ConfigDict(frozen=True)

    def to_header(self) -> str:
        """Render as ``OAuth key="value", ...`` with encoded values."""
        pairs = (f'{key}="{percent_encode(value)}"' for key, value in self)
        return "OAuth " + ", ".join(pairs)

    def __str__(self) -> str:
        return self.to_header()

    @classmethod
    def parse(cls, value: str) -> OAuthAuthorizationHeader:
        """Decode a header produced by :meth:`to_header`.

        Raises:
            AuthorizationHeaderError: Prefix, pair or field is missing or malformed
        """
        if not value.startswith("OAuth "):
            raise AuthorizationHeaderError(
                "Authorization header does not start with 'OAuth '", field="scheme"
            )

        fields: dict[str, str] = {}
        for part in value[len("OAuth ") :].split(", "):
            key, sep, raw = part.partition("=")
            if not key:
                raise AuthorizationHeaderError(f"Missing key in {part!r}")
            if not sep:
                raise AuthorizationHeaderError(f"Missing value for {key}", field=key)
            try:
                decoded = unquote(raw.strip('"'), errors="strict")
            except UnicodeDecodeError as e:
                raise AuthorizationHeaderError(
                    f"Invalid UTF-8 in OAuth header field {key}: {e}", field=key
                ) from e

            if key in cls.model_fields:
                fields[key] = decoded
            else:
                logger.debug("Unknown key in OAuth header: %s", key)

        for name in cls.model_fields:
            if name not in fields:
                raise AuthorizationHeaderError(f"Missing OAuth field {name}", field=name)

        return cls(**fields)


def _unix_timestamp(timestamp: int | datetime | None) -> int:
    if timestamp is None:
        return int(time.time())
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return int(timestamp.timestamp())
    return int(timestamp)


def generate_nonce() -> int:
    return NONCE_MIN + secrets.randbelow(NONCE_MAX - NONCE_MIN + 1)


def generate_oauth1_authorization_header(
    url: str,
    consumer_key: str,
    consumer_secret: str | None,
    token: str,
    token_secret: str,
    timestamp: int | datetime | None = None,
    nonce: int | None = None,
) -> str:
    """Build the ``Authorization`` header value for a request to ``url``.

    Args:
        url: Request URL; its scheme and host form the realm
        consumer_key: Application consumer key
        consumer_secret: Consumer secret, None for Launchpad's usual empty secret
        token: Access token
        token_secret: Access token secret
        timestamp: Unix seconds or datetime (naive means UTC); defaults to now
        nonce: Fixed nonce; defaults to a random 6-digit integer

    Returns:
        Header value starting with ``OAuth ``
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"Cannot derive an OAuth realm from {url!r}")

    header = OAuthAuthorizationHeader(
        realm=f"{parts.scheme}://{parts.hostname}/",
        oauth_consumer_key=consumer_key,
        oauth_token=token,
        oauth_signature=calculate_plaintext_signature(consumer_secret, token_secret),
        oauth_timestamp=str(_unix_timestamp(timestamp)),
        oauth_nonce=str(nonce if nonce is not None else generate_nonce()),
    )
    return header.to_header()
