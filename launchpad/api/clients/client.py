"""Authenticated Launchpad client.

``Client`` is an HTTPClient that carries an OAuth1 credential set and signs
every outbound request that has a token. Anonymous clients send requests
without an ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any

from ..auth.handshake import AuthorizePrompt, console_prompt, get_access_token
from ..auth.signing import generate_oauth1_authorization_header
from ..auth.store import SecretStore
from ..config import DEFAULT_API_VERSION, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from ..core.uris import DEFAULT_INSTANCE, service_root_url
from ..runtime.http import HTTPClient

logger = logging.getLogger(__name__)


class Client(HTTPClient):
    """HTTP client for the Launchpad API with OAuth1 PLAINTEXT signing.

    Example:
        >>> async with Client.anonymous("just+testing") as client:
        ...     root = await client.service_root()
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str | None = None,
        token: str | None = None,
        token_secret: str | None = None,
        *,
        instance: str = DEFAULT_INSTANCE,
        api_version: str = DEFAULT_API_VERSION,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(
            base_url=service_root_url(instance, api_version),
            timeout=timeout,
            user_agent=user_agent,
        )
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token
        self.token_secret = token_secret
        self.instance = instance
        self.add_request_hook(self._sign_request)

    @classmethod
    def anonymous(cls, consumer_key: str, **kwargs: Any) -> Client:
        """Create a client with no credentials."""
        return cls(consumer_key, **kwargs)

    @classmethod
    def from_tokens(
        cls,
        consumer_key: str,
        consumer_secret: str | None,
        token: str,
        token_secret: str,
        **kwargs: Any,
    ) -> Client:
        """Create a client from an existing access token."""
        return cls(consumer_key, consumer_secret, token, token_secret, **kwargs)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        token: str | None = None,
        token_secret: str | None = None,
    ) -> Client:
        return cls(
            config.consumer_key,
            config.consumer_secret,
            token,
            token_secret,
            instance=config.instance,
            api_version=config.api_version,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )

    @classmethod
    async def authenticated(
        cls,
        consumer_key: str,
        instance: str | None = None,
        store: SecretStore | None = None,
        *,
        prompt: AuthorizePrompt = console_prompt,
        **kwargs: Any,
    ) -> Client:
        """Create a client, obtaining an access token via the OAuth handshake.

        Args:
            consumer_key: Application name
            instance: Launchpad instance hostname (default: production)
            store: Secret store to read a cached token from and save a new one to
            prompt: Called with the authorization URL for the user step
        """
        instance = instance or DEFAULT_INSTANCE
        logger.debug("Authenticating %s against %s", consumer_key, instance)
        async with HTTPClient(
            timeout=kwargs.get("timeout", DEFAULT_TIMEOUT),
            user_agent=kwargs.get("user_agent", DEFAULT_USER_AGENT),
        ) as http:
            token, token_secret = await get_access_token(
                consumer_key, instance, store, prompt=prompt, http=http
            )
        return cls.from_tokens(consumer_key, None, token, token_secret, instance=instance, **kwargs)

    @property
    def is_anonymous(self) -> bool:
        return self.token is None

    def authorization_header(self, url: str) -> str | None:
        """Return the Authorization header value for ``url``, or None when anonymous."""
        if self.token is None:
            return None
        return generate_oauth1_authorization_header(
            url,
            self.consumer_key,
            self.consumer_secret,
            self.token,
            self.token_secret or "",
        )

    def _sign_request(self, method: str, url: str, headers: dict[str, str]) -> None:
        value = self.authorization_header(url)
        if value is not None:
            headers["Authorization"] = value

    async def service_root(self) -> dict[str, Any]:
        """Fetch the service root document."""
        return await self.get_json(self.base_url or service_root_url(self.instance))
