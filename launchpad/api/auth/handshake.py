"""Three-legged OAuth1 token exchange against a Launchpad instance.

1. POST to ``+request-token`` for a request token.
2. The user opens ``+authorize-token`` in a browser and approves it.
3. POST to ``+access-token`` to trade the request token for an access token.

Each network step is an await point. An HTTPClient may be passed in and is
borrowed for the call; otherwise a short-lived one is created.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..core.exceptions import NoEntryError
from ..core.uris import DEFAULT_INSTANCE
from ..runtime.http import HTTPClient
from .signing import (
    access_token_params,
    access_token_url,
    authorize_token_url,
    format_token_response,
    parse_token_response,
    request_token_params,
    request_token_url,
)
from .store import OAUTH1_KEY, SecretStore

logger = logging.getLogger(__name__)

# Receives the authorization URL and returns once the user has approved it
AuthorizePrompt = Callable[[str], Awaitable[None]]


async def console_prompt(auth_url: str) -> None:
    """Ask the user on the terminal to authorize the request token."""
    print(f"Please authorize the request token at {auth_url}")
    print("Once done, press enter to continue...")
    await asyncio.to_thread(input)


async def _post_for_token(http: HTTPClient | None, url: str, params: dict[str, str]) -> tuple[str, str]:
    if http is not None:
        return parse_token_response(await http.post_form(url, params))
    async with HTTPClient() as owned:
        return parse_token_response(await owned.post_form(url, params))


async def get_request_token(
    consumer_key: str,
    instance: str = DEFAULT_INSTANCE,
    http: HTTPClient | None = None,
) -> tuple[str, str]:
    """Obtain a request token and its secret."""
    token = await _post_for_token(http, request_token_url(instance), request_token_params(consumer_key))
    logger.debug("Obtained request token from %s", instance)
    return token


async def exchange_request_token(
    consumer_key: str,
    request_token: str,
    request_token_secret: str | None = None,
    consumer_secret: str | None = None,
    instance: str = DEFAULT_INSTANCE,
    http: HTTPClient | None = None,
) -> tuple[str, str]:
    """Exchange an authorized request token for an access token and secret."""
    params = access_token_params(
        consumer_key,
        request_token,
        consumer_secret=consumer_secret,
        request_token_secret=request_token_secret,
    )
    token = await _post_for_token(http, access_token_url(instance), params)
    logger.debug("Exchanged request token for access token on %s", instance)
    return token


async def cmdline_access_token(
    consumer_key: str,
    instance: str = DEFAULT_INSTANCE,
    *,
    prompt: AuthorizePrompt = console_prompt,
    http: HTTPClient | None = None,
) -> tuple[str, str]:
    """Run the full handshake, asking the user to authorize in between."""
    request_token, request_token_secret = await get_request_token(consumer_key, instance, http)
    await prompt(authorize_token_url(instance, request_token))
    return await exchange_request_token(
        consumer_key,
        request_token,
        request_token_secret=request_token_secret,
        instance=instance,
        http=http,
    )


async def cached_access_token(
    consumer_key: str,
    instance: str,
    store: SecretStore,
    *,
    prompt: AuthorizePrompt = console_prompt,
    http: HTTPClient | None = None,
) -> tuple[str, str]:
    """Return the access token cached for ``instance``, running the handshake if absent.

    Only a missing entry triggers the handshake; other store errors propagate.
    """
    try:
        cached = store.get(instance, OAUTH1_KEY)
    except NoEntryError:
        logger.debug("No cached access token for %s", instance)
    else:
        logger.debug("Found cached access token for %s", instance)
        return parse_token_response(cached)

    token, token_secret = await cmdline_access_token(
        consumer_key, instance, prompt=prompt, http=http
    )
    store.set(instance, OAUTH1_KEY, format_token_response(token, token_secret))
    return token, token_secret


async def get_access_token(
    consumer_key: str,
    instance: str = DEFAULT_INSTANCE,
    store: SecretStore | None = None,
    *,
    prompt: AuthorizePrompt = console_prompt,
    http: HTTPClient | None = None,
) -> tuple[str, str]:
    """Get an access token, from ``store`` when given or else by prompting."""
    if store is not None:
        return await cached_access_token(consumer_key, instance, store, prompt=prompt, http=http)
    return await cmdline_access_token(consumer_key, instance, prompt=prompt, http=http)
