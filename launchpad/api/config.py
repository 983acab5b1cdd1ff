"""Client configuration.

Values can be given explicitly or read from ``LAUNCHPAD_*`` environment
variables, so scripts and tests can point a client at staging without
code changes.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .core.uris import DEFAULT_INSTANCE, service_root_url

DEFAULT_USER_AGENT = "launchpad-api/0.1.0"
DEFAULT_TIMEOUT = 30.0
DEFAULT_API_VERSION = "1.0"


@dataclass(frozen=True)
class ClientConfig:
    """Settings for building a Client.

    Attributes:
        consumer_key: Application name sent as the OAuth consumer key
        instance: Launchpad instance hostname (e.g. "staging.launchpad.net")
        consumer_secret: Consumer secret (Launchpad normally uses none)
        user_agent: User-Agent header value
        timeout: Total request timeout in seconds
        api_version: API version path segment ("1.0", "beta", "devel")
    """

    consumer_key: str
    instance: str = DEFAULT_INSTANCE
    consumer_secret: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        if not self.consumer_key:
            raise ValueError("consumer_key must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def service_root(self) -> str:
        return service_root_url(self.instance, self.api_version)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, *, consumer_key: str | None = None
    ) -> ClientConfig:
        """Build a config from ``LAUNCHPAD_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            consumer_key: Fallback when LAUNCHPAD_CONSUMER_KEY is unset
        """
        env = os.environ if environ is None else environ
        key = env.get("LAUNCHPAD_CONSUMER_KEY", consumer_key)
        if not key:
            raise ValueError("LAUNCHPAD_CONSUMER_KEY is not set and no consumer_key given")

        timeout = env.get("LAUNCHPAD_TIMEOUT")
        return cls(
            consumer_key=key,
            instance=env.get("LAUNCHPAD_INSTANCE", DEFAULT_INSTANCE),
            consumer_secret=env.get("LAUNCHPAD_CONSUMER_SECRET"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            api_version=env.get("LAUNCHPAD_API_VERSION", DEFAULT_API_VERSION),
        )
