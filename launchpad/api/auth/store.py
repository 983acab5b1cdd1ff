"""Secret storage for cached OAuth credentials."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import keyring
from keyring.errors import KeyringError

from ..core.exceptions import NoEntryError, SecretStoreError

logger = logging.getLogger(__name__)

# Username under which access tokens are stored for an instance
OAUTH1_KEY = "oauth1"


@runtime_checkable
class SecretStore(Protocol):
    """Key/value secret storage scoped by (service, username).

    ``get`` raises NoEntryError when nothing is stored under the key and
    SecretStoreError for any other failure.
    """

    def get(self, service: str, username: str) -> str: ...

    def set(self, service: str, username: str, value: str) -> None: ...


class KeyringSecretStore:
    """SecretStore backed by the platform keyring."""

    def get(self, service: str, username: str) -> str:
        try:
            value = keyring.get_password(service, username)
        except KeyringError as e:
            raise SecretStoreError(f"Keyring lookup failed for {service}: {e}", service=service) from e
        if value is None:
            raise NoEntryError(f"No keyring entry for {service}/{username}", service=service)
        return value

    def set(self, service: str, username: str, value: str) -> None:
        try:
            keyring.set_password(service, username, value)
        except KeyringError as e:
            raise SecretStoreError(f"Keyring update failed for {service}: {e}", service=service) from e
        logger.debug("Stored keyring entry for %s/%s", service, username)
