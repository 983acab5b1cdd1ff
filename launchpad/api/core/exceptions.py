"""Custom exception hierarchy."""

from __future__ import annotations


class LaunchpadError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(LaunchpadError):
    """Network failure, timeout or non-2xx response.

    ``status_code`` is set when the server answered with an error status,
    and left as ``None`` when the request never got a response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(LaunchpadError):
    """Response body could not be decoded.

    Raised for malformed page JSON and malformed token-response form bodies.
    """

    pass


class AuthorizationHeaderError(LaunchpadError):
    """An OAuth ``Authorization`` header could not be parsed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SecretStoreError(LaunchpadError):
    """Secret store failure (permission denied, corrupt entry, no backend)."""

    def __init__(self, message: str, service: str | None = None) -> None:
        super().__init__(message)
        self.service = service


class NoEntryError(SecretStoreError):
    """The secret store holds no entry for the requested key."""

    pass


class InvalidRootError(LaunchpadError, ValueError):
    """Neither a known service root alias nor a URL."""

    pass
