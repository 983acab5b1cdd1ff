"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from launchpad.api.core import (
    AuthorizationHeaderError,
    DecodeError,
    LaunchpadError,
    NoEntryError,
    SecretStoreError,
    TransportError,
)


def test_transport_error_with_status_code():
    error = TransportError("error", status_code=503, url="https://api.launchpad.net/")
    assert str(error) == "error"
    assert error.status_code == 503
    assert error.url == "https://api.launchpad.net/"
    assert isinstance(error, LaunchpadError)


def test_decode_error_is_not_transport_error():
    error = DecodeError("bad json")
    assert isinstance(error, LaunchpadError)
    assert not isinstance(error, TransportError)


def test_no_entry_is_a_store_error():
    error = NoEntryError("missing", service="launchpad.net")
    assert isinstance(error, SecretStoreError)
    assert error.service == "launchpad.net"


def test_authorization_header_error_names_field():
    error = AuthorizationHeaderError("Missing OAuth field oauth_nonce", field="oauth_nonce")
    assert error.field == "oauth_nonce"
