"""Launchpad instances, service roots and web roots.

Lets callers say "staging" when they mean "https://api.staging.launchpad.net/".
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit, urlunsplit

from .exceptions import InvalidRootError

logger = logging.getLogger(__name__)

# The default Launchpad instance (hostname of the web site)
DEFAULT_INSTANCE = "launchpad.net"

LPNET_SERVICE_ROOT = "https://api.launchpad.net/"
QASTAGING_SERVICE_ROOT = "https://api.qastaging.launchpad.net/"
STAGING_SERVICE_ROOT = "https://api.staging.launchpad.net/"
DEV_SERVICE_ROOT = "https://api.launchpad.test/"
DOGFOOD_SERVICE_ROOT = "https://api.dogfood.paddev.net/"
TEST_DEV_SERVICE_ROOT = "http://api.launchpad.test:8085/"

LPNET_WEB_ROOT = "https://launchpad.net/"
QASTAGING_WEB_ROOT = "https://qastaging.launchpad.net/"
STAGING_WEB_ROOT = "https://staging.launchpad.net/"
DEV_WEB_ROOT = "https://launchpad.test/"
DOGFOOD_WEB_ROOT = "https://dogfood.paddev.net/"
TEST_DEV_WEB_ROOT = "http://launchpad.test:8085/"

# The edge server is gone; its URLs resolve to production
EDGE_SERVICE_ROOT = "https://api.edge.launchpad.net/"
EDGE_WEB_ROOT = "https://edge.launchpad.net/"

SERVICE_ROOTS = {
    "production": LPNET_SERVICE_ROOT,
    "edge": LPNET_SERVICE_ROOT,
    "qastaging": QASTAGING_SERVICE_ROOT,
    "staging": STAGING_SERVICE_ROOT,
    "dogfood": DOGFOOD_SERVICE_ROOT,
    "dev": DEV_SERVICE_ROOT,
    "test_dev": TEST_DEV_SERVICE_ROOT,
}

WEB_ROOTS = {
    "production": LPNET_WEB_ROOT,
    "edge": LPNET_WEB_ROOT,
    "qastaging": QASTAGING_WEB_ROOT,
    "staging": STAGING_WEB_ROOT,
    "dogfood": DOGFOOD_WEB_ROOT,
    "dev": DEV_WEB_ROOT,
    "test_dev": TEST_DEV_WEB_ROOT,
}


def _is_url(value: str) -> bool:
    parts = urlsplit(value)
    return bool(parts.scheme) and bool(parts.netloc)


def _dereference_alias(root: str, aliases: dict[str, str]) -> str:
    if root == "edge":
        logger.warning("Launchpad edge server no longer exists. Using 'production' instead.")
    if root in aliases:
        return aliases[root]

    if _is_url(root):
        return root

    raise InvalidRootError(f"{root!r} is neither a known alias nor a URL")


def lookup_service_root(service_root: str) -> str:
    """Dereference an alias to a service root.

    A recognized alias such as "staging" becomes the matching URL. A URL is
    returned as is. Anything else raises InvalidRootError.

    Examples:
        >>> lookup_service_root("staging")
        'https://api.staging.launchpad.net/'
    """
    if service_root == EDGE_SERVICE_ROOT:
        service_root = "edge"
    return _dereference_alias(service_root, SERVICE_ROOTS)


def lookup_web_root(web_root: str) -> str:
    """Dereference an alias to a web site root."""
    if web_root == EDGE_WEB_ROOT:
        web_root = "edge"
    return _dereference_alias(web_root, WEB_ROOTS)


def web_root_for_service_root(service_root: str) -> str:
    """Turn a service root URL into a web root URL.

    This is done heuristically (dropping the ``api.`` host prefix), not with
    a lookup.
    """
    parts = urlsplit(lookup_service_root(service_root))
    netloc = parts.netloc
    if netloc.startswith("api."):
        netloc = netloc[len("api.") :]
    return urlunsplit((parts.scheme, netloc, "/", "", ""))


def service_root_url(instance: str = DEFAULT_INSTANCE, version: str = "1.0") -> str:
    """Return the versioned API root for an instance hostname.

    Examples:
        >>> service_root_url("staging.launchpad.net", "devel")
        'https://api.staging.launchpad.net/devel/'
    """
    return f"https://api.{instance}/{version}/"
