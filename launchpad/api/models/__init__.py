"""Data models for Launchpad resources.

Architecture:
    Pydantic v2 models, frozen so fetched values cannot be modified by
    accident while a collection is being walked.

Model Categories:
    - Entry: generic collection item with the standard resource links
    - Redacted values: MaybeRedacted[T] fields and the REDACTED sentinel
"""

from .entry import Entry
from .redacted import REDACTED, REDACTED_MARKER, MaybeRedacted, RedactedValue, is_redacted

__all__ = [
    "Entry",
    "MaybeRedacted",
    "REDACTED",
    "REDACTED_MARKER",
    "RedactedValue",
    "is_redacted",
]
