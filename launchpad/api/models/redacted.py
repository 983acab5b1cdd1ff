"""Redacted field values.

Launchpad replaces fields the caller may not see (e.g. a hidden e-mail
address) with a fixed marker string. Models declare such fields as
``MaybeRedacted[T]`` so the marker becomes the ``REDACTED`` sentinel
instead of being compared as a string throughout calling code.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar, Union

from pydantic import BeforeValidator, GetCoreSchemaHandler
from pydantic_core import core_schema

REDACTED_MARKER = "tag:launchpad.net:2008:redacted"

T = TypeVar("T")


class RedactedValue:
    """Sentinel type for a value the server withheld."""

    _instance: RedactedValue | None = None

    def __new__(cls) -> RedactedValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "REDACTED"

    def __bool__(self) -> bool:
        return False

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: REDACTED_MARKER
            ),
        )


REDACTED = RedactedValue()


def _mark_redacted(value: Any) -> Any:
    if value == REDACTED_MARKER:
        return REDACTED
    return value


MaybeRedacted = Annotated[Union[T, RedactedValue], BeforeValidator(_mark_redacted)]


def is_redacted(value: Any) -> bool:
    return value is REDACTED
