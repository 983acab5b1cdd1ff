"""Unit tests for redacted field handling."""

from pydantic import BaseModel

from launchpad.api.models import REDACTED, REDACTED_MARKER, Entry, MaybeRedacted, RedactedValue, is_redacted


class Person(Entry):
    name: str
    preferred_email_address_link: MaybeRedacted[str | None] = None
    karma: MaybeRedacted[int] = 0


def test_marker_becomes_sentinel():
    person = Person.model_validate(
        {"name": "jelmer", "preferred_email_address_link": REDACTED_MARKER}
    )
    assert person.preferred_email_address_link is REDACTED
    assert is_redacted(person.preferred_email_address_link)


def test_regular_values_validate_as_declared_type():
    person = Person.model_validate(
        {"name": "jelmer", "preferred_email_address_link": "https://x/email", "karma": "42"}
    )
    assert person.preferred_email_address_link == "https://x/email"
    assert person.karma == 42
    assert not is_redacted(person.karma)


def test_redacted_non_string_field():
    person = Person.model_validate({"name": "jelmer", "karma": REDACTED_MARKER})
    assert person.karma is REDACTED


def test_serializes_back_to_marker():
    person = Person(name="jelmer", karma=REDACTED)
    assert person.model_dump()["karma"] == REDACTED_MARKER


def test_sentinel_is_singleton_and_falsy():
    assert RedactedValue() is REDACTED
    assert not REDACTED
    assert repr(REDACTED) == "REDACTED"


def test_entry_keeps_extra_fields():
    class Wrapper(BaseModel):
        entry: Entry

    wrapper = Wrapper.model_validate({"entry": {"self_link": "https://x", "display_name": "X"}})
    assert wrapper.entry.self_link == "https://x"
    assert wrapper.entry.display_name == "X"
