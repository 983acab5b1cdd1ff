"""Collection entry model."""

from pydantic import BaseModel, ConfigDict


class Entry(BaseModel):
    """A resource representation as it appears in a collection page.

    Only the links every Launchpad entry carries are declared; all other
    fields are kept as extra attributes.
    """

    self_link: str | None = None
    web_link: str | None = None
    resource_type_link: str | None = None
    http_etag: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True)
