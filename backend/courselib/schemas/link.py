"""Hypermedia link schema."""

from pydantic import BaseModel, ConfigDict


class LinkDto(BaseModel):
    """A (href, rel, method) triple describing a related operation."""

    model_config = ConfigDict(frozen=True)

    href: str
    rel: str
    method: str
