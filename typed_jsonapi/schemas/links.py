"""JSON:API link objects.

See https://jsonapi.org/format/#document-links
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import Field, RootModel

from .base import JSONAPIModel, Meta, key_ordered


class LinkObject(JSONAPIModel):
    """Link object form: optional href plus optional meta."""

    href: Optional[str] = None
    meta: Optional[Meta] = None


class Link(RootModel[Union[str, LinkObject]]):
    """A link, either a bare URL string or a link object.

    Prefer ``Link.new``: it only produces the object form when there is meta
    to carry. ``Link()`` is an empty link object.
    """

    root: Union[str, LinkObject] = Field(default_factory=LinkObject)

    @classmethod
    def new(cls, url: str, meta: Optional[dict[str, Any]] = None) -> Link:
        """Build a link; ``meta=None`` always yields the bare URL form."""
        if meta is None:
            return cls(url)
        return cls(LinkObject(href=url, meta=meta))

    @property
    def href(self) -> Optional[str]:
        """The URL of the link regardless of its form."""
        if isinstance(self.root, str):
            return self.root
        return self.root.href

    @property
    def meta(self) -> Optional[dict[str, Any]]:
        if isinstance(self.root, str):
            return None
        return self.root.meta


Links = key_ordered(Link)
