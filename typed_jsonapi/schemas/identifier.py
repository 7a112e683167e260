"""Resource identifier objects."""

from __future__ import annotations

from typing import Optional

from .base import JSONAPIModel, Meta


class Identifier(JSONAPIModel):
    """Resource identifier object: id + type, with optional meta.

    See https://jsonapi.org/format/#document-resource-identifier-objects
    """

    id: str
    type: str
    meta: Optional[Meta] = None

    @classmethod
    def new(cls, id: str, type: str) -> Identifier:
        return cls(id=id, type=type)

    @property
    def kind(self) -> str:
        return self.type
