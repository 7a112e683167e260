"""JSON:API relationship objects.

See https://jsonapi.org/format/#document-resource-object-relationships
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import Field

from typed_jsonapi.core.optional_vec import OptionalVec

from .base import JSONAPIModel, Meta, key_ordered
from .identifier import Identifier
from .links import Links


class Relationship(JSONAPIModel):
    """Relationship object.

    ``data`` distinguishes an omitted linkage (not present), an empty or
    populated to-one linkage (one) and a to-many linkage (many, possibly
    empty).
    """

    links: Optional[Links] = None
    data: OptionalVec[Identifier] = Field(default_factory=OptionalVec.not_present)
    meta: Optional[Meta] = None

    @classmethod
    def to_one(
        cls,
        identifier: Optional[Identifier],
        *,
        links: Optional[dict[str, Any]] = None,
        meta: Optional[dict[str, Any]] = None,
    ) -> Relationship:
        """Return a to-one relationship; ``None`` is an explicit empty linkage."""
        return cls(links=links, data=OptionalVec.one(identifier), meta=meta)

    @classmethod
    def to_many(
        cls,
        identifiers: Iterable[Identifier],
        *,
        links: Optional[dict[str, Any]] = None,
        meta: Optional[dict[str, Any]] = None,
    ) -> Relationship:
        return cls(links=links, data=OptionalVec.many(identifiers), meta=meta)

    def identifiers(self) -> list[Identifier]:
        """Return the linked identifiers whatever the cardinality."""
        return self.data.to_list()


Relationships = key_ordered(Relationship)
