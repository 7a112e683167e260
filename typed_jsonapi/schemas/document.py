"""Top-level JSON:API document models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from typed_jsonapi.core.optional_vec import OptionalVec

from .base import JSONAPIModel, Meta
from .error import ErrorObject
from .links import Links
from .resource import A, GenericObject, ResourceObject


class JsonApi(JSONAPIModel):
    """The ``jsonapi`` member describing the server implementation."""

    version: Optional[str] = None
    meta: Optional[Meta] = None


class Document(JSONAPIModel):
    """Top-level document.

    ``data`` is left out when not present, written as ``null`` for an empty
    to-one document and as an array for a collection.
    """

    data: OptionalVec[GenericObject] = Field(default_factory=OptionalVec.not_present)
    errors: Optional[list[ErrorObject]] = None
    meta: Optional[Meta] = None
    jsonapi: Optional[JsonApi] = None
    links: Optional[Links] = None
    included: Optional[list[GenericObject]] = None

    def primary(self) -> list[GenericObject]:
        """Return the primary resources as a list."""
        return self.data.to_list()

    def resources(self, attributes_type: type[A]) -> list[ResourceObject[A]]:
        """Upgrade the primary resources tagged with ``attributes_type.kind()``."""
        return _upgrade_matching(self.primary(), attributes_type)

    def included_resources(self, attributes_type: type[A]) -> list[ResourceObject[A]]:
        """Upgrade the included resources tagged with ``attributes_type.kind()``."""
        return _upgrade_matching(self.included or [], attributes_type)


def _upgrade_matching(
    objects: list[GenericObject], attributes_type: type[A]
) -> list[ResourceObject[A]]:
    kind = attributes_type.kind()
    return [obj.to_resource(attributes_type) for obj in objects if obj.type == kind]
