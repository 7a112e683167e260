"""Conversion between typed resources and their JSON:API wire forms."""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Union

from typed_jsonapi.core.optional_vec import OptionalVec
from typed_jsonapi.schemas.identifier import Identifier
from typed_jsonapi.schemas.links import Link
from typed_jsonapi.schemas.relationships import Relationship
from typed_jsonapi.schemas.resource import A, GenericObject, ResourceObject

logger = logging.getLogger(__name__)

Related = Union[ResourceObject[Any], GenericObject, Identifier]


class ResourceSerializer(Generic[A]):
    """Serialize ``ResourceObject[A]`` instances and load them back.

    Loading is all-or-nothing: ``from_many`` raises on the first object that
    fails to upgrade and returns nothing.
    """

    def __init__(self, attributes_type: type[A]) -> None:
        self.attributes_type = attributes_type
        self.resource_class = ResourceObject[attributes_type]  # type: ignore[valid-type]

    @property
    def type_(self) -> str:
        return self.attributes_type.kind()

    def to_generic(self, resource: ResourceObject[A]) -> GenericObject:
        return resource.to_generic()

    def to_identifier(self, resource: ResourceObject[A]) -> Identifier:
        return resource.to_identifier()

    def to_many(self, resources: Iterable[ResourceObject[A]]) -> list[GenericObject]:
        """Serialize a collection of resources."""
        return [self.to_generic(resource) for resource in resources]

    def identifiers(self, resources: Iterable[ResourceObject[A]]) -> list[Identifier]:
        return [self.to_identifier(resource) for resource in resources]

    def from_generic(self, obj: GenericObject) -> ResourceObject[A]:
        return self.resource_class.from_generic(obj)

    def from_identifier(self, identifier: Identifier) -> ResourceObject[A]:
        return self.resource_class.from_identifier(identifier)

    def from_many(self, objects: Iterable[GenericObject]) -> list[ResourceObject[A]]:
        return [self.from_generic(obj) for obj in objects]

    def resource_links(self, resource_id: str, *, base_url: str = "") -> dict[str, Link]:
        """Return the ``self`` link of a resource of this type."""
        return {"self": Link.new(self._resource_url(base_url, resource_id))}

    def relationship_object(
        self,
        resource: ResourceObject[A],
        relationship_name: str,
        related: Related | Iterable[Related] | None,
        *,
        base_url: str | None = None,
    ) -> Relationship:
        """Build a relationship object from ``resource`` to ``related``.

        A single related resource (or ``None``) gives a to-one linkage, any
        other iterable a to-many linkage. ``self`` and ``related`` links are
        added when ``base_url`` is given.
        """
        links = None
        if base_url is not None:
            links = self._relationship_links(base_url, resource.id, relationship_name)
        if related is None or isinstance(related, (ResourceObject, GenericObject, Identifier)):
            data = OptionalVec.one(None if related is None else self._identifier(related))
        else:
            data = OptionalVec.many(self._identifier(item) for item in related)
        return Relationship(links=links, data=data)

    @staticmethod
    def downgrade(resource: ResourceObject[Any] | GenericObject) -> GenericObject:
        """Return the wire form of a typed or untyped resource."""
        if isinstance(resource, GenericObject):
            return resource
        return resource.to_generic()

    @staticmethod
    def unique(objects: Iterable[GenericObject]) -> list[GenericObject]:
        """Drop repeated ``(type, id)`` pairs, keeping the first occurrence."""
        unique_objects: list[GenericObject] = []
        seen: set[tuple[str, str]] = set()
        for obj in objects:
            key = (obj.type, obj.id)
            if key in seen:
                logger.debug("Skipping duplicate resource %s/%s", obj.type, obj.id)
                continue
            seen.add(key)
            unique_objects.append(obj)
        return unique_objects

    def _resource_url(self, base_url: str, resource_id: str) -> str:
        base = base_url.rstrip("/")
        return f"{base}/{self.type_}/{resource_id}"

    def _relationship_links(
        self, base_url: str, resource_id: str, relationship: str
    ) -> dict[str, Link]:
        resource_path = self._resource_url(base_url, resource_id)
        return {
            "self": Link.new(f"{resource_path}/relationships/{relationship}"),
            "related": Link.new(f"{resource_path}/{relationship}"),
        }

    def _identifier(self, related: Related) -> Identifier:
        if isinstance(related, Identifier):
            return related
        return related.to_identifier()
