"""Untyped and strictly typed JSON:API resource objects.

``GenericObject`` is the wire form: its attributes are a flat, key-ordered
mapping of JSON values. ``ResourceObject[A]`` is the application form: its
attributes are an ``Attributes`` model that also supplies the type tag.

Downgrading (typed to untyped, or either to ``Identifier``) cannot fail.
Upgrading checks the type tag and validates the attribute mapping, raising
``ImproperTypeError`` or ``FailedDeserializationError``. Conversions never
modify their source and never share containers with it.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from typed_jsonapi.core.exceptions import FailedDeserializationError, ImproperTypeError
from typed_jsonapi.utils.json import to_mapping

from .base import JSONAPIModel, JSONMap, Meta
from .identifier import Identifier
from .links import Link, Links
from .relationships import Relationship, Relationships


class Attributes(BaseModel):
    """Base class for strictly typed resource attributes.

    Subclasses must return their resource type from ``kind`` and may build
    default links for a resource id by overriding ``links``. Attribute models
    must serialize to a JSON object.
    """

    @classmethod
    def kind(cls) -> str:
        """Return the JSON:API ``type`` of resources carrying these attributes."""
        raise NotImplementedError

    @classmethod
    def links(cls, id: str) -> Optional[dict[str, Link]]:
        """Return the default links of the resource ``id``."""
        return None


A = TypeVar("A", bound=Attributes)


class GenericObject(JSONAPIModel):
    """A resource object of any type, as found on the wire.

    See https://jsonapi.org/format/#document-resource-objects
    """

    id: str
    type: str
    attributes: Optional[JSONMap] = None
    relationships: Optional[Relationships] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None

    @property
    def kind(self) -> str:
        return self.type

    @classmethod
    def from_identifier(cls, identifier: Identifier) -> GenericObject:
        return cls(id=identifier.id, type=identifier.type, meta=deepcopy(identifier.meta))

    @classmethod
    def from_resource(cls, resource: ResourceObject[Any]) -> GenericObject:
        return resource.to_generic()

    def to_identifier(self) -> Identifier:
        return Identifier(id=self.id, type=self.type, meta=deepcopy(self.meta))

    def to_resource(self, attributes_type: type[A]) -> ResourceObject[A]:
        """Upgrade into ``ResourceObject[attributes_type]``."""
        return ResourceObject[attributes_type].from_generic(self)  # type: ignore[valid-type]


class ResourceObject(JSONAPIModel, Generic[A]):
    """A resource object whose attributes are an ``Attributes`` model.

    The type tag is not stored: it comes from ``A.kind()``. Use a
    parametrized class (``ResourceObject[Article]``) for the upgrade
    constructors.
    """

    id: str
    attributes: Optional[A] = None
    relationships: Optional[Relationships] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None

    @classmethod
    def new(cls, id: str, attributes: Optional[A] = None) -> ResourceObject[A]:
        """Build a resource whose links come from ``A.links(id)``."""
        if attributes is not None and cls.__pydantic_generic_metadata__["parameters"]:
            cls = cls[type(attributes)]  # type: ignore[index]
        attributes_type = cls.attributes_type()
        return cls(id=id, attributes=attributes, links=attributes_type.links(id))

    @classmethod
    def attributes_type(cls) -> type[A]:
        for klass in cls.__mro__:
            metadata = getattr(klass, "__pydantic_generic_metadata__", None)
            if metadata and metadata["args"]:
                return metadata["args"][0]
        raise TypeError(
            f"{cls.__name__} has no attributes type; use ResourceObject[SomeAttributes]."
        )

    @classmethod
    def kind(cls) -> str:
        return cls.attributes_type().kind()

    def add_relationship(self, name: str, relationship: Relationship) -> None:
        if self.relationships is None:
            self.relationships = {}
        self.relationships[name] = relationship

    def add_link(self, name: str, link: Link | str) -> None:
        if not isinstance(link, Link):
            link = Link.model_validate(link)
        if self.links is None:
            self.links = {}
        self.links[name] = link

    def to_generic(self) -> GenericObject:
        attributes = None
        if self.attributes is not None:
            attributes = to_mapping(self.attributes.model_dump(mode="json", by_alias=True))
        return GenericObject(
            id=self.id,
            type=self.kind(),
            attributes=attributes,
            relationships=deepcopy(self.relationships),
            links=deepcopy(self.links),
            meta=deepcopy(self.meta),
        )

    def to_identifier(self) -> Identifier:
        return Identifier(id=self.id, type=self.kind(), meta=deepcopy(self.meta))

    @classmethod
    def from_generic(cls, obj: GenericObject) -> ResourceObject[A]:
        return cls._upgrade(
            obj.id,
            obj.type,
            obj.attributes,
            relationships=obj.relationships,
            links=obj.links,
            meta=obj.meta,
        )

    @classmethod
    def from_identifier(cls, identifier: Identifier) -> ResourceObject[A]:
        return cls._upgrade(identifier.id, identifier.type, None, meta=identifier.meta)

    @classmethod
    def _upgrade(
        cls,
        id: str,
        type_: str,
        attributes: Optional[Mapping[str, Any]],
        *,
        relationships: Optional[dict[str, Relationship]] = None,
        links: Optional[dict[str, Link]] = None,
        meta: Optional[dict[str, Any]] = None,
    ) -> ResourceObject[A]:
        attributes_type = cls.attributes_type()
        expected = attributes_type.kind()
        if type_ != expected:
            raise ImproperTypeError(expected=expected, got=type_)

        value = None
        if attributes is not None:
            try:
                value = attributes_type.model_validate(attributes)
            except ValidationError as exc:
                raise FailedDeserializationError(exc) from exc

        return cls(
            id=id,
            attributes=value,
            relationships=deepcopy(relationships),
            links=deepcopy(links),
            meta=deepcopy(meta),
        )
