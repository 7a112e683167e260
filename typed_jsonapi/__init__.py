"""Typed and untyped JSON:API v1.0 document models."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder
from .core.exceptions import (
    CardinalityError,
    FailedDeserializationError,
    ImproperTypeError,
    JSONAPIError,
    ObjectConversionError,
)
from .core.optional_vec import Cardinality, OptionalVec
from .schemas import (
    Attributes,
    Document,
    ErrorObject,
    ErrorSource,
    GenericObject,
    Identifier,
    JsonApi,
    Link,
    LinkObject,
    Links,
    Meta,
    Relationship,
    Relationships,
    ResourceObject,
)
from .serializers.base import ResourceSerializer

__all__ = [
    "Attributes",
    "Cardinality",
    "CardinalityError",
    "Document",
    "ErrorObject",
    "ErrorSource",
    "FailedDeserializationError",
    "GenericObject",
    "Identifier",
    "ImproperTypeError",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JsonApi",
    "Link",
    "LinkObject",
    "Links",
    "Meta",
    "ObjectConversionError",
    "OptionalVec",
    "Relationship",
    "Relationships",
    "ResourceObject",
    "ResourceSerializer",
]
