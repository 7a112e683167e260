"""Pydantic schemas for JSON:API."""

from .base import JSONAPIModel, JSONMap, Meta
from .document import Document, JsonApi
from .error import ErrorObject, ErrorSource
from .identifier import Identifier
from .links import Link, LinkObject, Links
from .relationships import Relationship, Relationships
from .resource import Attributes, GenericObject, ResourceObject

__all__ = [
    "Attributes",
    "Document",
    "ErrorObject",
    "ErrorSource",
    "GenericObject",
    "Identifier",
    "JSONAPIModel",
    "JSONMap",
    "JsonApi",
    "Link",
    "LinkObject",
    "Links",
    "Meta",
    "Relationship",
    "Relationships",
    "ResourceObject",
]
