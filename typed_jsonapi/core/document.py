"""JSON:API document construction."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Union

from typed_jsonapi.config import get_settings
from typed_jsonapi.schemas.document import Document, JsonApi
from typed_jsonapi.schemas.error import ErrorObject
from typed_jsonapi.schemas.resource import GenericObject, ResourceObject
from typed_jsonapi.serializers.base import ResourceSerializer

from .errors import JSONAPIErrorBuilder
from .optional_vec import OptionalVec

logger = logging.getLogger(__name__)

AnyResource = Union[ResourceObject[Any], GenericObject]


class JSONAPIDocumentBuilder:
    """Build JSON:API documents from typed or untyped resources."""

    error_builder_class: type = JSONAPIErrorBuilder

    def __init__(self, *, jsonapi_version: str | None = None) -> None:
        self.jsonapi_version = jsonapi_version or get_settings().jsonapi_version

    def build_single(
        self,
        resource: AnyResource | None,
        *,
        included: Iterable[AnyResource] | None = None,
        links: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Document:
        """Return a document whose primary data is one resource (or null)."""
        data = None if resource is None else ResourceSerializer.downgrade(resource)
        return self._build(OptionalVec.one(data), included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[AnyResource],
        *,
        included: Iterable[AnyResource] | None = None,
        links: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Document:
        """Return a document whose primary data is a collection of resources."""
        data = [ResourceSerializer.downgrade(resource) for resource in resources]
        return self._build(OptionalVec.many(data), included=included, links=links, meta=meta)

    def build_error(self, errors: Iterable[ErrorObject | BaseException]) -> Document:
        """Return an error document from error objects or exceptions."""
        document = self.error_builder_class().error_document(errors)
        if self.jsonapi_version:
            document.jsonapi = JsonApi(version=self.jsonapi_version)
        return document

    def _build(
        self,
        data: OptionalVec[GenericObject],
        *,
        included: Iterable[AnyResource] | None,
        links: dict[str, Any] | None,
        meta: dict[str, Any] | None,
    ) -> Document:
        document = Document(data=data, links=links or None, meta=meta or None)
        if included:
            objects = [ResourceSerializer.downgrade(resource) for resource in included]
            document.included = ResourceSerializer.unique(objects) or None
        if self.jsonapi_version:
            document.jsonapi = JsonApi(version=self.jsonapi_version)
        logger.debug(
            "Built document with %d primary and %d included resources",
            len(document.primary()),
            len(document.included or []),
        )
        return document
