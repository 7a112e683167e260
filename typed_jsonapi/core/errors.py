"""JSON:API error object builders."""

from __future__ import annotations

from typing import Any, Iterable

from typed_jsonapi.schemas.document import Document
from typed_jsonapi.schemas.error import ErrorObject, ErrorSource


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        id: str | None = None,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: ErrorSource | dict[str, Any] | None = None,
        links: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ErrorObject:
        """Return an error object; at least one member must be given."""
        fields = {
            "id": id,
            "status": status,
            "code": code,
            "title": title,
            "detail": detail,
            "source": source,
            "links": links,
            "meta": meta,
        }
        present = {name: value for name, value in fields.items() if value is not None}
        if not present:
            raise ValueError("Error object must include at least one field.")
        return ErrorObject(**present)

    def error_document(
        self, errors: Iterable[ErrorObject | BaseException]
    ) -> Document:
        """Return a document with an errors array.

        Exceptions are lifted into error objects carrying their message.
        """
        return Document(errors=[self._as_error(error) for error in errors])

    def _as_error(self, error: ErrorObject | BaseException) -> ErrorObject:
        if isinstance(error, BaseException):
            return ErrorObject.from_exception(error)
        return error
