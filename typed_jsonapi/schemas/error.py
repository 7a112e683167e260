"""JSON:API error objects.

See https://jsonapi.org/format/#error-objects
"""

from __future__ import annotations

from typing import Optional

from .base import JSONAPIModel, Meta
from .links import Links


class ErrorSource(JSONAPIModel):
    """References to the source of an error."""

    pointer: Optional[str] = None
    parameter: Optional[str] = None


class ErrorObject(JSONAPIModel):
    """A single error object; every member is optional."""

    id: Optional[str] = None
    links: Optional[Links] = None
    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[ErrorSource] = None
    meta: Optional[Meta] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorObject:
        """Return an error object carrying the exception message as ``detail``."""
        return cls(detail=str(exc))
