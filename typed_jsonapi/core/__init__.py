"""Core JSON:API containers and errors.

The document and error builders live in ``core.document`` and ``core.errors``.
"""

from .exceptions import (
    CardinalityError,
    FailedDeserializationError,
    ImproperTypeError,
    JSONAPIError,
    ObjectConversionError,
)
from .optional_vec import Cardinality, OptionalVec

__all__ = [
    "Cardinality",
    "CardinalityError",
    "FailedDeserializationError",
    "ImproperTypeError",
    "JSONAPIError",
    "ObjectConversionError",
    "OptionalVec",
]
