"""Exceptions raised by JSON:API decoding and resource conversion."""

from __future__ import annotations

from pydantic import ValidationError


class JSONAPIError(Exception):
    """Base class for every error raised by this package."""


class CardinalityError(JSONAPIError, ValueError):
    """A value matched neither the one-or-null shape nor the array shape."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            "Neither one nor many: value matches neither a single optional "
            f"item nor an array of items ({type(value).__name__})"
        )


class ObjectConversionError(JSONAPIError):
    """Converting an untyped resource into a typed resource failed.

    ``ImproperTypeError`` is raised when the stored type tag does not match the
    tag declared by the attributes class. ``FailedDeserializationError`` is
    raised when the attribute mapping does not validate as that class.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Object Conversion Error: {message}")


class ImproperTypeError(ObjectConversionError):
    """The resource type tag differs from the target attributes type."""

    def __init__(self, *, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Improper type (expected {expected}, got {got})")


class FailedDeserializationError(ObjectConversionError):
    """The attribute mapping could not be validated into the attributes type."""

    def __init__(self, error: ValidationError) -> None:
        self.error = error
        super().__init__(f"Failed to Deserialize Attributes ({error})")
