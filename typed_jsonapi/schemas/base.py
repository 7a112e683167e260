"""Shared pydantic base model and key-ordered map types."""

from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import (
    AfterValidator,
    BaseModel,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    model_serializer,
)

from typed_jsonapi.core.optional_vec import OptionalVec
from typed_jsonapi.utils.json import sort_keys


def _sorted(value: dict[str, Any]) -> dict[str, Any]:
    return sort_keys(value)


def _deep_sorted(value: dict[str, Any]) -> dict[str, Any]:
    return sort_keys(value, deep=True)


def _serialize_sorted(value: Any, handler: SerializerFunctionWrapHandler) -> Any:
    return sort_keys(handler(value))


def _serialize_deep_sorted(value: Any, handler: SerializerFunctionWrapHandler) -> Any:
    return sort_keys(handler(value), deep=True)


# Maps of JSON values (meta, attributes): nested objects are ordered too.
JSONMap = Annotated[
    Dict[str, Any],
    AfterValidator(_deep_sorted),
    WrapSerializer(_serialize_deep_sorted),
]

Meta = JSONMap


def key_ordered(value_type: Any) -> Any:
    """Return a ``dict[str, value_type]`` type that serializes in key order."""
    return Annotated[
        Dict[str, value_type],
        AfterValidator(_sorted),
        WrapSerializer(_serialize_sorted),
    ]


class JSONAPIModel(BaseModel):
    """Base for every wire structure.

    Fields holding ``None`` or a not-present ``OptionalVec`` are left out of
    the serialized object instead of being written as ``null``.
    """

    @model_serializer(mode="wrap")
    def omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, OptionalVec) and value.is_not_present()):
                data.pop(name, None)
        return data
