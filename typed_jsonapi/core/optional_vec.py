"""The absent / one / many container used for JSON:API ``data`` members."""

from __future__ import annotations

import enum
from functools import lru_cache
from typing import Any, Generic, Iterable, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import core_schema

from .exceptions import CardinalityError

T = TypeVar("T")


class Cardinality(str, enum.Enum):
    """Variants of ``OptionalVec``."""

    NOT_PRESENT = "not_present"
    ONE = "one"
    MANY = "many"


@lru_cache(maxsize=None)
def _adapters(item_type: Any) -> tuple[TypeAdapter, TypeAdapter]:
    return TypeAdapter(Optional[item_type]), TypeAdapter(list[item_type])


class OptionalVec(Generic[T]):
    """A member that is absent, a single nullable item, or a list of items.

    On the wire the variants are untagged: ``NOT_PRESENT`` is a missing key,
    ``ONE(None)`` is ``null``, ``ONE(x)`` is ``x`` and ``MANY(xs)`` is an
    array. Decoding tries the one-or-null shape before the array shape, so an
    item type that is itself array shaped is always read as ``ONE``.
    """

    __slots__ = ("cardinality", "value")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        cardinality: Cardinality = Cardinality.NOT_PRESENT,
        value: Any = None,
    ) -> None:
        if cardinality is Cardinality.MANY:
            value = list(value or [])
        elif cardinality is Cardinality.NOT_PRESENT:
            value = None
        self.cardinality = cardinality
        self.value = value

    @classmethod
    def not_present(cls) -> OptionalVec[Any]:
        return cls(Cardinality.NOT_PRESENT)

    @classmethod
    def one(cls, value: Optional[T] = None) -> OptionalVec[T]:
        return cls(Cardinality.ONE, value)

    @classmethod
    def many(cls, values: Iterable[T] = ()) -> OptionalVec[T]:
        return cls(Cardinality.MANY, list(values))

    def is_not_present(self) -> bool:
        return self.cardinality is Cardinality.NOT_PRESENT

    def is_one(self) -> bool:
        return self.cardinality is Cardinality.ONE

    def is_many(self) -> bool:
        return self.cardinality is Cardinality.MANY

    def to_list(self) -> list[T]:
        """Return the contained items as a list, whatever the variant."""
        if self.is_many():
            return list(self.value)
        if self.is_one() and self.value is not None:
            return [self.value]
        return []

    @classmethod
    def decode(cls, raw: Any, item_type: Any = Any) -> OptionalVec[Any]:
        """Decode a present member value.

        The one-or-null shape is attempted first and the array shape second;
        ``CardinalityError`` is raised when neither validates.
        """
        one_adapter, many_adapter = _adapters(item_type)
        attempts = (
            (Cardinality.ONE, one_adapter),
            (Cardinality.MANY, many_adapter),
        )
        for cardinality, adapter in attempts:
            try:
                value = adapter.validate_python(raw)
            except ValidationError:
                continue
            return cls(cardinality, value)
        raise CardinalityError(raw)

    @classmethod
    def revalidate(cls, vec: OptionalVec[Any], item_type: Any = Any) -> OptionalVec[Any]:
        """Validate the items of an existing container against ``item_type``.

        The variant is kept; a mismatched item raises ``ValidationError``.
        """
        if vec.is_not_present():
            return cls.not_present()
        one_adapter, many_adapter = _adapters(item_type)
        adapter = one_adapter if vec.is_one() else many_adapter
        return cls(vec.cardinality, adapter.validate_python(vec.value))

    def encode(self, item_type: Any = Any, *, mode: str = "json") -> Any:
        """Return the wire value; ``None`` for both ``NOT_PRESENT`` and ``ONE(None)``."""
        one_adapter, many_adapter = _adapters(item_type)
        if self.is_not_present():
            return None
        if self.is_one():
            return one_adapter.dump_python(self.value, mode=mode, by_alias=True)
        return many_adapter.dump_python(self.value, mode=mode, by_alias=True)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source)
        item_type = args[0] if args else Any

        def validate(value: Any) -> OptionalVec[Any]:
            if isinstance(value, OptionalVec):
                return cls.revalidate(value, item_type)
            return cls.decode(value, item_type)

        def serialize(value: OptionalVec[Any], info: core_schema.SerializationInfo) -> Any:
            return value.encode(item_type, mode=info.mode)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize, info_arg=True
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalVec):
            return NotImplemented
        return self.cardinality is other.cardinality and self.value == other.value

    def __repr__(self) -> str:
        if self.is_not_present():
            return "OptionalVec.not_present()"
        return f"OptionalVec.{self.cardinality.value}({self.value!r})"
