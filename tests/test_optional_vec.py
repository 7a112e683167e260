"""Tests for the absent / one / many container."""

import pytest
from pydantic import Field, ValidationError

from typed_jsonapi.core.exceptions import CardinalityError
from typed_jsonapi.core.optional_vec import Cardinality, OptionalVec
from typed_jsonapi.schemas import Identifier, JSONAPIModel


class Holder(JSONAPIModel):
    inner: OptionalVec[int] = Field(default_factory=OptionalVec.not_present)


def test_not_present_omits_key() -> None:
    """A missing member decodes to ``NOT_PRESENT`` and is never written."""
    holder = Holder(inner=OptionalVec.not_present())
    assert holder.model_dump_json() == "{}"
    assert Holder.model_validate_json("{}") == holder


def test_empty_to_one_is_null() -> None:
    holder = Holder(inner=OptionalVec.one(None))
    assert holder.model_dump_json() == '{"inner":null}'
    assert Holder.model_validate_json('{"inner":null}') == holder


def test_to_one_is_bare_value() -> None:
    holder = Holder(inner=OptionalVec.one(1))
    assert holder.model_dump_json() == '{"inner":1}'
    assert Holder.model_validate_json('{"inner":1}') == holder


def test_to_many_is_array() -> None:
    holder = Holder(inner=OptionalVec.many([1, 2]))
    assert holder.model_dump_json() == '{"inner":[1,2]}'
    assert Holder.model_validate_json('{"inner":[1,2]}') == holder


def test_empty_array_is_many() -> None:
    decoded = Holder.model_validate_json('{"inner":[]}')
    assert decoded.inner == OptionalVec.many([])
    assert decoded.model_dump_json() == '{"inner":[]}'


def test_neither_one_nor_many_fails() -> None:
    with pytest.raises(ValidationError):
        Holder.model_validate_json('{"inner":"oops i\'m a string"}')
    with pytest.raises(CardinalityError):
        OptionalVec.decode("oops", int)


def test_decode_identifiers() -> None:
    """Objects are claimed by the one branch, arrays by the many branch."""
    one = OptionalVec.decode({"id": "a", "type": "b"}, Identifier)
    assert one == OptionalVec.one(Identifier(id="a", type="b"))

    many = OptionalVec.decode([{"id": "a", "type": "b"}, {"id": "c", "type": "d"}], Identifier)
    assert many.is_many()
    assert [identifier.id for identifier in many.value] == ["a", "c"]

    assert OptionalVec.decode(None, Identifier) == OptionalVec.one(None)


def test_array_shaped_item_is_claimed_by_one() -> None:
    decoded = OptionalVec.decode([1, 2], list[int])
    assert decoded.cardinality is Cardinality.ONE
    assert decoded.value == [1, 2]


def test_predicates() -> None:
    ov = OptionalVec.not_present()
    assert ov.is_not_present()
    assert not ov.is_one()
    assert not ov.is_many()

    ov = OptionalVec.one(None)
    assert not ov.is_not_present()
    assert ov.is_one()
    assert not ov.is_many()

    ov = OptionalVec.many([])
    assert not ov.is_not_present()
    assert not ov.is_one()
    assert ov.is_many()


def test_default_and_to_list() -> None:
    assert OptionalVec() == OptionalVec.not_present()
    assert OptionalVec.not_present().to_list() == []
    assert OptionalVec.one(None).to_list() == []
    assert OptionalVec.one(3).to_list() == [3]
    assert OptionalVec.many([1, 2]).to_list() == [1, 2]
    assert OptionalVec.one(None) != OptionalVec.not_present()
    assert OptionalVec.one([]) != OptionalVec.many([])


class Linkage(JSONAPIModel):
    data: OptionalVec[Identifier] = Field(default_factory=OptionalVec.not_present)


def test_existing_container_items_are_validated() -> None:
    """Items of a container passed to a field are validated against the item type."""
    one = Linkage(data=OptionalVec.one({"id": "a", "type": "b"}))
    assert one.data == OptionalVec.one(Identifier(id="a", type="b"))
    assert one.model_dump_json() == '{"data":{"id":"a","type":"b"}}'

    many = Linkage(data=OptionalVec.many([{"id": "a", "type": "b"}]))
    assert many.data.is_many()
    assert isinstance(many.data.value[0], Identifier)

    assert Linkage(data=OptionalVec.one(None)).data == OptionalVec.one(None)
    assert Linkage(data=OptionalVec.not_present()).model_dump_json() == "{}"


def test_existing_container_with_wrong_items_fails() -> None:
    with pytest.raises(ValidationError):
        Linkage(data=OptionalVec.one({"id": "a"}))
    with pytest.raises(ValidationError):
        Holder(inner=OptionalVec.many(["x"]))


def test_scalar_items_decode_in_lax_mode() -> None:
    """Scalar item types accept pydantic's lax coercions."""
    assert OptionalVec.decode("5", int) == OptionalVec.one(5)
    assert OptionalVec.decode(True, int) == OptionalVec.one(1)
    assert OptionalVec.decode(["1", 2], int) == OptionalVec.many([1, 2])
