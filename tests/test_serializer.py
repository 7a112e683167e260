"""Tests for the resource serializer."""

import logging

import pytest

from typed_jsonapi.core.exceptions import ImproperTypeError
from typed_jsonapi.core.optional_vec import OptionalVec
from typed_jsonapi.schemas import Attributes, GenericObject, Identifier, Link, ResourceObject
from typed_jsonapi.serializers import ResourceSerializer


class Post(Attributes):
    body: str

    @classmethod
    def kind(cls) -> str:
        return "posts"


class Tag(Attributes):
    name: str

    @classmethod
    def kind(cls) -> str:
        return "tags"


@pytest.fixture
def serializer() -> ResourceSerializer[Post]:
    return ResourceSerializer(Post)


def test_type(serializer: ResourceSerializer[Post]) -> None:
    assert serializer.type_ == "posts"
    assert serializer.resource_class is ResourceObject[Post]


def test_to_many_and_back(serializer: ResourceSerializer[Post]) -> None:
    posts = [ResourceObject.new("1", Post(body="a")), ResourceObject.new("2", Post(body="b"))]
    objects = serializer.to_many(posts)
    assert objects == [
        GenericObject(id="1", type="posts", attributes={"body": "a"}),
        GenericObject(id="2", type="posts", attributes={"body": "b"}),
    ]
    assert serializer.from_many(objects) == posts
    assert serializer.identifiers(posts) == [
        Identifier.new("1", "posts"),
        Identifier.new("2", "posts"),
    ]


def test_from_many_is_all_or_nothing(serializer: ResourceSerializer[Post]) -> None:
    objects = [
        GenericObject(id="1", type="posts", attributes={"body": "a"}),
        GenericObject(id="2", type="tags", attributes={"name": "b"}),
    ]
    with pytest.raises(ImproperTypeError):
        serializer.from_many(objects)


def test_from_identifier(serializer: ResourceSerializer[Post]) -> None:
    resource = serializer.from_identifier(Identifier.new("1", "posts"))
    assert resource.id == "1"
    assert resource.attributes is None


def test_resource_links(serializer: ResourceSerializer[Post]) -> None:
    assert serializer.resource_links("7", base_url="http://example.com/") == {
        "self": Link("http://example.com/posts/7")
    }
    assert serializer.resource_links("7") == {"self": Link("/posts/7")}


def test_relationship_object(serializer: ResourceSerializer[Post]) -> None:
    post = ResourceObject.new("1", Post(body="a"))
    tags = [ResourceObject.new("t1", Tag(name="x")), Identifier.new("t2", "tags")]

    to_many = serializer.relationship_object(post, "tags", tags, base_url="/api")
    assert to_many.model_dump_json() == (
        '{"links":{"related":"/api/posts/1/tags","self":"/api/posts/1/relationships/tags"},'
        '"data":[{"id":"t1","type":"tags"},{"id":"t2","type":"tags"}]}'
    )

    to_one = serializer.relationship_object(post, "featured", tags[0])
    assert to_one.links is None
    assert to_one.data == OptionalVec.one(Identifier.new("t1", "tags"))

    empty = serializer.relationship_object(post, "featured", None)
    assert empty.model_dump_json() == '{"data":null}'

    none_yet = serializer.relationship_object(post, "tags", [])
    assert none_yet.model_dump_json() == '{"data":[]}'


def test_unique_keeps_first(caplog: pytest.LogCaptureFixture) -> None:
    first = GenericObject(id="1", type="posts", attributes={"body": "first"})
    duplicate = GenericObject(id="1", type="posts", attributes={"body": "second"})
    other = GenericObject(id="1", type="tags")

    with caplog.at_level(logging.DEBUG, logger="typed_jsonapi"):
        unique = ResourceSerializer.unique([first, duplicate, other])

    assert unique == [first, other]
    assert "Skipping duplicate resource posts/1" in caplog.text


def test_downgrade_passes_generic_through() -> None:
    generic = GenericObject(id="1", type="posts")
    assert ResourceSerializer.downgrade(generic) is generic
    resource = ResourceObject.new("1", Post(body="a"))
    assert ResourceSerializer.downgrade(resource) == resource.to_generic()
