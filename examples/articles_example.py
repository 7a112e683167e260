"""Example compound document: an article with its author and comments.

Run with:
    python examples/articles_example.py
"""
from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from typed_jsonapi import (
    Attributes,
    Document,
    JSONAPIDocumentBuilder,
    Link,
    ResourceObject,
    ResourceSerializer,
)
from typed_jsonapi.logging_config import setup_logging


class Article(Attributes):
    title: str

    @classmethod
    def kind(cls) -> str:
        return "articles"

    @classmethod
    def links(cls, id: str) -> dict[str, Link]:
        return {"self": Link.new(f"/articles/{id}")}


class People(Attributes):
    model_config = ConfigDict(
        alias_generator=lambda name: name.replace("_", "-"), populate_by_name=True
    )

    first_name: str
    last_name: str
    contact: str

    @classmethod
    def kind(cls) -> str:
        return "people"

    @classmethod
    def links(cls, id: str) -> dict[str, Link]:
        return {"self": Link.new(f"/people/{id}")}


class Comment(Attributes):
    body: str

    @classmethod
    def kind(cls) -> str:
        return "comments"

    @classmethod
    def links(cls, id: str) -> dict[str, Link]:
        return {"self": Link.new(f"/comments/{id}")}


article_serializer = ResourceSerializer(Article)
comment_serializer = ResourceSerializer(Comment)


def build_article_document() -> Document:
    """Build the article document with the author and comments included."""
    author = ResourceObject.new(
        "9", People(first_name="kitty", last_name="cat", contact="kitty@cat.space")
    )
    person_2 = ResourceObject[People].new("2", None)

    comment_5 = ResourceObject.new("5", Comment(body="First!"))
    comment_5.add_relationship(
        "author", comment_serializer.relationship_object(comment_5, "author", person_2)
    )
    comment_12 = ResourceObject.new("12", Comment(body="I like XML better"))
    comment_12.add_relationship(
        "author", comment_serializer.relationship_object(comment_12, "author", author)
    )
    comments = [comment_5, comment_12]

    article = ResourceObject.new("1", Article(title="JSON:API is kind of strange"))
    article.add_relationship(
        "author",
        article_serializer.relationship_object(article, "author", author, base_url=""),
    )
    article.add_relationship(
        "comments",
        article_serializer.relationship_object(article, "comments", comments, base_url=""),
    )

    return JSONAPIDocumentBuilder().build_single(article, included=[*comments, author])


class ArticleView(BaseModel):
    title: str
    comments: list[str]


def read_article_document(payload: str) -> ArticleView:
    """Parse a serialized document back into typed resources."""
    document = Document.model_validate_json(payload)
    [article] = document.resources(Article)
    comments = {comment.id: comment for comment in document.included_resources(Comment)}
    comment_ids = [identifier.id for identifier in article.relationships["comments"].identifiers()]
    return ArticleView(
        title=article.attributes.title,
        comments=[comments[comment_id].attributes.body for comment_id in comment_ids],
    )


if __name__ == "__main__":
    logger = setup_logging(logging.DEBUG)
    payload = build_article_document().model_dump_json(indent=2)
    print(payload)
    logger.info("Read back: %s", read_article_document(payload))
