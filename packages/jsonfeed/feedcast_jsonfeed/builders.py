"""Builders for the JSON Feed models."""

from typing import Self

from feedcast_core.builder import ModelBuilder

from .models import (
    VERSION_JSON_FEED_1_1,
    JsonFeed,
    JsonFeedAttachment,
    JsonFeedAuthor,
    JsonFeedItem,
    JsonHub,
)


class JsonFeedAuthorBuilder(ModelBuilder[JsonFeedAuthor]):
    model = JsonFeedAuthor


class JsonFeedAttachmentBuilder(ModelBuilder[JsonFeedAttachment]):
    model = JsonFeedAttachment

    def __init__(self, url: str, mime_type: str):
        super().__init__(url=url, mime_type=mime_type)


class JsonHubBuilder(ModelBuilder[JsonHub]):
    model = JsonHub

    def __init__(self, type: str, url: str):
        super().__init__(type=type, url=url)


class JsonFeedItemBuilder(ModelBuilder[JsonFeedItem]):
    model = JsonFeedItem

    def __init__(self, id: str):
        super().__init__(id=id)

    def author(self, author: JsonFeedAuthor) -> Self:
        return self._append("authors", author)

    def tag(self, tag: str) -> Self:
        return self._append("tags", tag)

    def attachment(self, attachment: JsonFeedAttachment) -> Self:
        return self._append("attachments", attachment)


class JsonFeedBuilder(ModelBuilder[JsonFeed]):
    """
    Builder for ``JsonFeed``.

    The version defaults to JSON Feed 1.1. Items can be passed up front or
    added one at a time with ``item()``.
    """

    model = JsonFeed

    def __init__(
        self,
        title: str,
        items: list[JsonFeedItem] | None = None,
        version: str = VERSION_JSON_FEED_1_1,
    ):
        super().__init__(version=version, title=title, items=list(items or []))

    def item(self, item: JsonFeedItem) -> Self:
        return self._append("items", item)

    def author(self, author: JsonFeedAuthor) -> Self:
        return self._append("authors", author)

    def hub(self, hub: JsonHub) -> Self:
        return self._append("hubs", hub)
