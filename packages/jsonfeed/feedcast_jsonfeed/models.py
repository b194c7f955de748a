"""
JSON Feed 1.1 models.

See https://www.jsonfeed.org/version/1.1/
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PositiveInt,
    SerializerFunctionWrapHandler,
    field_serializer,
    model_serializer,
)

from feedcast_core.dates import format_rfc3339
from feedcast_core.fields import NonBlankStr
from feedcast_core.language import RssLanguage

VERSION_JSON_FEED_1 = "https://jsonfeed.org/version/1"
VERSION_JSON_FEED_1_1 = "https://jsonfeed.org/version/1.1"


def _to_rfc3339(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_rfc3339(value)
    return value


def _to_language_code(value: Any) -> Any:
    if isinstance(value, RssLanguage):
        return value.language_code
    return value


Rfc3339Str = Annotated[str, BeforeValidator(_to_rfc3339)]
"""RFC 3339 timestamp; datetimes are formatted on the way in."""

LanguageStr = Annotated[str, BeforeValidator(_to_language_code)]
"""RFC 5646 language tag; accepts an ``RssLanguage``."""


class JsonFeedModel(BaseModel):
    """
    Base for the JSON Feed value objects.

    Serialization follows field declaration order and leaves out absent
    values and empty lists, so ``model_dump_json()`` is the wire format.
    """

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def drop_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {
            key: value
            for key, value in handler(self).items()
            if value is not None and value != []
        }

    def to_dict(self) -> dict[str, Any]:
        """Return the present fields only."""
        return self.model_dump(mode="json")


class JsonFeedAuthor(JsonFeedModel):
    """Author of a feed or of an item. All fields are optional."""

    name: str | None = None
    url: str | None = None
    avatar: str | None = None

    def is_empty(self) -> bool:
        """True when name, url and avatar are all absent."""
        return self.name is None and self.url is None and self.avatar is None


def _present_authors(
    authors: list[JsonFeedAuthor] | None, handler: SerializerFunctionWrapHandler
) -> Any:
    if authors is None:
        return None
    return handler([author for author in authors if not author.is_empty()])


def _present_author(
    author: JsonFeedAuthor | None, handler: SerializerFunctionWrapHandler
) -> Any:
    if author is None or author.is_empty():
        return None
    return handler(author)


class JsonFeedAttachment(JsonFeedModel):
    """Related resource of an item, e.g. a podcast episode's audio file."""

    url: NonBlankStr
    mime_type: NonBlankStr
    title: str | None = None
    size_in_bytes: PositiveInt | None = None
    duration_in_seconds: PositiveInt | None = None


class JsonHub(JsonFeedModel):
    """Endpoint that can be used to subscribe to real-time notifications."""

    url: NonBlankStr
    type: NonBlankStr


class JsonFeedItem(JsonFeedModel):
    """An item in a JSON feed; only ``id`` is required."""

    id: NonBlankStr
    url: str | None = None
    external_url: str | None = None
    title: str | None = None
    content_html: str | None = None
    content_text: str | None = None
    summary: str | None = None
    image: str | None = None
    banner_image: str | None = None
    date_published: Rfc3339Str | None = None
    date_modified: Rfc3339Str | None = None
    author: JsonFeedAuthor | None = None  # deprecated in 1.1, use authors
    authors: list[JsonFeedAuthor] | None = None
    tags: list[str] | None = None
    language: LanguageStr | None = None
    attachments: list[JsonFeedAttachment] | None = None

    @field_serializer("authors", mode="wrap")
    def serialize_authors(self, authors, handler: SerializerFunctionWrapHandler) -> Any:
        return _present_authors(authors, handler)

    @field_serializer("author", mode="wrap")
    def serialize_author(self, author, handler: SerializerFunctionWrapHandler) -> Any:
        return _present_author(author, handler)


class JsonFeed(JsonFeedModel):
    """
    A JSON feed.

    ``version`` is the URL of the format version, normally
    ``VERSION_JSON_FEED_1_1``. A feed always carries at least one item.
    """

    version: NonBlankStr
    title: NonBlankStr
    home_page_url: str | None = None
    feed_url: str | None = None
    description: str | None = None
    user_comment: str | None = None
    next_url: str | None = None
    icon: str | None = None
    favicon: str | None = None
    authors: list[JsonFeedAuthor] | None = None
    author: JsonFeedAuthor | None = None  # deprecated in 1.1, use authors
    items: list[JsonFeedItem] = Field(min_length=1)
    language: LanguageStr | None = None
    expired: bool | None = None
    hubs: list[JsonHub] | None = None

    @field_serializer("authors", mode="wrap")
    def serialize_authors(self, authors, handler: SerializerFunctionWrapHandler) -> Any:
        return _present_authors(authors, handler)

    @field_serializer("author", mode="wrap")
    def serialize_author(self, author, handler: SerializerFunctionWrapHandler) -> Any:
        return _present_author(author, handler)
