"""
RSS 2.0 models.

Immutable value objects describing an RSS 2.0 channel and its items.

See https://cyber.harvard.edu/rss/rss.html for the element definitions.
"""

from datetime import datetime
from enum import Enum, IntEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_serializer

from feedcast_core.fields import NonBlankStr, UniqueList
from feedcast_core.language import RssLanguage


class RssSkipDay(str, Enum):
    """Day of the week an aggregator may skip."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class RssSkipHour(IntEnum):
    """Hour of the day (GMT) an aggregator may skip."""

    HOUR_0 = 0
    HOUR_1 = 1
    HOUR_2 = 2
    HOUR_3 = 3
    HOUR_4 = 4
    HOUR_5 = 5
    HOUR_6 = 6
    HOUR_7 = 7
    HOUR_8 = 8
    HOUR_9 = 9
    HOUR_10 = 10
    HOUR_11 = 11
    HOUR_12 = 12
    HOUR_13 = 13
    HOUR_14 = 14
    HOUR_15 = 15
    HOUR_16 = 16
    HOUR_17 = 17
    HOUR_18 = 18
    HOUR_19 = 19
    HOUR_20 = 20
    HOUR_21 = 21
    HOUR_22 = 22
    HOUR_23 = 23


class RssModel(BaseModel):
    """Base for all feed value objects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the present fields only, keyed by their wire names."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, serialize_as_any=True
        )


class RssItemEnclosure(RssModel):
    """Media object attached to an item."""

    url: NonBlankStr
    length: PositiveInt  # bytes
    type: NonBlankStr  # MIME type


class RssChannelImage(RssModel):
    """GIF, JPEG or PNG image that can be displayed with the channel."""

    title: str
    url: str
    link: str
    width: PositiveInt | None = None
    height: PositiveInt | None = None
    description: str | None = None


class RssTextInput(RssModel):
    """Text input box that can be displayed with the channel."""

    title: str
    description: str
    name: str
    link: str


class RssItem(RssModel):
    """
    A story in the channel.

    All fields are optional, but at least one of title or description
    should be present for the item to be meaningful.
    """

    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    category: list[str] | None = None
    comments: str | None = None
    enclosure: RssItemEnclosure | None = None
    pub_date: datetime | None = Field(default=None, alias="pubDate")
    guid: str | None = None
    source: str | None = None


class RssChannel(RssModel):
    """
    An RSS 2.0 channel.

    ``category`` holds hierarchical paths: ``[["Arts", "Design"]]`` is one
    category nested two levels deep.
    """

    title: NonBlankStr
    link: NonBlankStr
    description: NonBlankStr
    language: RssLanguage | None = None
    copyright: str | None = None
    managing_editor: str | None = Field(default=None, alias="managingEditor")
    web_master: str | None = Field(default=None, alias="webMaster")
    pub_date: datetime | None = Field(default=None, alias="pubDate")
    last_build_date: datetime | None = Field(default=None, alias="lastBuildDate")
    category: list[list[str]] | None = None
    generator: str | None = None
    docs: str | None = None
    cloud: str | None = None
    ttl: PositiveInt | None = None  # minutes
    image: RssChannelImage | None = None
    rating: str | None = None
    text_input: RssTextInput | None = Field(default=None, alias="textInput")
    skip_hours: Annotated[list[RssSkipHour], UniqueList] | None = Field(
        default=None, alias="skipHours"
    )
    skip_days: Annotated[list[RssSkipDay], UniqueList] | None = Field(
        default=None, alias="skipDays"
    )
    items: list[RssItem] | None = Field(default=None, alias="item")

    @field_serializer("language")
    def _serialize_language(self, language: RssLanguage | None) -> str | None:
        return language.language_code if language else None
