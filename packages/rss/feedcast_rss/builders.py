"""
Builders for RSS and iTunes podcast models.

Required fields are positional constructor arguments; everything else is set
fluently::

    channel = (
        RssChannelBuilder("Liftoff News", "http://liftoff.msfc.nasa.gov/", "Liftoff to Space Exploration.")
        .set(language=RssLanguage.LANG_ENGLISH_UNITED_STATES)
        .item(RssItemBuilder().set(title="Star City").build())
        .build()
    )
"""

from collections.abc import Sequence
from typing import Self

from feedcast_core.builder import ModelBuilder

from .categories import ItunesPodcastCategory
from .itunes import (
    ItunesPodcast,
    ItunesPodcastEnclosureType,
    ItunesPodcastEpisode,
    ItunesPodcastOwner,
)
from .models import (
    RssChannel,
    RssChannelImage,
    RssItem,
    RssItemEnclosure,
    RssSkipDay,
    RssSkipHour,
)


def _category_path(category: Sequence[str] | ItunesPodcastCategory) -> list[str]:
    if isinstance(category, ItunesPodcastCategory):
        return category.categories
    return list(category)


class RssItemEnclosureBuilder(ModelBuilder[RssItemEnclosure]):
    model = RssItemEnclosure

    def __init__(self, url: str, length: int, type: str | ItunesPodcastEnclosureType):
        if isinstance(type, ItunesPodcastEnclosureType):
            type = type.value
        super().__init__(url=url, length=length, type=type)


class RssChannelImageBuilder(ModelBuilder[RssChannelImage]):
    model = RssChannelImage

    def __init__(self, title: str, url: str, link: str):
        super().__init__(title=title, url=url, link=link)


class RssItemBuilder(ModelBuilder[RssItem]):
    model = RssItem

    def category(self, category: str) -> Self:
        return self._append("category", category)

    def enclosure(
        self, url: str, length: int, type: str | ItunesPodcastEnclosureType
    ) -> Self:
        return self.set(enclosure=RssItemEnclosureBuilder(url, length, type).build())


class ItunesPodcastEpisodeBuilder(RssItemBuilder):
    model = ItunesPodcastEpisode

    def __init__(self, title: str):
        super().__init__(title=title)


class RssChannelBuilder(ModelBuilder[RssChannel]):
    model = RssChannel

    def __init__(self, title: str, link: str, description: str):
        super().__init__(title=title, link=link, description=description)

    def item(self, item: RssItem) -> Self:
        return self._append("items", item)

    def category(self, category: Sequence[str] | ItunesPodcastCategory) -> Self:
        """Add one category path, e.g. ``["Arts", "Design"]``."""
        return self._append("category", _category_path(category))

    def skip_hour(self, hour: RssSkipHour | int) -> Self:
        return self._append("skip_hours", RssSkipHour(hour))

    def skip_day(self, day: RssSkipDay) -> Self:
        return self._append("skip_days", day)


class ItunesPodcastBuilder(RssChannelBuilder):
    model = ItunesPodcast

    def owner(self, name: str, email: str) -> Self:
        return self.set(owner=ItunesPodcastOwner(name=name, email=email))

    def keyword(self, keyword: str) -> Self:
        return self._append("keywords", keyword)
