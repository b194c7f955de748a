"""
RSS publishing package.

Provides RSS 2.0 and iTunes podcast models, builders, the Apple category
table and the XML renderers.
"""

from .builders import (
    ItunesPodcastBuilder,
    ItunesPodcastEpisodeBuilder,
    RssChannelBuilder,
    RssChannelImageBuilder,
    RssItemBuilder,
    RssItemEnclosureBuilder,
)
from .categories import (
    ITUNES_PODCAST_CATEGORIES,
    ItunesPodcastCategory,
    category_by,
    category_named,
)
from .itunes import (
    ItunesPodcast,
    ItunesPodcastEnclosureType,
    ItunesPodcastEpisode,
    ItunesPodcastEpisodeType,
    ItunesPodcastOwner,
    ItunesPodcastType,
)
from .itunes_renderer import ITUNES_NAMESPACE, ItunesPodcastRenderer, render_feed
from .models import (
    RssChannel,
    RssChannelImage,
    RssItem,
    RssItemEnclosure,
    RssSkipDay,
    RssSkipHour,
    RssTextInput,
)
from .renderer import CONTENT_NAMESPACE, RssFeedRenderer

__all__ = [
    "RssChannel",
    "RssChannelImage",
    "RssItem",
    "RssItemEnclosure",
    "RssSkipDay",
    "RssSkipHour",
    "RssTextInput",
    "ItunesPodcast",
    "ItunesPodcastEnclosureType",
    "ItunesPodcastEpisode",
    "ItunesPodcastEpisodeType",
    "ItunesPodcastOwner",
    "ItunesPodcastType",
    "ItunesPodcastCategory",
    "ITUNES_PODCAST_CATEGORIES",
    "category_by",
    "category_named",
    "RssChannelBuilder",
    "RssChannelImageBuilder",
    "RssItemBuilder",
    "RssItemEnclosureBuilder",
    "ItunesPodcastBuilder",
    "ItunesPodcastEpisodeBuilder",
    "RssFeedRenderer",
    "ItunesPodcastRenderer",
    "render_feed",
    "CONTENT_NAMESPACE",
    "ITUNES_NAMESPACE",
]
