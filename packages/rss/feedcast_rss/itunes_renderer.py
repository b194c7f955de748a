"""
iTunes podcast renderer.

Extends the RSS 2.0 renderer with the ``itunes:`` namespace. Plain RSS
channels and items pass through unchanged, so this is safe to use as the
default renderer for every channel.
"""

from .itunes import ItunesPodcast, ItunesPodcastEpisode
from .models import RssChannel, RssItem
from .renderer import (
    CONTENT_NAMESPACE,
    WRITE_ERRORS,
    RssFeedRenderer,
    XmlWriter,
    qualified,
)

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"

ITUNES_SUMMARY = qualified(ITUNES_NAMESPACE, "summary")
ITUNES_AUTHOR = qualified(ITUNES_NAMESPACE, "author")
ITUNES_SUBTITLE = qualified(ITUNES_NAMESPACE, "subtitle")
ITUNES_TYPE = qualified(ITUNES_NAMESPACE, "type")
ITUNES_OWNER = qualified(ITUNES_NAMESPACE, "owner")
ITUNES_NAME = qualified(ITUNES_NAMESPACE, "name")
ITUNES_EMAIL = qualified(ITUNES_NAMESPACE, "email")
ITUNES_IMAGE = qualified(ITUNES_NAMESPACE, "image")
ITUNES_CATEGORY = qualified(ITUNES_NAMESPACE, "category")
ITUNES_KEYWORDS = qualified(ITUNES_NAMESPACE, "keywords")
ITUNES_EXPLICIT = qualified(ITUNES_NAMESPACE, "explicit")
ITUNES_BLOCK = qualified(ITUNES_NAMESPACE, "block")
ITUNES_EPISODE_TYPE = qualified(ITUNES_NAMESPACE, "episodeType")
ITUNES_TITLE = qualified(ITUNES_NAMESPACE, "title")
ITUNES_DURATION = qualified(ITUNES_NAMESPACE, "duration")
ITUNES_EPISODE = qualified(ITUNES_NAMESPACE, "episode")
ITUNES_SEASON = qualified(ITUNES_NAMESPACE, "season")
CONTENT_ENCODED = qualified(CONTENT_NAMESPACE, "encoded")


def yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


class ItunesPodcastRenderer(RssFeedRenderer):
    """Render RSS 2.0 channels, adding iTunes elements for podcasts."""

    def rss_namespaces(self, channel: RssChannel) -> dict[str, str]:
        namespaces = super().rss_namespaces(channel)
        if isinstance(channel, ItunesPodcast):
            namespaces["itunes"] = ITUNES_NAMESPACE
        return namespaces

    def write_channel(self, xf: XmlWriter, channel: RssChannel) -> None:
        super().write_channel(xf, channel)
        if isinstance(channel, ItunesPodcast):
            self.write_podcast(xf, channel)

    def write_item(self, xf: XmlWriter, item: RssItem) -> None:
        super().write_item(xf, item)
        if isinstance(item, ItunesPodcastEpisode):
            self.write_episode(xf, item)

    def write_owner(self, xf: XmlWriter, podcast: ItunesPodcast) -> None:
        """
        Write ``itunes:owner``.

        Apple requires an owner, so a podcast without one is reported as a
        write failure rather than silently skipped.
        """
        if podcast.owner is None:
            self.write_failed(ITUNES_OWNER, ValueError("iTunes podcast has no owner"))
            return

        try:
            with xf.element(ITUNES_OWNER):
                self.write_element(xf, ITUNES_NAME, podcast.owner.name)
                self.write_element(xf, ITUNES_EMAIL, podcast.owner.email)
        except WRITE_ERRORS as e:
            self.write_failed(ITUNES_OWNER, e)

    def write_podcast(self, xf: XmlWriter, podcast: ItunesPodcast) -> None:
        """Write the show-level iTunes elements after the standard channel content."""
        self.write_optional(xf, ITUNES_SUMMARY, podcast.summary)
        self.write_optional(xf, ITUNES_AUTHOR, podcast.author)
        self.write_optional(xf, ITUNES_SUBTITLE, podcast.subtitle)
        if podcast.type is not None:
            self.write_element(xf, ITUNES_TYPE, podcast.type.value)
        self.write_owner(xf, podcast)

        if podcast.image is not None:
            try:
                with xf.element(ITUNES_IMAGE, {"href": podcast.image.url}):
                    pass
            except WRITE_ERRORS as e:
                self.write_failed(ITUNES_IMAGE, e)

        for path in podcast.category or []:
            self.write_category(xf, path, ITUNES_CATEGORY)
        if podcast.keywords:
            self.write_element(xf, ITUNES_KEYWORDS, ", ".join(podcast.keywords))
        self.write_element(xf, ITUNES_EXPLICIT, yes_no(podcast.explicit))
        self.write_element(xf, ITUNES_BLOCK, yes_no(podcast.block))

    def write_episode(self, xf: XmlWriter, episode: ItunesPodcastEpisode) -> None:
        """Write the episode-level iTunes elements after the standard item content."""
        if episode.episode_type is not None:
            self.write_element(xf, ITUNES_EPISODE_TYPE, episode.episode_type.value)
        self.write_optional(xf, ITUNES_TITLE, episode.title)
        self.write_optional(xf, ITUNES_SUBTITLE, episode.subtitle)
        self.write_optional(xf, ITUNES_AUTHOR, episode.author)
        self.write_optional(xf, ITUNES_SUMMARY, episode.summary)
        self.write_optional(xf, CONTENT_ENCODED, episode.content_encoded)
        self.write_optional(xf, ITUNES_DURATION, episode.duration)
        self.write_optional(xf, ITUNES_EPISODE, episode.episode)
        self.write_optional(xf, ITUNES_SEASON, episode.season)
        self.write_element(xf, ITUNES_EXPLICIT, yes_no(episode.explicit))


def render_feed(channel: RssChannel, strict: bool | None = None) -> bytes:
    """Render any RSS channel (podcast or not) to bytes."""
    return ItunesPodcastRenderer(strict=strict).render_to_bytes(channel)

