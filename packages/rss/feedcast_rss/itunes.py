"""
iTunes podcast extension.

Podcast-specific channel and item models layered on RSS 2.0. They render with
the ``itunes:`` namespace when passed to the iTunes-aware renderer.

See https://help.apple.com/itc/podcasts_connect/#/itcb54353390
"""

from enum import Enum

from pydantic import EmailStr, Field, PositiveInt

from feedcast_core.fields import NonBlankStr

from .models import RssChannel, RssItem, RssModel


class ItunesPodcastType(str, Enum):
    """How episodes of a show are meant to be consumed."""

    EPISODIC = "episodic"  # newest first; the default Apple behaviour
    SERIAL = "serial"  # oldest to newest


class ItunesPodcastEpisodeType(str, Enum):
    """Kind of content an episode carries."""

    FULL = "full"
    TRAILER = "trailer"
    BONUS = "bonus"


class ItunesPodcastEnclosureType(str, Enum):
    """Enclosure MIME types accepted by Apple Podcasts."""

    AUDIO_X_M4A = "audio/x-m4a"
    AUDIO_MPEG = "audio/mpeg"
    VIDEO_QUICKTIME = "video/quicktime"
    VIDEO_MP4 = "video/mp4"
    VIDEO_X_M4V = "video/x-m4v"
    APPLICATION_PDF = "application/pdf"
    DOCUMENT_X_EPUB = "document/x-epub"


class ItunesPodcastOwner(RssModel):
    """Contact information for the owner of the podcast."""

    name: NonBlankStr
    email: EmailStr


class ItunesPodcast(RssChannel):
    """An RSS channel describing a podcast show."""

    owner: ItunesPodcastOwner | None = None
    author: str | None = None
    type: ItunesPodcastType | None = None
    explicit: bool = False
    subtitle: str | None = None
    summary: str | None = None
    keywords: list[str] | None = None
    block: bool = False


class ItunesPodcastEpisode(RssItem):
    """An RSS item describing a single podcast episode."""

    subtitle: str | None = None
    content_encoded: str | None = Field(default=None, alias="contentEncoded")
    summary: str | None = None
    duration: str | None = None  # HH:MM:SS, H:MM:SS, MM:SS or M:SS
    episode_type: ItunesPodcastEpisodeType | None = Field(default=None, alias="episodeType")
    explicit: bool = False
    episode: PositiveInt | None = None
    season: PositiveInt | None = None
    image: str | None = None
