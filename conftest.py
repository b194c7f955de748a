"""Global pytest fixtures for testing."""

import contextlib
from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import dotenv
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from feedcast_api import JsonFeedProvider, RssFeedProvider, create_app
from feedcast_core.config import FeedcastSettings
from feedcast_core.language import RssLanguage
from feedcast_jsonfeed import (
    JsonFeed,
    JsonFeedAttachmentBuilder,
    JsonFeedAuthorBuilder,
    JsonFeedBuilder,
    JsonFeedItemBuilder,
    JsonHubBuilder,
)
from feedcast_rss import (
    ItunesPodcast,
    ItunesPodcastBuilder,
    ItunesPodcastEnclosureType,
    ItunesPodcastEpisodeBuilder,
    ItunesPodcastEpisodeType,
    ItunesPodcastType,
    RssChannel,
    RssChannelBuilder,
    RssChannelImageBuilder,
    RssItemBuilder,
    category_named,
)

with contextlib.suppress(OSError):
    dotenv.load_dotenv()


def gmt(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)


def build_liftoff_channel() -> RssChannel:
    """The Liftoff News sample channel from the RSS 2.0 documentation."""
    return (
        RssChannelBuilder(
            "Liftoff News", "http://liftoff.msfc.nasa.gov/", "Liftoff to Space Exploration."
        )
        .set(
            language=RssLanguage.LANG_ENGLISH_UNITED_STATES,
            pub_date=gmt(2003, 6, 10, 4, 0, 0),
            last_build_date=gmt(2003, 6, 10, 9, 41, 1),
            docs="http://blogs.law.harvard.edu/tech/rss",
            generator="Weblog Editor 2.0",
            managing_editor="editor@example.com",
            web_master="webmaster@example.com",
        )
        .item(
            RssItemBuilder()
            .set(
                title="Star City",
                link="http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp",
                description=(
                    "How do Americans get ready to work with Russians aboard the "
                    "International Space Station? They take a crash course in culture, "
                    "language and protocol at Russia's Star City."
                ),
                pub_date=gmt(2003, 6, 3, 9, 39, 21),
                guid="http://liftoff.msfc.nasa.gov/2003/06/03.html#item573",
            )
            .build()
        )
        .item(
            RssItemBuilder()
            .set(
                description=(
                    "Sky watchers in Europe, Asia, and parts of Alaska and Canada will "
                    'experience a <a href="http://science.nasa.gov/headlines/y2003/'
                    '30may_solareclipse.htm">partial eclipse of the Sun</a> on '
                    "Saturday, May 31st."
                ),
                pub_date=gmt(2003, 5, 30, 11, 6, 42),
                guid="http://liftoff.msfc.nasa.gov/2003/05/30.html#item572",
            )
            .build()
        )
        .item(
            RssItemBuilder()
            .set(
                title="The Engine That Does More",
                link="http://liftoff.msfc.nasa.gov/news/2003/news-VASIMR.asp",
                description=(
                    "Before man travels to Mars, NASA hopes to design new engines that "
                    "will let us fly through the Solar System more quickly."
                ),
                pub_date=gmt(2003, 5, 27, 8, 37, 32),
                guid="http://liftoff.msfc.nasa.gov/2003/05/27.html#item571",
            )
            .build()
        )
        .item(
            RssItemBuilder()
            .set(
                title="Astronauts' Dirty Laundry",
                link="http://liftoff.msfc.nasa.gov/news/2003/news-laundry.asp",
                description=(
                    "Compared to earlier spacecraft, the International Space Station has "
                    "many luxuries, but laundry facilities are not one of them."
                ),
                pub_date=gmt(2003, 5, 20, 8, 56, 2),
                guid="http://liftoff.msfc.nasa.gov/2003/05/20.html#item570",
            )
            .build()
        )
        .build()
    )


def build_hiking_treks_podcast() -> ItunesPodcast:
    """The sample show from Apple's podcast feed documentation."""
    return (
        ItunesPodcastBuilder(
            "Hiking Treks",
            "https://www.apple.com/itunes/podcasts/",
            "Love to get outdoors and discover nature's treasures? Hiking Treks is the show for you.",
        )
        .set(
            language=RssLanguage.LANG_ENGLISH_UNITED_STATES,
            copyright="© 2017 John Appleseed",
            subtitle="Find your trail. Great hikes and outdoor adventures.",
            author="The Sunset Explorers",
            type=ItunesPodcastType.SERIAL,
            summary="Love to get outdoors and discover nature's treasures?",
            image=RssChannelImageBuilder(
                "Hiking Treks",
                "http://podcasts.apple.com/resources/example/hiking_treks/images/cover_art.jpg",
                "https://www.apple.com/itunes/podcasts/",
            ).build(),
        )
        .owner("Sunset Explorers", "mountainscape@icloud.com")
        .category(category_named("SPORTS_AND_RECREATION_OUTDOOR"))
        .keyword("hiking")
        .keyword("outdoors")
        .item(
            ItunesPodcastEpisodeBuilder("Hiking Treks Trailer")
            .set(
                episode_type=ItunesPodcastEpisodeType.TRAILER,
                author="The Sunset Adventurers",
                subtitle="Tips, techniques and recommendations for great hikes.",
                description="The Sunset Explorers share tips for great hikes.",
                content_encoded=(
                    'The Sunset Explorers share tips. Listen on <a href="https://www.apple.com/'
                    'itunes/podcasts/">Apple Podcasts</a>'
                ),
                guid="http://example.com/podcasts/archive/aae20160418.mp3",
                pub_date=gmt(2016, 4, 12, 1, 15, 0),
                duration="17:59",
            )
            .enclosure(
                "http://example.com/podcasts/everything/AllAboutEverythingEpisode4.mp3",
                498537,
                ItunesPodcastEnclosureType.AUDIO_MPEG,
            )
            .build()
        )
        .item(
            ItunesPodcastEpisodeBuilder("S02 EP04 Mt. Hood, Oregon")
            .set(
                episode_type=ItunesPodcastEpisodeType.FULL,
                episode=4,
                season=2,
                author="The Sunset Explorers",
                subtitle="Tips for trekking around the tallest mountain in Oregon",
                summary="Tips for trekking around the tallest mountain in Oregon",
                description="Tips for trekking around the tallest mountain in Oregon",
                guid="http://example.com/podcasts/archive/aae20170606.m4a",
                pub_date=gmt(2016, 6, 6, 12, 0, 0),
                duration="17:04",
                image="http://example.com/podcasts/everything/mthood.jpg",
            )
            .enclosure(
                "http://example.com/podcasts/everything/mthood.m4a",
                8727310,
                ItunesPodcastEnclosureType.AUDIO_X_M4A,
            )
            .build()
        )
        .build()
    )


def build_the_record_feed() -> JsonFeed:
    """A two item podcast feed in the style of the JSON Feed examples."""
    second_item = (
        JsonFeedItemBuilder("1")
        .set(
            content_text="This is a second item.",
            url="https://example.org/second-item",
        )
        .tag("test")
        .build()
    )
    episode = (
        JsonFeedItemBuilder("2")
        .set(
            title="Special #1 - Chris Parrish",
            url="http://therecord.co/chris-parrish",
            content_text=(
                "Chris has worked at Adobe and as a founder of Rogue Sheep, which won an "
                "Apple Design Award for Postage."
            ),
            content_html=(
                "Chris has worked at <a href=\"http://adobe.com/\">Adobe</a> and as a "
                "founder of Rogue Sheep."
            ),
            summary="Brent interviews Chris Parrish, co-host of The Record and one-time Twitter employee.",
            date_published=gmt(2014, 5, 9, 14, 4, 0),
        )
        .attachment(
            JsonFeedAttachmentBuilder(
                "http://therecord.co/downloads/The-Record-sp1e1-ChrisParrish.m4a",
                "audio/x-m4a",
            )
            .set(size_in_bytes=89970236, duration_in_seconds=6629)
            .build()
        )
        .build()
    )
    return (
        JsonFeedBuilder("The Record", [second_item, episode])
        .set(
            user_comment=(
                "This is a podcast feed. You can add this feed to your podcast client "
                "using the following URL: http://therecord.co/feed.json"
            ),
            home_page_url="http://therecord.co/",
            feed_url="http://therecord.co/feed.json",
            language=RssLanguage.LANG_ENGLISH,
        )
        .author(JsonFeedAuthorBuilder().set(name="Brent Simmons").build())
        .hub(JsonHubBuilder("rssCloud", "http://test.com").build())
        .build()
    )


class FakeRssFeedProvider(RssFeedProvider):
    """Serves one channel at the root and under id ``"1"``."""

    def __init__(self, channel: RssChannel | None):
        self.channel = channel

    async def fetch(self) -> RssChannel | None:
        return self.channel

    async def fetch_by_id(self, feed_id: str) -> RssChannel | None:
        return self.channel if feed_id == "1" else None


class FakeJsonFeedProvider(JsonFeedProvider):
    """Serves one feed and records the paging arguments it was asked for."""

    def __init__(self, feed: JsonFeed | None):
        self.feed_value = feed
        self.calls: list[tuple[int | None, int | None]] = []

    async def feed(
        self, max_number_of_items: int | None = None, page_number: int | None = None
    ) -> JsonFeed | None:
        self.calls.append((max_number_of_items, page_number))
        return self.feed_value


@pytest.fixture
def liftoff_channel() -> RssChannel:
    return build_liftoff_channel()


@pytest.fixture
def hiking_treks_podcast() -> ItunesPodcast:
    return build_hiking_treks_podcast()


@pytest.fixture
def the_record_feed() -> JsonFeed:
    return build_the_record_feed()


@pytest.fixture
def rss_provider(liftoff_channel: RssChannel) -> FakeRssFeedProvider:
    return FakeRssFeedProvider(liftoff_channel)


@pytest.fixture
def jsonfeed_provider(the_record_feed: JsonFeed) -> FakeJsonFeedProvider:
    return FakeJsonFeedProvider(the_record_feed)


@pytest.fixture
def test_settings() -> FeedcastSettings:
    """Settings with defaults, independent of the environment."""
    return FeedcastSettings(_env_file=None)


@pytest_asyncio.fixture
async def client(
    rss_provider: FakeRssFeedProvider,
    jsonfeed_provider: FakeJsonFeedProvider,
    test_settings: FeedcastSettings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client over an app serving the sample feeds."""
    app = create_app(rss_provider, jsonfeed_provider, app_settings=test_settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
