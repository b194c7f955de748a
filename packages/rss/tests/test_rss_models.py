"""Tests for RSS and iTunes models and builders."""

import pytest
from pydantic import ValidationError

from feedcast_core.language import RssLanguage
from feedcast_rss import (
    ItunesPodcastBuilder,
    ItunesPodcastEnclosureType,
    ItunesPodcastEpisode,
    ItunesPodcastEpisodeBuilder,
    ItunesPodcastOwner,
    RssChannelBuilder,
    RssItemBuilder,
    RssItemEnclosure,
    RssItemEnclosureBuilder,
    RssSkipDay,
    RssSkipHour,
    category_named,
)


class TestRssChannel:
    """Channel construction."""

    @pytest.mark.parametrize(
        ("title", "link", "description"),
        [
            ("", "http://example.com", "Description"),
            ("Title", "   ", "Description"),
            ("Title", "http://example.com", ""),
        ],
    )
    def test_required_fields_must_not_be_blank(self, title, link, description):
        with pytest.raises(ValidationError):
            RssChannelBuilder(title, link, description).build()

    def test_channel_is_immutable(self, liftoff_channel):
        with pytest.raises(ValidationError):
            liftoff_channel.title = "Changed"

    def test_skip_lists_drop_duplicates(self):
        channel = (
            RssChannelBuilder("Skips", "http://example.com", "Skips")
            .skip_hour(RssSkipHour.HOUR_3)
            .skip_hour(3)
            .skip_day(RssSkipDay.MONDAY)
            .skip_day(RssSkipDay.MONDAY)
            .build()
        )

        assert channel.skip_hours == [RssSkipHour.HOUR_3]
        assert channel.skip_days == [RssSkipDay.MONDAY]

    def test_to_dict_uses_wire_names(self, liftoff_channel):
        data = liftoff_channel.to_dict()

        assert data["title"] == "Liftoff News"
        assert data["language"] == "en-us"
        assert data["managingEditor"] == "editor@example.com"
        assert len(data["item"]) == 4
        assert "copyright" not in data
        assert "textInput" not in data

    def test_category_from_table(self):
        channel = (
            RssChannelBuilder("Design", "http://example.com", "Design")
            .category(category_named("ARTS_DESIGN"))
            .build()
        )

        assert channel.category == [["Arts", "Design"]]

    def test_language_accepts_enum(self):
        channel = (
            RssChannelBuilder("Lang", "http://example.com", "Lang")
            .set(language=RssLanguage.LANG_ESTONIAN)
            .build()
        )

        assert channel.language.language_code == "et"


class TestRssItem:
    """Item and enclosure construction."""

    def test_all_item_fields_are_optional(self):
        item = RssItemBuilder().build()

        assert item.title is None
        assert item.to_dict() == {}

    @pytest.mark.parametrize("length", [0, -1])
    def test_enclosure_length_must_be_positive(self, length):
        with pytest.raises(ValidationError):
            RssItemEnclosure(url="http://example.com/a.mp3", length=length, type="audio/mpeg")

    def test_enclosure_url_is_required(self):
        with pytest.raises(ValidationError):
            RssItemEnclosureBuilder("", 10, "audio/mpeg").build()

    def test_enclosure_accepts_itunes_type(self):
        enclosure = RssItemEnclosureBuilder(
            "http://example.com/a.m4a", 10, ItunesPodcastEnclosureType.AUDIO_X_M4A
        ).build()

        assert enclosure.type == "audio/x-m4a"


class TestItunesPodcast:
    """iTunes podcast construction."""

    def test_builder_collects_podcast_fields(self, hiking_treks_podcast):
        assert hiking_treks_podcast.owner == ItunesPodcastOwner(
            name="Sunset Explorers", email="mountainscape@icloud.com"
        )
        assert hiking_treks_podcast.keywords == ["hiking", "outdoors"]
        assert hiking_treks_podcast.explicit is False
        assert hiking_treks_podcast.block is False
        assert all(isinstance(item, ItunesPodcastEpisode) for item in hiking_treks_podcast.items)

    def test_keywords_absent_by_default(self):
        podcast = ItunesPodcastBuilder("Show", "http://example.com", "Show").build()

        assert podcast.keywords is None
        assert "keywords" not in podcast.to_dict()

    def test_owner_email_is_validated(self):
        with pytest.raises(ValidationError):
            ItunesPodcastBuilder("Show", "http://example.com", "Show").owner("Owner", "not-an-email")

    def test_episode_numbers_must_be_positive(self):
        with pytest.raises(ValidationError):
            ItunesPodcastEpisodeBuilder("Zero").set(episode=0).build()

    def test_to_dict_keeps_episode_fields(self, hiking_treks_podcast):
        data = hiking_treks_podcast.to_dict()

        assert data["type"] == "serial"
        assert data["item"][0]["episodeType"] == "trailer"
        assert data["item"][1]["season"] == 2
